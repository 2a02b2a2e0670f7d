"""
AI player for TicTacToe.
Uses the Minimax algorithm to choose the best move.
"""

from contextlib import contextmanager
from typing import Iterator, Optional

from .game_state import (
    GameState, Player, Outcome, Board, InvalidStateError,
    COMPUTER_PLAYER, HUMAN_PLAYER, index_to_cell,
)
from .win_checker import evaluate
from .config import GameConfig


# Terminal scores from the computer's point of view
SCORES = {
    Outcome.OPPONENT_WINS: 1,
    Outcome.PLAYER_WINS: -1,
    Outcome.DRAW: 0,
}


@contextmanager
def placed(board: Board, index: int, player: Player) -> Iterator[Board]:
    """
    Tentatively place a mark, restoring the cell to empty on exit.
    """
    board[index] = player
    try:
        yield board
    finally:
        board[index] = None


class AIPlayer:
    """
    An AI that plays TicTacToe using the Minimax algorithm.

    The AI will always play optimally - it will win if possible,
    block the opponent if needed, and never lose (at worst, draw).

    The search is a plain, full minimax without pruning. Terminal
    positions score +1 / -1 / 0 regardless of depth, so a quick win is
    not preferred over a slow one. Ties go to the lowest cell index.
    """

    def __init__(self, verbose: Optional[bool] = None):
        """
        Initialize the AI player.

        Args:
            verbose: Print a summary line after each search
                (default: GameConfig.VERBOSE).
        """
        self.player = COMPUTER_PLAYER
        self.verbose = GameConfig.VERBOSE if verbose is None else verbose

        # Keep track of how many positions we've evaluated (for debugging)
        self.moves_evaluated = 0

    def best_move(self, board: Board) -> int:
        """
        Find the best move for the computer on a raw board.

        The board is explored in place and left unchanged on return.

        Args:
            board: 9 cells, row-major, None for empty.

        Returns:
            Index of the chosen cell.

        Raises:
            InvalidStateError: If the game is already decided or there is
                no empty cell.
        """
        self.moves_evaluated = 0

        outcome = evaluate(board)
        if outcome.is_terminal:
            raise InvalidStateError(f"no legal move: game is over ({outcome.value})")

        best_score = None
        best_index = None

        for index, cell in enumerate(board):
            if cell is not None:
                continue
            with placed(board, index, self.player):
                score = self.minimax(board, is_maximizing=False)
            if best_score is None or score > best_score:
                best_score = score
                best_index = index

        if self.verbose:
            print(f"AI evaluated {self.moves_evaluated} positions. "
                  f"Best move: {best_index} (score: {best_score})")

        return best_index

    def minimax(self, board: Board, is_maximizing: bool) -> int:
        """
        Minimax algorithm.

        Args:
            board: Board to evaluate. Mutated during the search and
                restored before returning.
            is_maximizing: True if it's the computer's turn.

        Returns:
            The score of the position.
        """
        self.moves_evaluated += 1

        outcome = evaluate(board)
        if outcome.is_terminal:
            return SCORES[outcome]

        if is_maximizing:
            mover, pick = COMPUTER_PLAYER, max
        else:
            mover, pick = HUMAN_PLAYER, min

        scores = []
        for index, cell in enumerate(board):
            if cell is not None:
                continue
            with placed(board, index, mover):
                scores.append(self.minimax(board, not is_maximizing))

        return pick(scores)

    def get_best_move(self, game_state: GameState) -> int:
        """
        Get the best move for the current position of a game session.

        Args:
            game_state: Current game state.

        Returns:
            Index of the best move.

        Raises:
            InvalidStateError: If it's not the computer's turn, or there
                is no legal move.
        """
        if game_state.is_game_over:
            raise InvalidStateError("no legal move: game is over")

        if game_state.current_player != self.player:
            raise InvalidStateError(f"It's not {self.player.value}'s turn!")

        # Search a scratch copy so the live board is never touched
        return self.best_move(list(game_state.board))

    def get_move_suggestion(self, game_state: GameState) -> str:
        """
        Get a human-readable move suggestion.

        Args:
            game_state: Current game state.

        Returns:
            A string describing the suggested move.
        """
        if game_state.is_game_over or not game_state.get_empty_cells():
            return "No moves available!"

        index = self.get_best_move(game_state)
        row, col = index_to_cell(index)

        return f"Place {self.player.value} at cell {index + 1} (row {row}, col {col})"


def minimax(board: Board, is_maximizing: bool) -> int:
    """Score a board for the computer with a full minimax search."""
    return AIPlayer(verbose=False).minimax(board, is_maximizing)


def best_move(board: Board) -> int:
    """Return the computer's best move on the given board."""
    return AIPlayer(verbose=False).best_move(board)
