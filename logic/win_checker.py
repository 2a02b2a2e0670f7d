"""
Win checker for TicTacToe.
Checks if a player has won or if the game is a draw.
"""

from typing import Optional, Tuple
from .game_state import GameState, Player, Outcome, Board, BOARD_CELLS


# All possible winning lines (as board indices)
WINNING_LINES: Tuple[Tuple[int, int, int], ...] = (
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
)

_WIN_OUTCOMES = {
    Player.X: Outcome.PLAYER_WINS,
    Player.O: Outcome.OPPONENT_WINS,
}


def _line_owner(board: Board, line: Tuple[int, int, int]) -> Optional[Player]:
    """Return the mark filling the whole line, or None."""
    a, b, c = line
    if board[a] is not None and board[a] == board[b] == board[c]:
        return board[a]
    return None


def evaluate(board: Board) -> Outcome:
    """
    Evaluate a board.

    The first completed line decides the winner. A full board without a
    completed line is a draw; anything else is still ongoing.

    Args:
        board: 9 cells, row-major, None for empty.

    Returns:
        The Outcome of the board.
    """
    if len(board) != BOARD_CELLS:
        raise ValueError(f"Board must have {BOARD_CELLS} cells, got {len(board)}")

    for line in WINNING_LINES:
        owner = _line_owner(board, line)
        if owner is not None:
            return _WIN_OUTCOMES[owner]

    if None not in board:
        return Outcome.DRAW

    return Outcome.ONGOING


class WinChecker:
    """
    Checks for win conditions on a game session.

    Win condition: 3 marks of the same player in a row
    (horizontally, vertically, or diagonally)
    """

    WINNING_LINES = WINNING_LINES

    def check_winner(self, game_state: GameState) -> Optional[Player]:
        """
        Check if there's a winner.

        Args:
            game_state: The current game state.

        Returns:
            The winning Player, or None if no winner yet.
        """
        outcome = evaluate(game_state.board)
        if outcome == Outcome.PLAYER_WINS:
            return Player.X
        if outcome == Outcome.OPPONENT_WINS:
            return Player.O
        return None

    def check_draw(self, game_state: GameState) -> bool:
        """
        Check if the game is a draw (board full and no winner).

        Args:
            game_state: The current game state.

        Returns:
            True if the game is a draw.
        """
        return evaluate(game_state.board) == Outcome.DRAW

    def update_game_state(self, game_state: GameState) -> GameState:
        """
        Update the game state with winner/draw information.

        Call this after every placement, by either side.

        Args:
            game_state: The game state to update.

        Returns:
            Updated game state.
        """
        outcome = evaluate(game_state.board)

        if outcome == Outcome.PLAYER_WINS:
            game_state.winner = Player.X
            game_state.is_game_over = True
        elif outcome == Outcome.OPPONENT_WINS:
            game_state.winner = Player.O
            game_state.is_game_over = True
        elif outcome == Outcome.DRAW:
            game_state.is_draw = True
            game_state.is_game_over = True

        return game_state

    def get_winning_line(self, game_state: GameState) -> Optional[Tuple[int, int, int]]:
        """
        Get the winning line if there is one.

        Args:
            game_state: The game state.

        Returns:
            The winning line as a tuple of indices, or None.
        """
        for line in self.WINNING_LINES:
            if _line_owner(game_state.board, line) is not None:
                return line
        return None
