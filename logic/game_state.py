"""
Game state management for TicTacToe.
Tracks the board, current player, and move history.
"""

from enum import Enum
from typing import Optional, List
from dataclasses import dataclass, field

from .config import GameConfig


class Player(Enum):
    """The two marks that can be placed on the board."""
    X = "X"
    O = "O"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.O if self == Player.X else Player.X


class Outcome(Enum):
    """Result of evaluating a board. Always derived, never stored."""
    PLAYER_WINS = "player_wins"
    OPPONENT_WINS = "opponent_wins"
    DRAW = "draw"
    ONGOING = "ongoing"

    @property
    def is_terminal(self) -> bool:
        return self != Outcome.ONGOING


class InvalidStateError(RuntimeError):
    """Raised when the engine is asked to move in a position with no legal move."""


# Marks are bound to roles for the whole program: the human plays X,
# the computer plays O and is always the maximizer.
HUMAN_PLAYER = Player.X
COMPUTER_PLAYER = Player.O

BOARD_CELLS = 9

# A board is 9 cells, row-major. None means empty.
Board = List[Optional[Player]]


def new_board() -> Board:
    """Create an empty board."""
    return [None] * BOARD_CELLS


def index_to_cell(index: int) -> tuple:
    """Convert a board index (0-8) to (row, col)."""
    return divmod(index, 3)


@dataclass
class Move:
    """
    A move in the game.
    """
    player: Player          # Who made the move
    index: int              # Cell index (0-8)
    move_number: int        # Ply number, starting at 0


@dataclass
class GameState:
    """
    The complete state of one TicTacToe game session.

    Tracks:
    - The board (which marks are where)
    - Current player
    - Move history
    - Game status (ongoing, won, draw)

    Front-ends own a GameState and pass it to the logic explicitly;
    nothing in the logic package keeps a game of its own.
    """

    board: Board = field(default_factory=new_board)

    # Current player's turn
    current_player: Player = HUMAN_PLAYER

    # Move history
    moves: List[Move] = field(default_factory=list)

    # Game result (filled in by WinChecker.update_game_state)
    winner: Optional[Player] = None
    is_draw: bool = False
    is_game_over: bool = False

    def make_move(self, index: int) -> bool:
        """
        Place the current player's mark at the given index.

        Args:
            index: Cell index (0-8).

        Returns:
            True if move was successful, False otherwise.
        """
        if self.is_game_over:
            print("Game is already over!")
            return False

        if not 0 <= index < BOARD_CELLS:
            print(f"Invalid position {index}. Must be 0-{BOARD_CELLS - 1}.")
            return False

        if self.board[index] is not None:
            print(f"Cell {index} is already occupied!")
            return False

        self.board[index] = self.current_player
        self.moves.append(Move(
            player=self.current_player,
            index=index,
            move_number=len(self.moves)
        ))

        # Winner detection is done by WinChecker; just switch turns here
        self.current_player = self.current_player.opposite()

        return True

    def get_empty_cells(self) -> List[int]:
        """
        Get all empty cells on the board, in ascending order.

        Returns:
            List of cell indices.
        """
        return [i for i, cell in enumerate(self.board) if cell is None]

    def copy(self) -> "GameState":
        """Create a deep copy of the game state."""
        return GameState(
            board=list(self.board),
            current_player=self.current_player,
            moves=list(self.moves),
            winner=self.winner,
            is_draw=self.is_draw,
            is_game_over=self.is_game_over
        )

    def reset(self, first_player: Player = HUMAN_PLAYER):
        """Clear the board and start a new game."""
        self.board = new_board()
        self.current_player = first_player
        self.moves = []
        self.winner = None
        self.is_draw = False
        self.is_game_over = False

    def format_board(self, show_numbers: bool = False) -> str:
        """
        Render the board as text.

        Args:
            show_numbers: Show 1-9 in empty cells (for console input).
        """
        lines = []
        for row in range(3):
            cells = []
            for col in range(3):
                index = row * 3 + col
                mark = self.board[index]
                if mark is not None:
                    cells.append(mark.value)
                elif show_numbers:
                    cells.append(str(index + 1))
                else:
                    cells.append(" ")
            lines.append(" " + " | ".join(cells))
            if row < 2:
                lines.append("---+---+---")
        return "\n".join(lines)

    def status_text(self) -> str:
        """Short status line for the front-ends."""
        if self.is_game_over:
            if self.winner == COMPUTER_PLAYER:
                return GameConfig.STATUS_AI_WINS
            if self.winner is not None:
                return GameConfig.STATUS_PLAYER_WINS.format(mark=self.winner.value)
            return GameConfig.STATUS_DRAW

        if self.current_player == COMPUTER_PLAYER:
            return GameConfig.STATUS_THINKING
        return GameConfig.STATUS_TURN.format(mark=self.current_player.value)

    def print_board(self, show_numbers: bool = False):
        """Print the board to console."""
        print()
        print(self.format_board(show_numbers))

        if self.is_game_over:
            if self.winner:
                print(f"\n{self.winner.value} WINS!")
            else:
                print("\nIt's a DRAW!")
        else:
            print(f"\nCurrent turn: {self.current_player.value}")
