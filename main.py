"""
Main orchestration script for TicTacToe.

This script ties together:
- The game session (board, turns, result)
- Move validation and win checking
- The minimax AI opponent

Run this script to play TicTacToe against the computer!
"""

import time
from typing import Callable, Optional

from logic.game_state import GameState, HUMAN_PLAYER, COMPUTER_PLAYER
from logic.move_validator import MoveValidator
from logic.win_checker import WinChecker
from logic.ai_player import AIPlayer
from logic.config import GameConfig


class TicTacToeGame:
    """
    Console controller for a game against the computer.

    Game flow:
    1. Human (X) picks a cell 1-9
    2. The move is validated and applied, then the result is checked
    3. After a short pause, the computer (O) calculates and plays its move
    4. Repeat until someone wins or it's a draw
    """

    def __init__(
        self,
        computer_first: bool = False,
        delay_ms: Optional[int] = None,
        input_func: Optional[Callable[[str], str]] = None
    ):
        """
        Initialize the game.

        Args:
            computer_first: Let the computer open the game.
            delay_ms: Pause before each computer move
                (default: GameConfig.AI_MOVE_DELAY_MS).
            input_func: Where to read the human's commands from
                (default: input).
        """
        self.first_player = COMPUTER_PLAYER if computer_first else HUMAN_PLAYER
        self.delay_ms = GameConfig.AI_MOVE_DELAY_MS if delay_ms is None else delay_ms
        self.input_func = input_func or input

        self.game_state = GameState(current_player=self.first_player)
        self.validator = MoveValidator()
        self.win_checker = WinChecker()
        self.ai = AIPlayer()

        self.is_running = False

    def start(self):
        """Start the game and keep playing until the user quits."""
        print("\n" + "="*40)
        print("   TicTacToe - You (X) vs. AI (O)")
        print("="*40)
        print("Enter 1-9 to place, 'r' to reset, 'q' to quit\n")

        self.is_running = True
        while self.is_running:
            self._game_loop()

            if self.game_state.is_game_over:
                self._show_game_result()
                self._ask_play_again()

    def _game_loop(self):
        """Play moves until the game ends or the user quits/resets."""
        while self.is_running and not self.game_state.is_game_over:
            if self.game_state.current_player == COMPUTER_PLAYER:
                self._computer_move()
                continue

            self.game_state.print_board(show_numbers=True)
            command = self._read(f"{self.game_state.status_text()} (1-9): ")

            if command is None or command == "q":
                print("\nGame quit by user.")
                self.is_running = False
            elif command == "r":
                self._reset_game()
            elif command.isdigit():
                self._process_human_move(int(command) - 1)
            else:
                print(f"Didn't understand '{command}'. Enter 1-9, 'r' or 'q'.")

    def _read(self, prompt: str) -> Optional[str]:
        """Read one command; None on end of input."""
        try:
            return self.input_func(prompt).strip().lower()
        except EOFError:
            return None

    def _process_human_move(self, index: int) -> bool:
        """
        Apply a human move.

        Args:
            index: Cell index (0-8).

        Returns:
            True if the move was applied.
        """
        result = self.validator.validate_move(self.game_state, index)
        if not result.is_valid:
            print(f"Invalid move: {result.error_message}")
            return False

        self.game_state.make_move(index)
        self.win_checker.update_game_state(self.game_state)
        return True

    def _computer_move(self):
        """Pause, then compute and apply the computer's move."""
        print(f"\n>>> {GameConfig.STATUS_THINKING}")
        if self.delay_ms > 0:
            time.sleep(self.delay_ms / 1000.0)

        index = self.ai.get_best_move(self.game_state)
        self.game_state.make_move(index)
        self.win_checker.update_game_state(self.game_state)

        print(f">>> AI plays cell {index + 1}")

    def _show_game_result(self):
        """Show the final game result."""
        print("\n" + "="*40)
        print("   GAME OVER!")
        print("="*40)

        print()
        print(self.game_state.format_board())

        line = self.win_checker.get_winning_line(self.game_state)
        if line is not None:
            print(f"\nWinning line: {', '.join(str(i + 1) for i in line)}")

        print(f"\n{self.game_state.status_text()}")
        print("="*40)

    def _ask_play_again(self):
        """Offer another round after a finished game."""
        command = self._read("Play again? (r = new game, q = quit): ")
        if command == "r":
            self._reset_game()
        else:
            self.is_running = False

    def _reset_game(self):
        """Reset the game for a new round."""
        print("\nResetting game...")
        self.game_state.reset(self.first_player)


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe against a minimax AI")
    parser.add_argument(
        "--computer-first",
        action="store_true",
        help="Let the computer make the first move"
    )
    parser.add_argument(
        "--delay",
        type=int,
        default=GameConfig.AI_MOVE_DELAY_MS,
        help="Pause before the computer's move, in milliseconds"
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Don't print search statistics"
    )
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )

    args = parser.parse_args()

    if args.quiet:
        GameConfig.VERBOSE = False

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        ui = TicTacToeUI(computer_first=args.computer_first, delay_ms=args.delay)
        ui.run()
        return

    game = TicTacToeGame(computer_first=args.computer_first, delay_ms=args.delay)

    try:
        game.start()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
