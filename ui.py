"""
TicTacToe UI
A graphical interface for playing against the minimax AI using Tkinter.

Shows:
- The 3x3 board (click a cell to play X)
- Game status ("Player X's turn", "AI is thinking...", result)
- Reset and quit buttons
"""

import tkinter as tk
from tkinter import ttk
from typing import Optional

from logic.game_state import GameState, HUMAN_PLAYER, COMPUTER_PLAYER
from logic.move_validator import MoveValidator
from logic.win_checker import WinChecker
from logic.ai_player import AIPlayer
from logic.config import GameConfig


CELL_BG = '#16213e'
WIN_BG = '#10b981'
MARK_COLORS = {
    HUMAN_PLAYER: '#00ff88',
    COMPUTER_PLAYER: '#ff6b6b',
}


class TicTacToeUI:
    """
    Main UI class for TicTacToe.
    """

    def __init__(self, computer_first: bool = False, delay_ms: Optional[int] = None):
        """Initialize the UI."""
        self.first_player = COMPUTER_PLAYER if computer_first else HUMAN_PLAYER
        self.delay_ms = GameConfig.AI_MOVE_DELAY_MS if delay_ms is None else delay_ms

        self.game_state = GameState(current_player=self.first_player)
        self.validator = MoveValidator()
        self.win_checker = WinChecker()
        self.ai = AIPlayer()

        # Pending root.after() id for the computer's move
        self.pending_ai_move: Optional[str] = None

        self._create_ui()
        self._refresh()

        if self.game_state.current_player == COMPUTER_PLAYER:
            self._schedule_computer_move()

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title("TicTacToe")
        self.root.configure(bg='#1a1a2e')
        self.root.resizable(False, False)

        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background='#1a1a2e')
        style.configure('Title.TLabel', background='#1a1a2e', font=('Segoe UI', 16, 'bold'), foreground='#00d4ff')
        style.configure('Status.TLabel', background='#1a1a2e', font=('Segoe UI', 12), foreground='#ffd700')

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=20, pady=20)

        ttk.Label(main_frame, text="TicTacToe", style='Title.TLabel').pack(pady=(0, 10))

        board_frame = ttk.Frame(main_frame)
        board_frame.pack(pady=10)

        self.board_cells = []
        for index in range(9):
            row, col = divmod(index, 3)
            cell = tk.Button(
                board_frame,
                text="",
                font=('Segoe UI', 24, 'bold'),
                width=4,
                height=2,
                bg=CELL_BG,
                fg='white',
                activebackground='#1f2b4d',
                relief='ridge',
                borderwidth=2,
                command=lambda i=index: self._on_cell_click(i)
            )
            cell.grid(row=row, column=col, padx=2, pady=2)
            self.board_cells.append(cell)

        self.status_label = ttk.Label(main_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=10)

        control_frame = ttk.Frame(main_frame)
        control_frame.pack(pady=5)

        tk.Button(
            control_frame,
            text="Reset",
            font=('Segoe UI', 11, 'bold'),
            bg='#6366f1',
            fg='white',
            width=10,
            command=self._reset_game
        ).pack(side=tk.LEFT, padx=5)

        tk.Button(
            control_frame,
            text="Quit",
            font=('Segoe UI', 11, 'bold'),
            bg='#ef4444',
            fg='white',
            width=10,
            command=self._quit
        ).pack(side=tk.LEFT, padx=5)

        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _on_cell_click(self, index: int):
        """Handle a click on a board cell."""
        # Ignore clicks while the AI is thinking or after the game ended
        if self.game_state.current_player != HUMAN_PLAYER:
            return
        if not self.validator.validate_move(self.game_state, index).is_valid:
            return

        self.game_state.make_move(index)
        self.win_checker.update_game_state(self.game_state)
        self._refresh()

        if not self.game_state.is_game_over:
            self._schedule_computer_move()

    def _schedule_computer_move(self):
        """Run the computer's move after the pacing delay."""
        self.pending_ai_move = self.root.after(self.delay_ms, self._computer_move)

    def _computer_move(self):
        """Compute and apply the computer's move."""
        self.pending_ai_move = None

        index = self.ai.get_best_move(self.game_state)
        self.game_state.make_move(index)
        self.win_checker.update_game_state(self.game_state)
        self._refresh()

    def _refresh(self):
        """Redraw the board and the status label from the game state."""
        winning_line = self.win_checker.get_winning_line(self.game_state) or ()

        for index, cell in enumerate(self.board_cells):
            mark = self.game_state.board[index]
            cell.configure(
                text=mark.value if mark else "",
                fg=MARK_COLORS.get(mark, 'white'),
                bg=WIN_BG if index in winning_line else CELL_BG
            )

        self.status_label.configure(text=self.game_state.status_text())

    def _reset_game(self):
        """Reset the game."""
        if GameConfig.VERBOSE:
            print("Resetting game...")

        if self.pending_ai_move is not None:
            self.root.after_cancel(self.pending_ai_move)
            self.pending_ai_move = None

        self.game_state.reset(self.first_player)
        self._refresh()

        if self.game_state.current_player == COMPUTER_PLAYER:
            self._schedule_computer_move()

    def _quit(self):
        """Quit the application."""
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()


if __name__ == "__main__":
    TicTacToeUI().run()
