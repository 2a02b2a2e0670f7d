"""
Logic module for TicTacToe.
Handles game state, rules, and the minimax opponent.
"""

from .game_state import (
    GameState, Player, Outcome, Move, InvalidStateError,
    HUMAN_PLAYER, COMPUTER_PLAYER, new_board,
)
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker, WINNING_LINES, evaluate
from .ai_player import AIPlayer, best_move, minimax
from .config import GameConfig

__version__ = "1.0.0"
