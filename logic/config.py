"""
Game configuration for TicTacToe.
Pacing, console output, and status messages.
"""


class GameConfig:
    """
    Configuration class for game settings.
    Change these values to taste; the command line can override some of them.
    """

    # ==================== PACING ====================
    # Delay before the computer's move is computed and applied (milliseconds).
    # Only affects perceived pacing, never which move is chosen.
    AI_MOVE_DELAY_MS = 500

    # ==================== CONSOLE OUTPUT ====================
    # Print search statistics and game progress to the console
    VERBOSE = True

    # ==================== STATUS MESSAGES ====================
    STATUS_TURN = "Player {mark}'s turn"
    STATUS_THINKING = "AI is thinking..."
    STATUS_PLAYER_WINS = "Player {mark} wins!"
    STATUS_AI_WINS = "AI wins!"
    STATUS_DRAW = "It's a tie!"
