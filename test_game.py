"""
Tests for the game session, move validation, win checking,
and the console game controller.
"""

import sys

import pytest

import main
from logic.game_state import (
    GameState, Player, Move, HUMAN_PLAYER, COMPUTER_PLAYER,
)
from logic.move_validator import MoveValidator
from logic.win_checker import WinChecker
from logic.config import GameConfig

X = Player.X
O = Player.O
_ = None


# ════════════════════════════════════════════════════════════════════════════
#  GAME STATE TESTS
# ════════════════════════════════════════════════════════════════════════════

class TestGameState:
    def test_initial_state(self):
        game = GameState()
        assert game.board == [None] * 9
        assert game.current_player == HUMAN_PLAYER
        assert game.get_empty_cells() == list(range(9))
        assert not game.is_game_over

    def test_make_move_switches_turns(self):
        game = GameState()
        assert game.make_move(4) is True
        assert game.board[4] == X
        assert game.current_player == O
        assert game.moves == [Move(player=X, index=4, move_number=0)]

        assert game.make_move(0) is True
        assert game.board[0] == O
        assert game.current_player == X
        assert game.moves[-1].move_number == 1

    def test_occupied_cell_rejected(self, capsys):
        game = GameState()
        game.make_move(4)
        assert game.make_move(4) is False
        assert game.current_player == O
        assert "already occupied" in capsys.readouterr().out

    @pytest.mark.parametrize("index", [-1, 9, 42])
    def test_out_of_range_rejected(self, index):
        game = GameState()
        assert game.make_move(index) is False
        assert game.moves == []

    def test_move_after_game_over_rejected(self):
        game = GameState(is_game_over=True)
        assert game.make_move(0) is False
        assert game.board[0] is None

    def test_copy_is_independent(self):
        game = GameState()
        game.make_move(0)
        clone = game.copy()
        clone.make_move(1)
        assert game.board[1] is None
        assert len(game.moves) == 1
        assert clone.board[1] == O

    def test_reset(self):
        game = GameState()
        game.make_move(0)
        game.is_game_over = True
        game.winner = X
        game.reset(COMPUTER_PLAYER)
        assert game.board == [None] * 9
        assert game.moves == []
        assert game.winner is None
        assert not game.is_game_over
        assert game.current_player == COMPUTER_PLAYER

    def test_format_board(self):
        game = GameState(board=[X, _, _,
                                _, O, _,
                                _, _, _])
        assert game.format_board(show_numbers=True) == (
            " X | 2 | 3\n"
            "---+---+---\n"
            " 4 | O | 6\n"
            "---+---+---\n"
            " 7 | 8 | 9"
        )

    def test_status_text(self):
        assert GameState().status_text() == "Player X's turn"
        assert GameState(current_player=O).status_text() == GameConfig.STATUS_THINKING
        assert GameState(is_game_over=True, winner=X).status_text() == "Player X wins!"
        assert GameState(is_game_over=True, winner=O).status_text() == "AI wins!"
        assert GameState(is_game_over=True, is_draw=True).status_text() == "It's a tie!"


# ════════════════════════════════════════════════════════════════════════════
#  VALIDATOR / WIN CHECKER TESTS
# ════════════════════════════════════════════════════════════════════════════

class TestMoveValidator:
    def test_valid_move(self):
        result = MoveValidator().validate_move(GameState(), 4)
        assert result.is_valid
        assert result.error_message is None

    def test_occupied(self):
        game = GameState()
        game.make_move(4)
        result = MoveValidator().validate_move(game, 4)
        assert not result.is_valid
        assert result.error_message == "Cell 4 is already occupied by X"

    def test_out_of_range(self):
        result = MoveValidator().validate_move(GameState(), 9)
        assert not result.is_valid
        assert "Must be 0-8" in result.error_message

    def test_game_over(self):
        result = MoveValidator().validate_move(GameState(is_game_over=True), 0)
        assert not result.is_valid
        assert result.error_message == "Game is already over!"

    def test_valid_moves(self):
        game = GameState()
        game.make_move(0)
        game.make_move(8)
        validator = MoveValidator()
        assert validator.get_valid_moves(game) == [1, 2, 3, 4, 5, 6, 7]
        game.is_game_over = True
        assert validator.get_valid_moves(game) == []


class TestWinChecker:
    def test_update_with_winner(self):
        game = GameState(board=[O, O, O,
                                X, X, _,
                                X, _, _])
        checker = WinChecker()
        checker.update_game_state(game)
        assert game.is_game_over
        assert game.winner == O
        assert not game.is_draw
        assert checker.check_winner(game) == O
        assert checker.get_winning_line(game) == (0, 1, 2)

    def test_update_with_draw(self):
        game = GameState(board=[X, O, X,
                                X, O, O,
                                O, X, X])
        checker = WinChecker()
        checker.update_game_state(game)
        assert game.is_game_over
        assert game.is_draw
        assert game.winner is None
        assert checker.check_draw(game)
        assert checker.get_winning_line(game) is None

    def test_update_ongoing(self):
        game = GameState()
        game.make_move(4)
        WinChecker().update_game_state(game)
        assert not game.is_game_over
        assert not game.is_draw


# ════════════════════════════════════════════════════════════════════════════
#  CONSOLE GAME TESTS
# ════════════════════════════════════════════════════════════════════════════

class FirstFreeCell:
    """Scripted human: always plays the lowest free cell, then quits."""

    def __init__(self):
        self.game = None
        self.prompts = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if prompt.startswith("Play again"):
            return "q"
        return str(self.game.game_state.get_empty_cells()[0] + 1)


def _scripted(commands):
    replies = iter(commands)

    def read(prompt):
        try:
            return next(replies)
        except StopIteration:
            raise EOFError
    return read


class TestTicTacToeGame:
    def test_full_game_ai_never_loses(self):
        human = FirstFreeCell()
        game = main.TicTacToeGame(delay_ms=0, input_func=human)
        human.game = game
        game.ai.verbose = False

        game.start()

        assert game.game_state.is_game_over
        assert game.game_state.winner != HUMAN_PLAYER
        assert not game.is_running
        assert human.prompts[-1].startswith("Play again")

    def test_quit(self):
        game = main.TicTacToeGame(delay_ms=0, input_func=_scripted(["q"]))
        game.start()
        assert not game.is_running
        assert game.game_state.moves == []

    def test_end_of_input_quits(self):
        game = main.TicTacToeGame(delay_ms=0, input_func=_scripted([]))
        game.start()
        assert not game.is_running

    def test_bad_input_reprompts(self, capsys):
        game = main.TicTacToeGame(delay_ms=0, input_func=_scripted(["hello", "0", "q"]))
        game.start()
        out = capsys.readouterr().out
        assert "Didn't understand 'hello'" in out
        assert "Invalid move" in out
        assert game.game_state.moves == []

    def test_reset_mid_game(self):
        game = main.TicTacToeGame(delay_ms=0, input_func=_scripted(["1", "2", "r", "q"]))
        game.ai.verbose = False
        game.start()
        assert game.game_state.moves == []
        assert game.game_state.current_player == HUMAN_PLAYER

    def test_human_move_then_ai_reply(self):
        game = main.TicTacToeGame(delay_ms=0, input_func=_scripted(["1", "2", "q"]))
        game.ai.verbose = False
        game.start()
        board = game.game_state.board
        assert board[0] == X
        assert board[1] == X
        # The AI must block the top row
        assert board[2] == O


def test_main_console_mode(monkeypatch):
    monkeypatch.setattr(sys, "argv", ["main.py", "--no-ui", "--quiet", "--delay", "0"])
    monkeypatch.setattr(GameConfig, "VERBOSE", GameConfig.VERBOSE)
    monkeypatch.setattr("builtins.input", _scripted(["q"]))

    main.main()

    assert GameConfig.VERBOSE is False


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
