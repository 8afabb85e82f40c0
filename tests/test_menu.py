import pygame
import pytest

from hexxagon.board import Board, State
from hexxagon.dialogs import BAD_PATH, INSERT_PATH
from hexxagon.menu import Menu, MenuType, Signal

SIZE = (800, 600)


def _click(box):
    x, y = box.center
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(round(x), round(y)), button=1)


def _type(text):
    return pygame.event.Event(pygame.TEXTINPUT, text=text)


def _escape():
    return pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE)


@pytest.fixture
def menu(tmp_path):
    result = Menu(tmp_path / "records.bin")
    result.resize(SIZE)
    return result


def test_buttons_centered_and_ordered(menu):
    for buttons in (menu.main_buttons, menu.game_buttons):
        for button in buttons:
            assert button.center[0] == pytest.approx(SIZE[0] / 2)
        ys = [button.y for button in buttons]
        assert ys == sorted(ys)


def test_new_game_then_ai(menu):
    assert menu.handle_event(_click(menu.main_buttons[0]), SIZE) == Signal.NONE
    assert menu.current == MenuType.GAMEMENU
    assert menu.handle_event(_click(menu.game_buttons[0]), SIZE) == Signal.PLAYAI
    assert menu.current == MenuType.NOMENU


def test_new_game_then_hot_seat(menu):
    menu.handle_event(_click(menu.main_buttons[0]), SIZE)
    assert menu.handle_event(_click(menu.game_buttons[1]), SIZE) == Signal.PLAYHOTSEAT
    assert menu.current == MenuType.NOMENU


def test_escape_toggles_main_menu(menu):
    menu.handle_event(_escape(), SIZE)
    assert menu.current == MenuType.NOMENU
    menu.handle_event(_escape(), SIZE)
    assert menu.current == MenuType.MAINMENU


def test_exit_button(menu):
    assert menu.handle_event(_click(menu.main_buttons[4]), SIZE) == Signal.EXIT


def test_leaderboard_opens_and_closes(menu):
    menu.handle_event(_click(menu.main_buttons[3]), SIZE)
    assert menu.current == MenuType.LEADERBOARDS
    assert menu.leaderboard.rows == []
    menu.handle_event(_click(menu.leaderboard.button_box), SIZE)
    assert menu.current == MenuType.MAINMENU


def test_save_dialog_close(menu):
    menu.handle_event(_click(menu.main_buttons[1]), SIZE)
    assert menu.current == MenuType.SAVEMENU
    assert menu.save_load.saving is True
    menu.handle_event(_click(menu.save_load.close_box), SIZE)
    assert menu.current == MenuType.MAINMENU


def test_save_and_load_round_trip(menu, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    board = Board()
    board[0] = State.RED
    board[5] = State.BLUE
    board.current_color = State.BLUE
    board.playing_with_computer = True

    menu.handle_event(_click(menu.main_buttons[1]), SIZE)
    menu.handle_event(_type("game.sav"), SIZE)
    assert menu.handle_event(_click(menu.save_load.ok_box), SIZE) == Signal.SAVEGAME
    menu.save_game(board)
    assert (tmp_path / "game.sav").is_file()

    menu.current = MenuType.MAINMENU
    menu.handle_event(_click(menu.main_buttons[2]), SIZE)
    assert menu.current == MenuType.LOADMENU
    assert menu.save_load.saving is False
    assert menu.handle_event(_click(menu.save_load.ok_box), SIZE) == Signal.LOADGAME
    loaded = menu.load_game()
    assert [loaded[i] for i in range(len(loaded))] == [board[i] for i in range(len(board))]
    assert loaded.current_color == State.BLUE
    assert loaded.playing_with_computer is True


def test_loading_missing_file_shows_error(menu, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    menu.handle_event(_click(menu.main_buttons[2]), SIZE)
    menu.handle_event(_type("missing.sav"), SIZE)
    assert menu.handle_event(_click(menu.save_load.ok_box), SIZE) == Signal.NONE
    assert menu.save_load.title == BAD_PATH
    assert menu.current == MenuType.LOADMENU


def test_set_path_error_and_typing_resets(menu):
    menu.set_path_error("broken")
    assert menu.save_load.title == "broken"
    menu.current = MenuType.SAVEMENU
    menu.handle_event(_type("a"), SIZE)
    assert menu.save_load.title == INSERT_PATH