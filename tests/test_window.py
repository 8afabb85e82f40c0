import pygame
import pytest

from hexxagon.board import Board, State
from hexxagon.game import START_SCORE
from hexxagon.menu import MenuType
from hexxagon.records import read_records
from hexxagon.window import MainWindow

SIZE = (800, 600)


@pytest.fixture
def records_path(tmp_path):
    return tmp_path / "records.bin"


@pytest.fixture
def window(records_path, monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    win = MainWindow(SIZE, records_path)
    yield win
    pygame.display.quit()


def _click_at(pos):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(round(pos[0]), round(pos[1])), button=1)


def _winning_position(playing_with_computer):
    board = Board()
    board.clear()
    red = 0
    target = board.adjacent(red)[0]
    blue = next(n for n in board.adjacent(target) if n != red)
    board[red] = State.RED
    board[blue] = State.BLUE
    board.current_color = State.RED
    board.playing_with_computer = playing_with_computer
    return board, red, target


def test_quit_stops_running(window):
    window.handle_event(pygame.event.Event(pygame.QUIT))
    assert window.running is False


def test_resize_event_updates_layout(window):
    window.handle_event(pygame.event.Event(pygame.VIDEORESIZE, size=(1000, 700), w=1000, h=700))
    assert window.size == (1000, 700)
    assert window.menu.main_buttons[0].center[0] == pytest.approx(500)


def test_start_game_against_computer(window):
    window.handle_event(_click_at(window.menu.main_buttons[0].center))
    window.handle_event(_click_at(window.menu.game_buttons[0].center))
    assert window.menu.current == MenuType.NOMENU
    assert window.game.board.playing_with_computer is True
    assert window.game.score(State.RED) == START_SCORE
    assert window.game.score(State.BLUE) == START_SCORE


def test_board_ignored_while_menu_open(window):
    window.game.prepare(False)
    window.handle_event(_click_at(window.board_view.centers[26]))
    assert window.game.selected is None


def test_hot_seat_win_ends_match(window, records_path):
    board, red, target = _winning_position(False)
    window.game.load_board(board)
    window.menu.current = MenuType.NOMENU
    window.handle_event(_click_at(window.board_view.centers[red]))
    window.handle_event(_click_at(window.board_view.centers[target]))
    assert window.end_game is True
    assert window.end_game_dialog.lines[0] == "You Win"
    assert window.end_game_dialog.score == window.game.score(State.RED)
    assert window.game.score(State.RED) == len(window.game.board.indices(State.RED))
    assert read_records(records_path) == []


def test_win_against_computer_is_recorded(window, records_path):
    board, red, target = _winning_position(True)
    window.game.load_board(board)
    window.menu.current = MenuType.NOMENU
    window.handle_event(_click_at(window.board_view.centers[red]))
    window.handle_event(_click_at(window.board_view.centers[target]))
    records = read_records(records_path)
    assert [record.score for record in records] == [window.game.score(State.RED)]


def test_end_dialog_ok_closes(window):
    board, red, target = _winning_position(False)
    window.game.load_board(board)
    window.menu.current = MenuType.NOMENU
    window.handle_event(_click_at(window.board_view.centers[red]))
    window.handle_event(_click_at(window.board_view.centers[target]))
    window.handle_event(_click_at(window.end_game_dialog.button_box.center))
    assert window.end_game is False


def test_loading_invalid_save_shows_error(window, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "bad.sav").write_bytes(b"\x09" * 70)
    window.handle_event(_click_at(window.menu.main_buttons[2].center))
    window.handle_event(pygame.event.Event(pygame.TEXTINPUT, text="bad.sav"))
    window.handle_event(_click_at(window.menu.save_load.ok_box.center))
    assert window.menu.save_load.title == "File is not a HEXXAGON save!"
    assert window.menu.current == MenuType.LOADMENU


def test_save_then_load_restores_board(window, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    window.game.prepare(False)
    window.handle_event(_click_at(window.menu.main_buttons[1].center))
    window.handle_event(pygame.event.Event(pygame.TEXTINPUT, text="match.sav"))
    window.handle_event(_click_at(window.menu.save_load.ok_box.center))
    assert window.menu.current == MenuType.NOMENU
    saved = [window.game.board[i] for i in range(len(window.game.board))]

    window.game.board.clear()
    window.menu.current = MenuType.MAINMENU
    window.handle_event(_click_at(window.menu.main_buttons[2].center))
    window.handle_event(_click_at(window.menu.save_load.ok_box.center))
    assert window.menu.current == MenuType.NOMENU
    assert [window.game.board[i] for i in range(len(window.game.board))] == saved
    assert window.game.score(State.RED) == START_SCORE