"""The application window: ties the board, the menu and the end-of-game dialog together."""

from __future__ import annotations

import argparse

import pygame

from hexxagon.board import State
from hexxagon.boardview import BoardView
from hexxagon.dialogs import EndGameDialog
from hexxagon.game import Game
from hexxagon.menu import Menu, MenuType, Signal
from hexxagon.records import RECORDS_FILE
from hexxagon.savefile import SaveFormatError

TITLE = "HEXXAGON"
BACKGROUND = (255, 255, 255)
UNREADABLE_PATH = "Path cannot be loaded!"
FRAME_RATE = 60


class MainWindow:
    """Owns the display and routes events to the game, menu and dialogs."""

    def __init__(self, size=None, records_path=RECORDS_FILE):
        pygame.display.init()
        if size is None:
            info = pygame.display.Info()
            size = (info.current_w * 1600 // 1680, info.current_h * 900 // 1050)
        self.surface = pygame.display.set_mode(size, pygame.RESIZABLE)
        pygame.display.set_caption(TITLE)
        pygame.key.start_text_input()
        self.running = True
        self.end_game = False
        self.game = Game()
        self.board_view = BoardView(self.game)
        self.menu = Menu(records_path)
        self.end_game_dialog = EndGameDialog(records_path)
        self.size = tuple(size)
        self.resize(size)

    def resize(self, size):
        self.size = tuple(size)
        self.board_view.resize(size)
        self.menu.resize(size)
        self.end_game_dialog.resize(size)

    def show(self):
        """Draw one frame."""
        surface = pygame.display.get_surface() or self.surface
        surface.fill(BACKGROUND)
        self.board_view.draw(surface)
        self.menu.draw(surface)
        if self.end_game:
            self.end_game_dialog.draw(surface)
        pygame.display.flip()

    def _finish_match(self):
        game = self.game
        computer = game.board.playing_with_computer
        winner = State.RED if game.score(State.RED) > game.score(State.BLUE) else State.BLUE
        red_won = winner == State.RED
        self.end_game_dialog.set_result(
            not computer or red_won, red_won, game.score(State.RED if computer else winner)
        )
        self.end_game_dialog.resize(self.size)
        if computer and red_won:
            self.end_game_dialog.save_score()
        self.end_game = True

    def _save(self):
        try:
            self.menu.save_game(self.game.board)
        except OSError:
            self.menu.set_path_error(UNREADABLE_PATH)
        else:
            self.menu.current = MenuType.NOMENU

    def _load(self):
        try:
            board = self.menu.load_game()
        except SaveFormatError as exc:
            self.menu.set_path_error(str(exc))
        except OSError:
            self.menu.set_path_error(UNREADABLE_PATH)
        else:
            self.game.load_board(board)
            self.menu.current = MenuType.NOMENU

    def handle_event(self, event):
        """Process a single event."""
        if event.type == pygame.QUIT:
            self.running = False
        if event.type == pygame.VIDEORESIZE:
            self.resize(event.size)
        if self.end_game:
            if self.end_game_dialog.handle_event(event):
                self.end_game = False
            return
        if self.menu.current == MenuType.NOMENU and self.board_view.handle_event(event):
            self._finish_match()
        signal = self.menu.handle_event(event, self.size)
        if signal == Signal.PLAYAI:
            self.game.prepare(True)
        elif signal == Signal.PLAYHOTSEAT:
            self.game.prepare(False)
        elif signal == Signal.SAVEGAME:
            self._save()
        elif signal == Signal.LOADGAME:
            self._load()
        elif signal == Signal.EXIT:
            self.running = False

    def handle_events(self):
        """Process all pending events."""
        for event in pygame.event.get():
            self.handle_event(event)


def main(argv=None):
    parser = argparse.ArgumentParser(prog="hexxagon", description="Play Hexxagon.")
    parser.add_argument("--records", default=RECORDS_FILE, help="leaderboard file")
    args = parser.parse_args(argv)
    pygame.init()
    try:
        window = MainWindow(records_path=args.records)
        clock = pygame.time.Clock()
        while window.running:
            window.handle_events()
            if window.running:
                window.show()
            clock.tick(FRAME_RATE)
    finally:
        pygame.quit()
    return 0