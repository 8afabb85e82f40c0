"""Main menu, game-type menu and the dialogs they open."""

from __future__ import annotations

import enum
from functools import lru_cache

import pygame

from hexxagon.dialogs import (
    BUTTON_FILL,
    BUTTON_OUTLINE,
    WHITE,
    Box,
    ButtonSignal,
    LeaderBoardDialog,
    SaveLoadDialog,
)
from hexxagon.records import RECORDS_FILE
from hexxagon.savefile import load_game, save_game

MAIN_LABELS = ("New Game", "Save Game", "Load Game", "Leaderboard", "Exit")
GAME_LABELS = ("AI", "Hot Seat")
OUTLINE_PROPORTION = 0.09


class MenuType(enum.Enum):
    """Which screen of the menu is showing."""

    NOMENU = enum.auto()
    MAINMENU = enum.auto()
    GAMEMENU = enum.auto()
    SAVEMENU = enum.auto()
    LOADMENU = enum.auto()
    LEADERBOARDS = enum.auto()


class Signal(enum.Enum):
    """What the menu asks the window to do."""

    PLAYAI = enum.auto()
    PLAYHOTSEAT = enum.auto()
    SAVEGAME = enum.auto()
    LOADGAME = enum.auto()
    EXIT = enum.auto()
    NONE = enum.auto()


@lru_cache(maxsize=None)
def _load_font(size):
    return pygame.font.Font(None, size)


def _blit_label(surface, text, size, center):
    if not pygame.font.get_init():
        pygame.font.init()
    image = _load_font(max(int(size), 1)).render(text, True, WHITE)
    surface.blit(image, image.get_rect(center=(round(center[0]), round(center[1]))))


def _clicked(buttons, event):
    if event.type != pygame.MOUSEBUTTONDOWN or not hasattr(event, "pos"):
        return None
    for index, button in enumerate(buttons):
        if button.contains(event.pos):
            return index
    return None


class Menu:
    """Menu screens stacked over the board."""

    def __init__(self, records_path=RECORDS_FILE):
        self.main_buttons = [Box() for _ in MAIN_LABELS]
        self.game_buttons = [Box() for _ in GAME_LABELS]
        self.leaderboard = LeaderBoardDialog(records_path)
        self.save_load = SaveLoadDialog()
        self.current = MenuType.MAINMENU
        self.size = (0, 0)
        self._text_size = 1

    def resize(self, size):
        self.size = tuple(size)
        width, height = float(size[0]), float(size[1])
        self._layout(self.main_buttons, width, height)
        self._layout(self.game_buttons, width, height)
        self.save_load.resize(size)
        if self.current == MenuType.LEADERBOARDS:
            self.leaderboard.resize(size)

    def _layout(self, buttons, width, height):
        size_x = 3 * width / 4
        size_y = height / 13
        distance = height / len(buttons) - size_y
        y = distance / 2
        for button in buttons:
            button.x = (width - size_x) / 2
            button.y = y
            button.width = size_x
            button.height = size_y
            button.thickness = size_y * OUTLINE_PROPORTION
            y += size_y + distance
        self._text_size = int(min(size_x / 7, size_y / 2))

    def _draw_buttons(self, surface, buttons, labels):
        for button, label in zip(buttons, labels):
            button.draw(surface, BUTTON_FILL, BUTTON_OUTLINE)
            _blit_label(surface, label, self._text_size, button.center)

    def draw(self, surface):
        if self.current == MenuType.MAINMENU:
            self._draw_buttons(surface, self.main_buttons, MAIN_LABELS)
        elif self.current == MenuType.GAMEMENU:
            self._draw_buttons(surface, self.game_buttons, GAME_LABELS)
        elif self.current == MenuType.LEADERBOARDS:
            self.leaderboard.draw(surface)
        elif self.current in (MenuType.SAVEMENU, MenuType.LOADMENU):
            self.save_load.draw(surface)

    def handle_event(self, event, size):
        """Process an event in the current screen; return what the window should do."""
        if event.type == pygame.KEYDOWN and getattr(event, "key", None) == pygame.K_ESCAPE:
            self.current = MenuType.NOMENU if self.current == MenuType.MAINMENU else MenuType.MAINMENU

        if self.current == MenuType.GAMEMENU:
            choice = _clicked(self.game_buttons, event)
            if choice == 0:
                self.current = MenuType.NOMENU
                return Signal.PLAYAI
            if choice == 1:
                self.current = MenuType.NOMENU
                return Signal.PLAYHOTSEAT
        elif self.current == MenuType.MAINMENU:
            choice = _clicked(self.main_buttons, event)
            if choice == 0:
                self.current = MenuType.GAMEMENU
            elif choice == 1:
                self.current = MenuType.SAVEMENU
                self.save_load.saving = True
            elif choice == 2:
                self.current = MenuType.LOADMENU
                self.save_load.saving = False
            elif choice == 3:
                self.current = MenuType.LEADERBOARDS
                self.leaderboard.update_records(size)
            elif choice == 4:
                return Signal.EXIT
        elif self.current == MenuType.LEADERBOARDS:
            if self.leaderboard.handle_event(event):
                self.current = MenuType.MAINMENU
        elif self.current in (MenuType.SAVEMENU, MenuType.LOADMENU):
            result = self.save_load.handle_event(event)
            if result == ButtonSignal.PROCESS:
                return Signal.SAVEGAME if self.current == MenuType.SAVEMENU else Signal.LOADGAME
            if result == ButtonSignal.CLOSE:
                self.current = MenuType.MAINMENU
        return Signal.NONE

    def save_game(self, board):
        """Save the board to the path typed in the dialog."""
        save_game(board, self.save_load.path())

    def load_game(self):
        """Load a board from the path typed in the dialog."""
        return load_game(self.save_load.path())

    def set_path_error(self, description):
        self.save_load.set_path_error(description)