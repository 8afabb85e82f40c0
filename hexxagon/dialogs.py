"""Modal dialogs: end of match, leaderboard and the save/load path prompt."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path

import pygame

from hexxagon.records import RECORDS_FILE, add_score, read_records
from hexxagon.savefile import validate_path

BUTTON_FILL = (25, 64, 255)
BUTTON_OUTLINE = (0, 191, 230)
PANEL_FILL = (255, 179, 102)
PANEL_OUTLINE = (230, 153, 0)
RED_FILL = (204, 0, 34)
BLUE_FILL = (0, 153, 230)
RECORD_FILL = (230, 230, 0)
EDIT_OUTLINE = (102, 255, 25)
ERROR_OUTLINE = (255, 0, 0)
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)

INSERT_PATH = "Insert Path:"
BAD_PATH = "Selected path isn't appropriate!"
MAX_PATH_CHARACTERS = 100


class ButtonSignal(enum.Enum):
    """What a click or key press in the save/load dialog asks for."""

    NONE = enum.auto()
    CLOSE = enum.auto()
    PROCESS = enum.auto()


@dataclass
class Box:
    """An axis-aligned rectangle with an outline drawn around it."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    thickness: float = 0.0

    def contains(self, pos):
        px, py = pos
        return self.x <= px <= self.x + self.width and self.y <= py <= self.y + self.height

    @property
    def center(self):
        return (self.x + self.width / 2, self.y + self.height / 2)

    def draw(self, surface, fill, outline):
        grow = round(self.thickness)
        outer = pygame.Rect(
            round(self.x) - grow,
            round(self.y) - grow,
            round(self.width) + 2 * grow,
            round(self.height) + 2 * grow,
        )
        pygame.draw.rect(surface, outline, outer)
        pygame.draw.rect(
            surface, fill, pygame.Rect(round(self.x), round(self.y), round(self.width), round(self.height))
        )


@lru_cache(maxsize=None)
def _load_font(size):
    return pygame.font.Font(None, size)


def _font(size):
    if not pygame.font.get_init():
        pygame.font.init()
    return _load_font(max(int(size), 1))


def _text_size(text, size):
    return _font(size).size(text)


def _blit_centered(surface, text, size, color, center):
    if not text:
        return
    image = _font(size).render(text, True, color)
    surface.blit(image, image.get_rect(center=(round(center[0]), round(center[1]))))


def _blit_topleft(surface, text, size, color, topleft):
    if not text:
        return
    image = _font(size).render(text, True, color)
    surface.blit(image, (round(topleft[0]), round(topleft[1])))


def _is_click(event):
    return event.type == pygame.MOUSEBUTTONDOWN and hasattr(event, "pos")


class EndGameDialog:
    """Shows who won and the score, with an OK button."""

    def __init__(self, records_path=RECORDS_FILE):
        self.records_path = records_path
        self.score = 0
        self.lines = ["You Lose", "Your score: 12"]
        self.fill = WHITE
        self.main_box = Box()
        self.button_box = Box()
        self._text_size = 1
        self._button_text_size = 1
        self._line_centers = [(0.0, 0.0)] * len(self.lines)

    def set_result(self, won, red, score):
        """Set the panel colour and the result lines."""
        self.fill = RED_FILL if red else BLUE_FILL
        self.lines = [f"You {'Win' if won else 'Lose'}", f"Your score: {score}"]
        self.score = score

    def save_score(self):
        """Enter the score into the leaderboard; return whether it made it."""
        return add_score(self.score, self.records_path)

    def resize(self, size):
        width, height = size
        main = self.main_box
        main.width = 2 * width / 5
        main.height = 2 * height / 5
        main.x = (width - main.width) / 2
        main.y = (height - main.height) / 2
        main.thickness = main.height * 0.09

        button = self.button_box
        button.width = 2 * main.width / 3
        button.height = main.height / 5
        self._button_text_size = int(min(button.width, button.height / 2))

        self._text_size = int(min(main.width / 9, main.height / 2))
        heights = [_text_size(line, self._text_size)[1] for line in self.lines]
        space = (main.height - button.height - sum(heights)) / (len(self.lines) + 2)

        centers = []
        y = main.y
        previous_height = 0
        for line_height in heights:
            y = space + y + previous_height
            centers.append((main.x + main.width / 2, y))
            previous_height = line_height
        self._line_centers = centers

        button.x = main.x + (main.width - button.width) / 2
        button.y = centers[-1][1] + heights[-1] + space
        button.thickness = button.height * 0.09

    def draw(self, surface):
        self.main_box.draw(surface, self.fill, PANEL_OUTLINE)
        for line, center in zip(self.lines, self._line_centers):
            _blit_centered(surface, line, self._text_size, BLACK, center)
        self.button_box.draw(surface, BUTTON_FILL, BUTTON_OUTLINE)
        _blit_centered(surface, "OK", self._button_text_size, WHITE, self.button_box.center)

    def handle_event(self, event):
        """Return True when the OK button was clicked."""
        return _is_click(event) and self.button_box.contains(event.pos)


@dataclass
class _RecordRow:
    text: str
    box: Box = field(default_factory=Box)
    text_size: int = 1


class LeaderBoardDialog:
    """Lists the best scores with their dates, with an OK button."""

    def __init__(self, records_path=RECORDS_FILE):
        self.records_path = records_path
        self.title = "LeaderBoards:"
        self.records = []
        self.rows = []
        self.main_box = Box()
        self.button_box = Box()
        self._title_size = 1
        self._title_pos = (0.0, 0.0)
        self._label_size = 1
        self._size = (0, 0)

    def update_records(self, size):
        """Reread the records file and lay the rows out."""
        self.records = read_records(self.records_path)
        self.rows = [_RecordRow(str(record)) for record in self.records]
        self.resize(size)

    def resize(self, size):
        self._size = size
        width, height = size
        main = self.main_box
        main.width = 9 * width / 10
        main.height = 9 * height / 10
        main.x = (width - main.width) / 2
        main.y = (height - main.height) / 2
        main.thickness = main.height * 0.03

        gap = main.height * 0.05
        self._title_size = int(min(main.width / 20, main.height / 20))
        title_width, title_height = _text_size(self.title, self._title_size)
        self._title_pos = (main.x + (main.width - title_width) / 2, main.y + gap)

        button = self.button_box
        button.width = 2 * main.width / 10
        button.height = main.height / 10
        self._label_size = int(min(button.width / 2, button.height / 2))
        button.x = main.x + (main.width - button.width) / 2
        button.y = main.y + main.height - button.height - gap
        button.thickness = button.height * 0.03

        if not self.rows:
            return
        thickness = main.height * 0.03
        start = self._title_pos[1] + title_height + gap + thickness
        row_height = (button.y - start - gap) / len(self.rows) - thickness
        for row in self.rows:
            row.box = Box(main.x + thickness, start, main.width - 2 * thickness, row_height, thickness)
            start += row_height + thickness
            row.text_size = int(min(row.box.width / 10, row.box.height / 2))

    def draw(self, surface):
        self.main_box.draw(surface, PANEL_FILL, PANEL_OUTLINE)
        self.button_box.draw(surface, BUTTON_FILL, BUTTON_OUTLINE)
        _blit_centered(surface, "OK", self._label_size, WHITE, self.button_box.center)
        _blit_topleft(surface, self.title, self._title_size, WHITE, self._title_pos)
        for row in self.rows:
            row.box.draw(surface, RECORD_FILL, BUTTON_OUTLINE)
            _blit_centered(surface, row.text, row.text_size, BLACK, row.box.center)

    def handle_event(self, event):
        """Return True when the OK button was clicked."""
        return _is_click(event) and self.button_box.contains(event.pos)


class SaveLoadDialog:
    """Prompts for a file path with Close and OK buttons."""

    def __init__(self):
        self.saving = False
        self.text = ""
        self.title = INSERT_PATH
        self.edit_outline = EDIT_OUTLINE
        self.main_box = Box()
        self.edit_box = Box()
        self.close_box = Box()
        self.ok_box = Box()
        self._title_size = 1
        self._title_pos = (0.0, 0.0)
        self._button_text_size = 1
        self._edit_text_size = 1

    def resize(self, size):
        width, height = size
        main = self.main_box
        main.width = 9 * width / 10
        main.height = 7 * height / 10
        main.x = (width - main.width) / 2
        main.y = (height - main.height) / 2
        main.thickness = main.height * 0.05

        self._title_size = int(min(main.width / 20, main.height / 20))
        edit = self.edit_box
        edit.width = 9 * main.width / 10
        edit.height = 2 * main.height / 15
        edit.thickness = edit.height * 0.05

        for button in (self.close_box, self.ok_box):
            button.width = 2 * main.width / 10
            button.height = main.height / 10
            button.thickness = button.height * 0.05
        self._button_text_size = int(min(self.ok_box.width / 2, self.ok_box.height / 2))

        title_height = _text_size(self.title, self._title_size)[1]
        gap = (
            main.height
            - (title_height + edit.height + self.close_box.height
               + 2 * (self.close_box.thickness + edit.thickness))
        ) / 4
        self._title_pos = (0.0, main.y + gap)
        self._align_title()
        edit.x = main.x + (main.width - edit.width) / 2
        edit.y = self._title_pos[1] + title_height + gap

        margin = (main.width / 2 - self.close_box.width) / 2
        self.close_box.x = main.x + margin
        self.close_box.y = edit.y + edit.height + gap
        self.ok_box.x = main.x + main.width / 2 + margin
        self.ok_box.y = self.close_box.y
        self._configure_edit()

    def _align_title(self):
        title_width = _text_size(self.title, self._title_size)[0]
        self._title_pos = (
            self.main_box.x + (self.main_box.width - title_width) / 2,
            self._title_pos[1],
        )

    def _configure_edit(self):
        self.edit_outline = EDIT_OUTLINE
        edit = self.edit_box
        size = int(min(8 * edit.width / 10, 5 * edit.height / 10))
        text_width = _text_size(self.text, size)[0]
        if text_width and text_width >= edit.width:
            size = int(edit.width * size / text_width)
        self._edit_text_size = max(size, 1)

    def _type(self, char):
        if char == "\b":
            if not self.text:
                return False
            self.text = self.text[:-1]
            return True
        if len(self.text) >= MAX_PATH_CHARACTERS:
            return False
        self.text += char
        return True

    def _typed(self, chars):
        changed = False
        for char in chars:
            if not self._type(char):
                break
            changed = True
        if not changed:
            return
        if self.title != INSERT_PATH:
            self.title = INSERT_PATH
            self._align_title()
        self._configure_edit()

    def handle_event(self, event):
        """Process an event; return what the dialog's owner should do."""
        if _is_click(event):
            if self.ok_box.contains(event.pos):
                if not validate_path(self.path(), self.saving):
                    self.set_path_error(BAD_PATH)
                    return ButtonSignal.NONE
                return ButtonSignal.PROCESS
            if self.close_box.contains(event.pos):
                return ButtonSignal.CLOSE
        elif event.type == pygame.KEYDOWN and getattr(event, "key", None) == pygame.K_BACKSPACE:
            self._typed("\b")
        elif event.type == pygame.TEXTINPUT:
            self._typed(event.text)
        return ButtonSignal.NONE

    def path(self):
        """The typed path made absolute."""
        return Path(self.text).absolute()

    def set_path_error(self, description):
        """Show an error in place of the title and mark the path field red."""
        self.title = description
        self._align_title()
        self.edit_outline = ERROR_OUTLINE

    def draw(self, surface):
        self.main_box.draw(surface, PANEL_FILL, PANEL_OUTLINE)
        _blit_topleft(surface, self.title, self._title_size, WHITE, self._title_pos)
        self.edit_box.draw(surface, WHITE, self.edit_outline)
        _blit_centered(surface, self.text, self._edit_text_size, BLACK, self.edit_box.center)
        for box, label in ((self.close_box, "Close"), (self.ok_box, "OK")):
            box.draw(surface, BUTTON_FILL, BUTTON_OUTLINE)
            _blit_centered(surface, label, self._button_text_size, WHITE, box.center)