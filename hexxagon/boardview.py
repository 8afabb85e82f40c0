"""Drawing the board and the score boxes, and turning clicks into moves."""

from __future__ import annotations

import math
from functools import lru_cache

import pygame

from hexxagon.board import BOARD_SIZE, ROW_LENGTHS, SIDE_LENGTH, State
from hexxagon.dialogs import Box

FILL_COLORS = {
    State.NONUSED: (0, 0, 0),
    State.FREE: (255, 255, 255),
    State.RED: (204, 0, 34),
    State.BLUE: (0, 153, 230),
    State.HIGHLIGHTED: (102, 255, 25),
}
HEXAGON_OUTLINE = (255, 179, 25)
SCORE_OUTLINE = (102, 255, 25)
SCORE_TEXT = (255, 255, 255)
OUTLINE_PROPORTION = 0.09
_SQRT3 = math.sqrt(3.0)


@lru_cache(maxsize=None)
def _load_font(size):
    return pygame.font.Font(None, size)


def _render(text, size, color):
    if not pygame.font.get_init():
        pygame.font.init()
    return _load_font(max(int(size), 1)).render(text, True, color)


def _hexagon(center, radius):
    cx, cy = center
    return [
        (cx + radius * math.cos(math.radians(60 * k)), cy + radius * math.sin(math.radians(60 * k)))
        for k in range(6)
    ]


class BoardView:
    """Lays out the hexagonal cells and the two score boxes of a game."""

    def __init__(self, game):
        self.game = game
        self.radius = 0.0
        self.centers = [(0.0, 0.0)] * BOARD_SIZE
        self.score_boxes = {State.RED: Box(), State.BLUE: Box()}
        self._score_text_size = 1

    def resize(self, size):
        """Recompute the geometry for a window of the given size."""
        width, height = float(size[0]), float(size[1])
        self._resize_board(width, height)
        self._resize_scores(width, height)

    def _resize_board(self, width, height):
        radius = min(6 * width / (7 * 14), 8 * height / (9 * 9 * _SQRT3))
        start_x = width / 2 - radius * 6
        start_y = height / 2 - (radius * 4 - radius * ((SIDE_LENGTH - 1) // 2)) * _SQRT3
        centers = []
        for row, length in enumerate(ROW_LENGTHS):
            extra = length - SIDE_LENGTH
            for seg in range(length):
                centers.append(
                    (
                        start_x + radius * 1.5 * row,
                        start_y + radius * _SQRT3 * (seg - extra / 2),
                    )
                )
        self.radius = radius
        self.centers = centers

    def _resize_scores(self, width, height):
        size = min(width / 7, height / 7)
        thickness = size * OUTLINE_PROPORTION
        self.score_boxes[State.RED] = Box(thickness, thickness, size, size, thickness)
        self.score_boxes[State.BLUE] = Box(width - (size + thickness), thickness, size, size, thickness)
        self._score_text_size = int(size / 2)

    def hexagon_at(self, pos):
        """Index of the first cell whose circle holds the point, or None."""
        if self.radius <= 0:
            return None
        px, py = pos
        limit = self.radius ** 2
        for index, (cx, cy) in enumerate(self.centers):
            if (px - cx) ** 2 + (py - cy) ** 2 <= limit:
                return index
        return None

    def handle_event(self, event):
        """Pass a click on a cell to the game; return True when the match ends."""
        if event.type != pygame.MOUSEBUTTONDOWN or not hasattr(event, "pos"):
            return False
        index = self.hexagon_at(event.pos)
        if index is None:
            return False
        return self.game.select(index)

    def draw(self, surface):
        thickness = self.radius * OUTLINE_PROPORTION
        board = self.game.board
        for index, center in enumerate(self.centers):
            pygame.draw.polygon(surface, HEXAGON_OUTLINE, _hexagon(center, self.radius + thickness))
            pygame.draw.polygon(surface, FILL_COLORS[board[index]], _hexagon(center, self.radius))
        for color, box in self.score_boxes.items():
            box.draw(surface, FILL_COLORS[color], SCORE_OUTLINE)
            image = _render(str(self.game.score(color)), self._score_text_size, SCORE_TEXT)
            cx, cy = box.center
            surface.blit(image, image.get_rect(center=(round(cx), round(cy))))