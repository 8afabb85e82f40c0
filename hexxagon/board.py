"""Hexagonal Hexxagon board: cell states, adjacency and reachable cells."""

from __future__ import annotations

import enum
from bisect import bisect_right
from functools import cache
from itertools import accumulate

SIDE_LENGTH = 5
ROW_LENGTHS = tuple(
    SIDE_LENGTH + min(row, 2 * SIDE_LENGTH - 2 - row) for row in range(2 * SIDE_LENGTH - 1)
)
ROW_STARTS = tuple(accumulate(ROW_LENGTHS, initial=0))
BOARD_SIZE = ROW_STARTS[-1]
UNUSED_CELLS = (29, 22, 39)


class State(enum.IntEnum):
    """State of a single board cell; the values are those stored in save files."""

    NONUSED = 0
    FREE = 1
    RED = 2
    BLUE = 3
    HIGHLIGHTED = 4


PLAYER_COLORS = (State.RED, State.BLUE)


def opponent(color):
    """Return the other player's colour."""
    if color == State.RED:
        return State.BLUE
    if color == State.BLUE:
        return State.RED
    raise ValueError(f"{color!r} is not a player colour")


@cache
def _all_adjacent(index):
    """Neighbours of a cell, unused cells included."""
    row = bisect_right(ROW_STARTS, index) - 1
    row_start = ROW_STARTS[row]
    more_in_next = row + 1 <= SIDE_LENGTH - 1
    more_in_prev = row - 1 >= SIDE_LENGTH - 1
    offset = index - row_start
    neighbours = []

    if row != 2 * SIDE_LENGTH - 2:
        shift = offset - (not more_in_next)
        if shift != -1:
            neighbours.append(ROW_STARTS[row + 1] + shift)
        right = ROW_STARTS[row + 1] + shift + 1
        if right != ROW_STARTS[row + 2]:
            neighbours.append(right)
    if row != 0:
        shift = offset - (not more_in_prev)
        if shift != -1:
            neighbours.append(ROW_STARTS[row - 1] + shift)
        right = ROW_STARTS[row - 1] + shift + 1
        if right != row_start:
            neighbours.append(right)
    if index + 1 != ROW_STARTS[row + 1]:
        neighbours.append(index + 1)
    if index != row_start:
        neighbours.append(index - 1)
    return tuple(neighbours)


class Board:
    """The 61-cell playing field together with whose turn it is."""

    def __init__(self):
        self._cells = [State.FREE] * BOARD_SIZE
        for index in UNUSED_CELLS:
            self._cells[index] = State.NONUSED
        self.playing_with_computer = False
        self.current_color = State.RED

    @staticmethod
    def _check(index):
        if not 0 <= index < BOARD_SIZE:
            raise IndexError(f"cell {index} is outside the board")

    def __getitem__(self, index):
        self._check(index)
        return self._cells[index]

    def __setitem__(self, index, state):
        self._check(index)
        self._cells[index] = State(state)

    def __len__(self):
        return BOARD_SIZE

    def indices(self, state):
        """Indices of all cells in the given state, ascending."""
        return [index for index, cell in enumerate(self._cells) if cell == state]

    def adjacent(self, index):
        """Usable neighbours of a cell."""
        self._check(index)
        return [n for n in _all_adjacent(index) if self._cells[n] != State.NONUSED]

    def possible_moves(self, index):
        """Free or highlighted cells within two steps of a cell, ascending."""
        self._check(index)
        targets = {
            target
            for neighbour in _all_adjacent(index)
            for target in self.adjacent(neighbour)
            if target != index and self._cells[target] in (State.FREE, State.HIGHLIGHTED)
        }
        return sorted(targets)

    def clear(self):
        """Make every usable cell free."""
        self._cells = [
            State.NONUSED if cell == State.NONUSED else State.FREE for cell in self._cells
        ]

    def clear_highlighted(self):
        """Turn highlighted cells back into free ones."""
        self._cells = [
            State.FREE if cell == State.HIGHLIGHTED else cell for cell in self._cells
        ]

    def copy(self):
        """Return an independent copy of the board."""
        other = Board()
        other._cells = list(self._cells)
        other.playing_with_computer = self.playing_with_computer
        other.current_color = self.current_color
        return other