"""Saving and loading matches in the binary save format."""

from __future__ import annotations

from pathlib import Path

from hexxagon.board import BOARD_SIZE, UNUSED_CELLS, Board, State

NOT_A_SAVE = "File is not a HEXXAGON save!"
CORRUPTED_SAVE = "Save is corrupted!"
CORRUPTED_ATTRIBUTES = "Save's attributes are corrupted!"


class SaveFormatError(ValueError):
    """The file exists but does not hold a valid saved match."""


def save_game(board, path):
    """Write the board, the opponent kind and the side to move to a file.

    The file holds one byte per cell (highlighted cells stored as free),
    then one byte telling whether the computer plays, then the colour to move.
    """
    cells = bytes(
        State.FREE if board[index] == State.HIGHLIGHTED else board[index]
        for index in range(len(board))
    )
    trailer = bytes((int(bool(board.playing_with_computer)), int(board.current_color)))
    Path(path).write_bytes(cells + trailer)


def load_game(path):
    """Read a saved match and return its board; raise SaveFormatError if invalid."""
    data = Path(path).read_bytes()
    if len(data) < BOARD_SIZE:
        raise SaveFormatError(NOT_A_SAVE)

    board = Board()
    for index, value in enumerate(data[:BOARD_SIZE]):
        if index in UNUSED_CELLS:
            continue
        if value >= len(State):
            raise SaveFormatError(NOT_A_SAVE)
        state = State(value)
        if state in (State.HIGHLIGHTED, State.NONUSED):
            raise SaveFormatError(CORRUPTED_SAVE)
        board[index] = state

    trailer = data[BOARD_SIZE:BOARD_SIZE + 2]
    if len(trailer) < 2:
        raise SaveFormatError(CORRUPTED_ATTRIBUTES)
    board.playing_with_computer = bool(trailer[0])
    if trailer[1] not in (State.RED, State.BLUE):
        raise SaveFormatError(CORRUPTED_ATTRIBUTES)
    board.current_color = State(trailer[1])
    return board


def validate_path(path, saving):
    """Check a path for saving (must not exist, root must) or loading (regular file)."""
    target = Path(path).absolute()
    if saving:
        return not target.exists() and Path(target.anchor).exists()
    return target.is_file()