"""Computer opponent: a shallow look-ahead search over all moves."""

from __future__ import annotations

from dataclasses import dataclass

from hexxagon.board import State, opponent

RECURSION_DEPTH = 1


@dataclass(frozen=True)
class ScoredMove:
    """A move from one cell to another and its evaluated score."""

    source: int
    target: int
    score: int


def _score_move(board, source, target, step):
    board = board.copy()
    player = board.current_color
    board.current_color = opponent(player)

    score = 0
    if target in board.adjacent(source):
        score += 1
    else:
        board[source] = State.FREE
    board[target] = player
    for field in board.adjacent(target):
        if board[field] == board.current_color:
            board[field] = player
            score += 1
    if step != RECURSION_DEPTH:
        score -= calculate_move(board, step + 1).score
    return ScoredMove(source, target, score)


def calculate_move(board, step=0):
    """Return the best move for the side to play; ScoredMove(0, 0, 0) if none."""
    best = None
    for figure in board.indices(board.current_color):
        for target in board.possible_moves(figure):
            candidate = _score_move(board, figure, target, step)
            if best is None or best.score < candidate.score:
                best = candidate
    if best is None:
        return ScoredMove(0, 0, 0)
    return best