"""Game rules: moving, capturing, score keeping and the computer's reply."""

from __future__ import annotations

from hexxagon.board import Board, State, opponent
from hexxagon.bot import calculate_move

BLUE_START = (0, 56, 34)
RED_START = (26, 4, 60)
START_SCORE = 3


class Game:
    """A match in progress: the board, the scores and the selected piece."""

    def __init__(self):
        self.board = Board()
        self.scores = {State.RED: 0, State.BLUE: 0}
        self.selected = None

    @staticmethod
    def _slot(color):
        return State.BLUE if color == State.BLUE else State.RED

    def _add_score(self, color, points):
        self.scores[self._slot(color)] += points

    def prepare(self, playing_with_computer):
        """Set up the starting position of a new match."""
        self.board.clear()
        for cell in BLUE_START:
            self.board[cell] = State.BLUE
        for cell in RED_START:
            self.board[cell] = State.RED
        self.scores = {State.RED: START_SCORE, State.BLUE: START_SCORE}
        self.board.current_color = State.RED
        self.board.playing_with_computer = playing_with_computer
        self.selected = None

    def load_board(self, board):
        """Continue play on a given board."""
        self.board = board
        self.selected = None
        self.calculate_scores()

    def make_move(self, new_index, old_index):
        """Move the current player's piece; return True when the match ends."""
        board = self.board
        player = board.current_color
        rival = opponent(player)
        board[new_index] = player

        cloned = False
        gained = lost = 0
        for field in board.adjacent(new_index):
            if field == old_index:
                cloned = True
                gained += 1
            elif board[field] == rival:
                board[field] = player
                gained += 1
                lost -= 1
        if not cloned:
            board[old_index] = State.FREE

        if not board.indices(State.FREE) or all(
            not board.possible_moves(piece) for piece in board.indices(rival)
        ):
            free = board.indices(State.FREE)
            for field in free:
                board[field] = player
            self._add_score(player, gained + len(free))
            self._add_score(rival, lost)
            return True

        self._add_score(player, gained)
        self._add_score(rival, lost)
        board.current_color = rival
        return False

    def select(self, index):
        """Handle a click on a cell; return True when the match ends."""
        board = self.board
        if index != self.selected:
            state = board[index]
            if state in (State.RED, State.BLUE):
                board.clear_highlighted()
                if state == board.current_color:
                    for target in board.possible_moves(index):
                        board[target] = State.HIGHLIGHTED
                    self.selected = index
                return False
            board.clear_highlighted()
            if state == State.HIGHLIGHTED and self.selected is not None:
                if self.make_move(index, self.selected):
                    return True
                if board.playing_with_computer:
                    reply = calculate_move(board)
                    if self.make_move(reply.target, reply.source):
                        return True
                else:
                    board.current_color = opponent(board[index])
        else:
            board.clear_highlighted()
        self.selected = None
        return False

    def calculate_scores(self):
        """Recount the scores from the pieces on the board."""
        self.scores = {
            State.RED: len(self.board.indices(State.RED)),
            State.BLUE: len(self.board.indices(State.BLUE)),
        }

    def score(self, color):
        """Score of a player."""
        return self.scores[self._slot(color)]