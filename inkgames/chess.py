"""Simplified chess against a computer that prefers captures."""

from __future__ import annotations

import random
from dataclasses import dataclass
from itertools import product

_INITIAL = ("rnbqkbnr", "pppppppp", "........", "........", "........", "........", "PPPPPPPP", "RNBQKBNR")
EMPTY = "."


def _is_white(piece):
    return "A" <= piece <= "Z"


def _is_black(piece):
    return "a" <= piece <= "z"


def _in_bounds(row, col):
    return 0 <= row < 8 and 0 <= col < 8


def _sign(value):
    return (value > 0) - (value < 0)


@dataclass(frozen=True)
class Move:
    from_row: int
    from_col: int
    to_row: int
    to_col: int


class ChessGame:
    """White is played by hand; black is played by the computer.

    There is no check, castling, en passant or promotion: the game ends when a
    king is captured or black has no move.
    """

    def __init__(self, rng=None):
        self.rng = rng if rng is not None else random.Random()
        self.reset()

    def reset(self):
        self.board = [list(line) for line in _INITIAL]
        self.white_turn = True
        self.selected = None
        self.game_over = False
        self.winner = None
        self.cursor = (6, 4)

    def path_clear(self, r1, c1, r2, c2):
        """Whether every square strictly between the two is empty."""
        dr, dc = _sign(r2 - r1), _sign(c2 - c1)
        r, c = r1 + dr, c1 + dc
        while (r, c) != (r2, c2):
            if self.board[r][c] != EMPTY:
                return False
            r, c = r + dr, c + dc
        return True

    def is_valid_move(self, fr, fc, tr, tc):
        if not _in_bounds(fr, fc) or not _in_bounds(tr, tc) or (fr, fc) == (tr, tc):
            return False
        piece = self.board[fr][fc]
        target = self.board[tr][tc]
        if piece == EMPTY:
            return False
        if (_is_white(piece) and _is_white(target)) or (_is_black(piece) and _is_black(target)):
            return False

        dr, dc = tr - fr, tc - fc
        adr, adc = abs(dr), abs(dc)
        kind = piece.upper()

        if kind == "P":
            forward = -1 if _is_white(piece) else 1
            start = 6 if _is_white(piece) else 1
            if dc == 0 and target == EMPTY and dr == forward:
                return True
            if (
                dc == 0
                and target == EMPTY
                and fr == start
                and dr == 2 * forward
                and self.board[fr + forward][fc] == EMPTY
            ):
                return True
            return adc == 1 and dr == forward and target != EMPTY
        if kind == "N":
            return (adr, adc) in ((1, 2), (2, 1))
        if kind == "B":
            return adr == adc and self.path_clear(fr, fc, tr, tc)
        if kind == "R":
            return (fr == tr or fc == tc) and self.path_clear(fr, fc, tr, tc)
        if kind == "Q":
            return (adr == adc or fr == tr or fc == tc) and self.path_clear(fr, fc, tr, tc)
        if kind == "K":
            return adr <= 1 and adc <= 1
        return False

    def legal_moves(self, white):
        """All valid moves for one side, in board scan order."""
        owns = _is_white if white else _is_black
        return [
            Move(r, c, tr, tc)
            for r, c in product(range(8), repeat=2)
            if owns(self.board[r][c])
            for tr, tc in product(range(8), repeat=2)
            if self.is_valid_move(r, c, tr, tc)
        ]

    def update_game_over(self):
        pieces = {p for line in self.board for p in line}
        if "K" not in pieces:
            self.game_over = True
            self.winner = "b"
        elif "k" not in pieces:
            self.game_over = True
            self.winner = "w"

    def _apply(self, move):
        self.board[move.to_row][move.to_col] = self.board[move.from_row][move.from_col]
        self.board[move.from_row][move.from_col] = EMPTY

    def ai_move(self):
        """Black plays its first capture, or a random move if none captures."""
        if self.game_over:
            return
        moves = self.legal_moves(False)
        if not moves:
            self.game_over = True
            self.winner = "w"
            return
        choice = moves[self.rng.randrange(len(moves))]
        choice = next((m for m in moves if self.board[m.to_row][m.to_col] != EMPTY), choice)
        self._apply(choice)
        self.white_turn = True
        self.update_game_over()

    def move_cursor(self, dx, dy):
        row, col = self.cursor
        self.cursor = (min(7, max(0, row + dy)), min(7, max(0, col + dx)))

    def tick(self):
        """Let black answer when it is black's turn."""
        if not self.game_over and not self.white_turn:
            self.ai_move()

    def confirm(self):
        """Select a white piece, move the selected one, or restart when over."""
        if self.game_over:
            self.reset()
            return
        if not self.white_turn:
            self.ai_move()
            return
        row, col = self.cursor
        if self.selected is None:
            if _is_white(self.board[row][col]):
                self.selected = (row, col)
            return
        sr, sc = self.selected
        self.selected = None
        if self.is_valid_move(sr, sc, row, col):
            self._apply(Move(sr, sc, row, col))
            self.white_turn = False
            self.update_game_over()

    def status(self):
        if self.game_over:
            return "White wins!" if self.winner == "w" else "Black wins!"
        return "White's turn" if self.white_turn else "Black's turn"

    def render(self):
        """The board as text followed by the status line."""
        lines = ["".join(line) for line in self.board]
        lines.append(self.status())
        return "\n".join(lines)