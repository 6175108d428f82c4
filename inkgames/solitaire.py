"""Klondike-style solitaire with a single-pass stock and top-card moves only."""

from __future__ import annotations

import random
from dataclasses import dataclass

TABLEAU_COUNT = 7
FOUNDATION_COUNT = 4

_RANKS = ("?", "A", "2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K")
_SUITS = ("H", "D", "C", "S")


def is_red(suit):
    """Hearts (0) and diamonds (1) are red."""
    return suit in (0, 1)


def rank_text(rank):
    return _RANKS[rank] if 0 <= rank <= 13 else "?"


def suit_symbol(suit):
    return _SUITS[suit] if 0 <= suit < 4 else "?"


@dataclass(frozen=True)
class Card:
    """A playing card; rank 0 stands for no card."""

    rank: int = 0
    suit: int = 0

    def label(self):
        return f"{rank_text(self.rank)}{suit_symbol(self.suit)}"


class Solitaire:
    """Seven tableau columns, four foundations, a stock and a waste pile.

    Only the top card of a column is ever moved, and the stock is dealt
    through once without recycling.
    """

    def __init__(self, rng=None):
        self.rng = rng if rng is not None else random.Random()
        self.new_game()

    def new_game(self):
        deck = [Card(rank, suit) for suit in range(4) for rank in range(1, 14)]
        for i in range(len(deck) - 1, 0, -1):
            j = self.rng.randrange(i + 1)
            deck[i], deck[j] = deck[j], deck[i]

        cards = iter(deck)
        self.tableau = [[next(cards) for _ in range(column + 1)] for column in range(TABLEAU_COUNT)]
        self.stock = list(cards)
        self.waste = []
        self.foundation = [Card() for _ in range(FOUNDATION_COUNT)]
        self.selected_column = 0
        self.game_won = False
        self.game_lost = False
        self.update_end_state()

    @property
    def finished(self):
        return self.game_won or self.game_lost

    def can_move_to_tableau(self, card, column):
        if not 0 <= column < TABLEAU_COUNT:
            return False
        pile = self.tableau[column]
        if not pile:
            return card.rank == 13
        target = pile[-1]
        return card.rank + 1 == target.rank and is_red(card.suit) != is_red(target.suit)

    def can_move_to_foundation(self, card):
        if card.rank == 0:
            return False
        top = self.foundation[card.suit]
        return (top.rank == 0 and card.rank == 1) or top.rank + 1 == card.rank

    def try_auto_move(self):
        """Move one card from the waste or a column onto a foundation."""
        if self.waste and self.can_move_to_foundation(self.waste[-1]):
            card = self.waste.pop()
            self.foundation[card.suit] = card
            return True
        for pile in self.tableau:
            if pile and self.can_move_to_foundation(pile[-1]):
                card = pile.pop()
                self.foundation[card.suit] = card
                return True
        return False

    def auto_play(self):
        """Move cards to the foundations until none fits; return how many moved."""
        if self.finished:
            return 0
        moved = 0
        while self.try_auto_move():
            moved += 1
        self.update_end_state()
        return moved

    def update_end_state(self):
        self.game_won = all(card.rank == 13 for card in self.foundation)
        if self.game_won:
            self.game_lost = False
            return
        if self.stock or self.waste:
            self.game_lost = False
            return
        self.game_lost = not any(
            self.can_move_to_foundation(pile[-1])
            or any(j != i and self.can_move_to_tableau(pile[-1], j) for j in range(TABLEAU_COUNT))
            for i, pile in enumerate(self.tableau)
            if pile
        )

    def select_column(self, step):
        """Move the column selection by step, wrapping around."""
        if self.finished:
            return
        self.selected_column = (self.selected_column + step) % TABLEAU_COUNT

    def draw_card(self):
        """Turn the top stock card onto the waste; return whether one was drawn."""
        if self.finished or not self.stock:
            return False
        self.waste.append(self.stock.pop())
        return True

    def play(self):
        """Move the selected column's top card, or start over once the game has ended.

        The card goes to its foundation if it fits there, otherwise onto the
        first other column that takes it. Return whether a card moved.
        """
        if self.finished:
            self.new_game()
            return False
        pile = self.tableau[self.selected_column]
        if not pile:
            return False
        card = pile[-1]
        if self.can_move_to_foundation(card):
            self.foundation[card.suit] = pile.pop()
            self.update_end_state()
            return True
        for column in range(TABLEAU_COUNT):
            if column != self.selected_column and self.can_move_to_tableau(card, column):
                self.tableau[column].append(pile.pop())
                self.update_end_state()
                return True
        return False

    def status(self):
        if self.game_won:
            return "You won!"
        if self.game_lost:
            return "No more moves"
        return f"Stock: {len(self.stock)}  Waste: {len(self.waste)}"

    def render(self):
        """Stock, waste and foundations, the tableau columns, then the status line."""
        stock = "[##]" if self.stock else "[  ]"
        waste = f"[{self.waste[-1].label():>3}]" if self.waste else "[   ]"
        foundations = " ".join(
            f"[{card.label() if card.rank else suit_symbol(suit):>3}]"
            for suit, card in enumerate(self.foundation)
        )
        lines = [f"{stock} {waste}   {foundations}"]
        depth = max((len(pile) for pile in self.tableau), default=0)
        for row in range(max(depth, 1)):
            cells = []
            for column, pile in enumerate(self.tableau):
                if row < len(pile):
                    mark = "*" if column == self.selected_column and row == len(pile) - 1 else " "
                    cells.append(f"{pile[row].label():>3}{mark}")
                elif row == 0:
                    mark = "*" if column == self.selected_column else " "
                    cells.append(f"{'--':>3}{mark}")
                else:
                    cells.append("    ")
            lines.append(" ".join(cells).rstrip())
        lines.append(self.status())
        return "\n".join(lines)