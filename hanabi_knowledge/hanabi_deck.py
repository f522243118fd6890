import numpy as np
from typing import Optional

from .card_knowledge import CardPossibilityTable
from .hanabi_card import Card
from .hanabi_game import STANDARD_GAME, HanabiGame
from .util import require


class DeckCounts:
    """
    Number of copies of every card that the observer has not seen yet.
    Starts at the full deck composition and only ever decreases.
    """

    def __init__(self, game: Optional[HanabiGame] = None):
        self.game = game or STANDARD_GAME
        self.num_ranks = self.game.num_ranks
        self.card_count = np.zeros(self.game.num_colors * self.game.num_ranks, dtype=int)
        for color in self.game.colors_list:
            for value in self.game.values_list:
                self.card_count[self.card_to_index(color, value)] = self.game.number_card_instances(value)

    def card_to_index(self, color, value):
        require(
            color in self.game.colors_list and value in self.game.values_list,
            f"Card with color {color} and value {value} is not part of {self.game}.",
        )
        return color * self.num_ranks + (value - 1)

    def index_to_color(self, index):
        return index // self.num_ranks

    def index_to_value(self, index):
        return index % self.num_ranks + 1

    def index_to_card(self, index) -> Card:
        return Card(self.index_to_color(index), self.index_to_value(index))

    def remaining(self, card: Card) -> int:
        return int(self.card_count[self.card_to_index(card.color, card.value)])

    def total(self) -> int:
        return int(self.card_count.sum())

    def mark_seen(self, card: Card):
        """Records one copy of the card becoming visible (dealt to someone else, played or discarded)."""
        index = self.card_to_index(card.color, card.value)
        require(self.card_count[index] > 0, f"All copies of {card} have already been seen.")
        self.card_count[index] -= 1

    def probabilities(self) -> np.ndarray:
        """Chance of each card index being the next unseen card drawn uniformly."""
        total = self.total()
        if total == 0:
            return np.zeros(len(self.card_count), dtype=float)
        return self.card_count.astype(float) / total

    def seed_table(self) -> CardPossibilityTable:
        """Builds a joint-model table weighted by what is still unseen."""
        weights = {
            self.index_to_card(index): int(count)
            for index, count in enumerate(self.card_count)
        }
        return CardPossibilityTable.from_weights(weights, self.game)

    def __str__(self):
        return " ".join(
            f"{self.index_to_card(index)}:{count}"
            for index, count in enumerate(self.card_count)
        )
