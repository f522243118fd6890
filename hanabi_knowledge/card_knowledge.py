import logging
from abc import ABC, abstractmethod
from typing import Callable, Dict, List, Mapping, Optional, Tuple

import numpy as np

from .hanabi_card import Card
from .hanabi_game import STANDARD_GAME, HanabiGame
from .util import require
from .value_knowledge import ColorInfo, ValueInfo

logger = logging.getLogger(__name__)


class CardInfo(ABC):
    """
    Knowledge about the identity of a single card, from one observer's
    point of view. Both the independent and the joint model implement this,
    so a caller can hold either one without knowing which it is.
    """

    def __init__(self, game: Optional[HanabiGame] = None):
        self.game = game or STANDARD_GAME

    def all_possibilities(self) -> List[Card]:
        """Returns every card of the deck design, in card order."""
        return [
            Card(color, value)
            for color in self.game.colors_list
            for value in self.game.values_list
        ]

    @abstractmethod
    def is_possible(self, card: Card) -> bool:
        ...

    def possibilities(self) -> List[Card]:
        return [card for card in self.all_possibilities() if self.is_possible(card)]

    def num_possibilities(self) -> int:
        return len(self.possibilities())

    def weight(self, card: Card) -> int:
        """Probability weight of the card. Uniform unless the model tracks copies."""
        return 1

    def weighted_possibilities(self) -> List[Tuple[Card, int]]:
        return [(card, self.weight(card)) for card in self.possibilities()]

    def total_weight(self) -> int:
        return sum(weight for _, weight in self.weighted_possibilities())

    def probability_of(self, predicate: Callable[[Card], bool]) -> float:
        """Weighted fraction of the possible cards for which predicate holds."""
        total = 0
        matching = 0
        for card, weight in self.weighted_possibilities():
            total += weight
            if predicate(card):
                matching += weight
        if total == 0:
            return 0.0
        return matching / total

    def color_determined(self) -> bool:
        return len({card.color for card in self.possibilities()}) == 1

    def value_determined(self) -> bool:
        return len({card.value for card in self.possibilities()}) == 1

    def is_determined(self) -> bool:
        return self.num_possibilities() == 1

    @abstractmethod
    def mark_color_false(self, color: int):
        ...

    def mark_color_true(self, color: int):
        for other_color in self.game.colors_list:
            if other_color != color:
                self.mark_color_false(other_color)

    def mark_color(self, color: int, is_color: bool):
        if is_color:
            self.mark_color_true(color)
        else:
            self.mark_color_false(color)

    @abstractmethod
    def mark_value_false(self, value: int):
        ...

    def mark_value_true(self, value: int):
        for other_value in self.game.values_list:
            if other_value != value:
                self.mark_value_false(other_value)

    def mark_value(self, value: int, is_value: bool):
        if is_value:
            self.mark_value_true(value)
        else:
            self.mark_value_false(value)

    def mark_true(self, card: Card):
        """Records that the card is known to be exactly this one."""
        require(self.is_possible(card), f"Cannot mark {card} true: already ruled out.")
        self.mark_color_true(card.color)
        self.mark_value_true(card.value)

    def __format__(self, format_spec):
        return format(str(self), format_spec)


class SimpleCardInfo(CardInfo):
    """
    Represents information only of the form:
    this color is/isn't possible, this value is/isn't possible.
    """

    def __init__(self, game: Optional[HanabiGame] = None):
        super().__init__(game)
        self.color_info = ColorInfo(self.game)
        self.value_info = ValueInfo(self.game)

    def possibilities(self) -> List[Card]:
        return [
            Card(color, value)
            for color in self.color_info.possibilities()
            for value in self.value_info.possibilities()
        ]

    def num_possibilities(self) -> int:
        return self.color_info.num_possibilities() * self.value_info.num_possibilities()

    def is_possible(self, card: Card) -> bool:
        return self.color_info.is_possible(card.color) and self.value_info.is_possible(card.value)

    def color_determined(self) -> bool:
        return self.color_info.is_determined()

    def value_determined(self) -> bool:
        return self.value_info.is_determined()

    def mark_color_false(self, color: int):
        self.color_info.mark_false(color)

    def mark_value_false(self, value: int):
        self.value_info.mark_false(value)

    def merge(self, other: "SimpleCardInfo"):
        """Combines another observer's knowledge about the same card into this one."""
        colors = self.color_info.intersection(other.color_info)
        values = self.value_info.intersection(other.value_info)
        self.color_info._possible = colors
        self.value_info._possible = values

    def copy(self) -> "SimpleCardInfo":
        clone = SimpleCardInfo.__new__(SimpleCardInfo)
        clone.game = self.game
        clone.color_info = self.color_info.copy()
        clone.value_info = self.value_info.copy()
        return clone

    def __str__(self):
        return f"{self.color_info} {self.value_info}"

    def __repr__(self):
        return f"SimpleCardInfo({str(self)!r})"


class CardPossibilityTable(CardInfo):
    """
    Can represent information of the form: this card is/isn't possible.
    Also maintains, for every possible card, how many copies of it may
    still be unseen.
    """

    def __init__(self, game: Optional[HanabiGame] = None):
        super().__init__(game)
        self.possible: Dict[Card, int] = {
            card: self.game.number_card_instances(card.value)
            for card in self.all_possibilities()
        }

    @classmethod
    def from_weights(cls, weights: Mapping[Card, int], game: Optional[HanabiGame] = None) -> "CardPossibilityTable":
        """Builds a table from explicit copy counts; cards with no copies left are impossible."""
        table = cls(game)
        for card in weights:
            require(card in table.possible, f"{card} is not a card of {table.game}.")
        for card in table.all_possibilities():
            count = int(weights.get(card, 0))
            require(count >= 0, f"Negative weight for {card}: {count}")
            require(count <= table.possible[card], f"Weight for {card} exceeds copies in the deck.")
            if count == 0:
                table._mark_false(card)
            else:
                table.possible[card] = count
        return table

    def _mark_false(self, card: Card):
        self.possible.pop(card, None)

    def is_possible(self, card: Card) -> bool:
        return card in self.possible

    def possibilities(self) -> List[Card]:
        return sorted(self.possible)

    def num_possibilities(self) -> int:
        return len(self.possible)

    def weight(self, card: Card) -> int:
        return self.possible.get(card, 0)

    def total_weight(self) -> int:
        return sum(self.possible.values())

    def mark_color_false(self, color: int):
        for value in self.game.values_list:
            self._mark_false(Card(color, value))

    def mark_value_false(self, value: int):
        for color in self.game.colors_list:
            self._mark_false(Card(color, value))

    def decrement_weight(self, card: Card):
        """One copy of the card has been seen elsewhere."""
        require(card in self.possible, f"Cannot decrement weight of {card}: not possible.")
        remaining = self.possible[card] - 1
        if remaining > 0:
            self.possible[card] = remaining
        else:
            logger.debug("Last unseen copy of %s observed, removing it", card)
            del self.possible[card]

    def decrement_weight_if_possible(self, card: Card):
        if self.is_possible(card):
            self.decrement_weight(card)

    def sample(self, rng: Optional[np.random.Generator] = None) -> Card:
        """Draws one possible card, with probability proportional to its weight."""
        require(len(self.possible) > 0, "Cannot sample: no card is possible.")
        rng = rng if rng is not None else np.random.default_rng()
        cards = self.possibilities()
        weights = np.array([self.possible[card] for card in cards], dtype=float)
        index = rng.choice(len(cards), p=weights / weights.sum())
        return cards[int(index)]

    def merge(self, other: "CardPossibilityTable"):
        """
        Combines another observer's table for the same card: a card stays
        possible only if both consider it possible, with the smaller weight.
        """
        require(self.game == other.game, "Cannot merge tables for different games.")
        merged = {
            card: min(weight, other.possible[card])
            for card, weight in self.possible.items()
            if card in other.possible
        }
        require(len(merged) > 0, "Merged knowledge is contradictory: nothing remains possible.")
        self.possible = merged

    def copy(self) -> "CardPossibilityTable":
        clone = CardPossibilityTable.__new__(CardPossibilityTable)
        clone.game = self.game
        clone.possible = dict(self.possible)
        return clone

    def __str__(self):
        return ", ".join(str(card) for card in self.possibilities())

    def __repr__(self):
        return f"CardPossibilityTable({str(self)!r})"
