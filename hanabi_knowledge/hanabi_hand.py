import logging
from typing import Callable, Iterable, List, Optional

from .card_knowledge import CardInfo, CardPossibilityTable
from .hanabi_card import Card
from .hanabi_game import STANDARD_GAME, HanabiGame
from .util import color_index_to_char, require

logger = logging.getLogger(__name__)


class HandKnowledge:
    """
    Tracks what one observer knows about each card of a hand, one knowledge
    object per slot. Slots are added as cards are drawn and removed as
    cards are played or discarded.
    """

    def __init__(
        self,
        game: Optional[HanabiGame] = None,
        factory: Optional[Callable[[HanabiGame], CardInfo]] = None,
    ):
        self.game = game or STANDARD_GAME
        self.factory = factory or CardPossibilityTable
        self.card_knowledge: List[CardInfo] = []

    def __len__(self):
        return len(self.card_knowledge)

    def knowledge(self, card_index: int) -> CardInfo:
        self._check_index(card_index)
        return self.card_knowledge[card_index]

    def add_card(self, initial_knowledge: Optional[CardInfo] = None) -> CardInfo:
        knowledge = initial_knowledge if initial_knowledge is not None else self.factory(self.game)
        self.card_knowledge.append(knowledge)
        return knowledge

    def remove_card(self, card_index: int) -> CardInfo:
        self._check_index(card_index)
        return self.card_knowledge.pop(card_index)

    def reveal_color(self, color: int, card_indices: Iterable[int]):
        """A hint touched exactly the given slots: they have this color, the others don't."""
        touched = self._touched(card_indices)
        logger.debug("Color %s revealed on slots %s", color_index_to_char(color), sorted(touched))
        for i, knowledge in enumerate(self.card_knowledge):
            knowledge.mark_color(color, i in touched)

    def reveal_value(self, value: int, card_indices: Iterable[int]):
        """A hint touched exactly the given slots: they have this value, the others don't."""
        touched = self._touched(card_indices)
        logger.debug("Value %d revealed on slots %s", value, sorted(touched))
        for i, knowledge in enumerate(self.card_knowledge):
            knowledge.mark_value(value, i in touched)

    def observe_card(self, card: Card):
        """
        A copy of the card became visible elsewhere, so one fewer copy can be
        hiding in this hand. Only models that track copy counts are affected.
        """
        logger.debug("Observed %s", card)
        for knowledge in self.card_knowledge:
            if isinstance(knowledge, CardPossibilityTable):
                knowledge.decrement_weight_if_possible(card)

    def _touched(self, card_indices: Iterable[int]):
        touched = set(card_indices)
        for card_index in touched:
            self._check_index(card_index)
        return touched

    def _check_index(self, card_index: int):
        require(
            0 <= card_index < len(self.card_knowledge),
            f"Card index {card_index} out of range for a hand of {len(self.card_knowledge)}.",
        )

    def __str__(self) -> str:
        width = self.game.num_colors + self.game.num_ranks + 1
        return "\n".join(f"{i}: {knowledge:{width}} |" for i, knowledge in enumerate(self.card_knowledge))
