from typing import Dict, List, Optional

from .util import kMaxNumColors, kMaxNumRanks, parameter_value

RED, YELLOW, GREEN, WHITE, BLUE = range(kMaxNumColors)


class HanabiGame:
    """
    The fixed catalog a tracker reasons about: which colors and values exist
    and how many physical copies of each value are in the deck.

    Configured from a dictionary of string parameters:
      - colors: number of colors, 1..5 (default 5)
      - ranks: number of values per color, 1..5 (default 5)
    """

    def __init__(self, params: Optional[Dict[str, str]] = None):
        self.params = dict(params or {})
        self.num_colors = parameter_value(self.params, "colors", kMaxNumColors)
        self.num_ranks = parameter_value(self.params, "ranks", kMaxNumRanks)
        if not 1 <= self.num_colors <= kMaxNumColors:
            raise ValueError(f"colors must be between 1 and {kMaxNumColors}, got {self.num_colors}")
        if not 1 <= self.num_ranks <= kMaxNumRanks:
            raise ValueError(f"ranks must be between 1 and {kMaxNumRanks}, got {self.num_ranks}")

        self.colors_list: List[int] = list(range(self.num_colors))
        self.values_list: List[int] = list(range(1, self.num_ranks + 1))

    def number_card_instances(self, value: int) -> int:
        """Number of physical copies of each card with this value, for a single color."""
        if value < 1 or value > self.num_ranks:
            return 0
        if value == 1:
            return 3
        elif value == self.num_ranks:
            return 1
        return 2

    def cards_per_color(self) -> int:
        return sum(self.number_card_instances(value) for value in self.values_list)

    def deck_size(self) -> int:
        return self.num_colors * self.cards_per_color()

    def __eq__(self, other):
        if not isinstance(other, HanabiGame):
            return NotImplemented
        return self.num_colors == other.num_colors and self.num_ranks == other.num_ranks

    def __hash__(self):
        return hash((self.num_colors, self.num_ranks))

    def __repr__(self):
        return f"HanabiGame(colors={self.num_colors}, ranks={self.num_ranks})"


STANDARD_GAME = HanabiGame()

COLORS = tuple(STANDARD_GAME.colors_list)
VALUES = tuple(STANDARD_GAME.values_list)


def get_count_for_value(value: int) -> int:
    """Copies of a value per color in the standard deck."""
    return STANDARD_GAME.number_card_instances(value)
