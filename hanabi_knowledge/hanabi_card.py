from functools import total_ordering

from .util import color_index_to_char, rank_index_to_char


@total_ordering
class HanabiCard:
    __slots__ = ("_color", "_value")

    def __init__(self, color: int, value: int):
        """
        Initializes an immutable HanabiCard.
        :param color: The color index of the card (0-indexed).
        :param value: The value of the card (1-indexed).
        """
        object.__setattr__(self, "_color", color)
        object.__setattr__(self, "_value", value)

    def __setattr__(self, name, value):
        raise AttributeError("HanabiCard is immutable")

    @property
    def color(self) -> int:
        return self._color

    @property
    def value(self) -> int:
        return self._value

    def _key(self):
        return (self._color, self._value)

    def __eq__(self, other_card):
        """
        Compares two HanabiCard objects for equality.
        :return: True if both cards have the same color and value, False otherwise.
        """
        if not isinstance(other_card, HanabiCard):
            return NotImplemented
        return self._key() == other_card._key()

    def __lt__(self, other_card):
        """Cards are ordered by color first, then value."""
        if not isinstance(other_card, HanabiCard):
            return NotImplemented
        return self._key() < other_card._key()

    def __hash__(self):
        return hash(self._key())

    def __reduce__(self):
        return (self.__class__, self._key())

    def to_string(self):
        """
        Returns a string representation of the card, e.g. "R1".
        """
        return f"{color_index_to_char(self._color)}{rank_index_to_char(self._value)}"

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return f"Card({self.to_string()})"


Card = HanabiCard
