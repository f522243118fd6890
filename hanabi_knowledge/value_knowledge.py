from typing import Generic, Hashable, Iterable, List, Optional, Set, TypeVar

from .hanabi_game import STANDARD_GAME, HanabiGame
from .util import color_index_to_char, rank_index_to_char, require

T = TypeVar("T", bound=Hashable)


class Info(Generic[T]):
    """
    Represents hinted knowledge about one hidden attribute of a card, as the
    set of values from a finite domain that are still possible.

    The set only ever shrinks, except for mark_true, which collapses it to
    the single value a definitive observation revealed.
    """

    def __init__(self, domain: Iterable[T]):
        self._domain: List[T] = list(domain)
        require(len(self._domain) > 0, "Domain must not be empty.")
        self._possible: Set[T] = self.initialize()

    def all_possibilities(self) -> List[T]:
        """Returns the a-priori domain, in catalog order."""
        return list(self._domain)

    def initialize(self) -> Set[T]:
        """Returns the whole domain as a fresh possibility set."""
        return set(self.all_possibilities())

    def possibilities(self) -> List[T]:
        """Returns what is still possible (in domain order)."""
        return [value for value in self._domain if value in self._possible]

    def num_possibilities(self) -> int:
        return len(self._possible)

    def is_possible(self, value: T) -> bool:
        """Returns True if the value is still plausible."""
        return value in self._possible

    def is_determined(self) -> bool:
        """Returns True if exactly one value remains."""
        return len(self._possible) == 1

    def mark_true(self, value: T):
        """Records an observation that the value is exactly this."""
        require(value in self._possible, f"Cannot mark {value!r} true: already ruled out.")
        self._possible.clear()
        self._possible.add(value)

    def mark_false(self, value: T):
        """Records an observation that the value is not this."""
        self._possible.discard(value)

    def mark(self, value: T, is_true: bool):
        if is_true:
            self.mark_true(value)
        else:
            self.mark_false(value)

    def merge(self, other: "Info[T]"):
        """
        Intersects this knowledge with another observer's knowledge about the
        same attribute. Both must be consistent with the same true value.
        """
        self._possible = self.intersection(other)

    def intersection(self, other: "Info[T]") -> Set[T]:
        """Returns what both observers consider possible, without changing either."""
        require(self._domain == other._domain, "Cannot merge knowledge over different domains.")
        merged = self._possible & other._possible
        require(len(merged) > 0, "Merged knowledge is contradictory: nothing remains possible.")
        return merged

    def copy(self) -> "Info[T]":
        clone = self.__class__.__new__(self.__class__)
        clone.__dict__.update(self.__dict__)
        clone._possible = set(self._possible)
        return clone

    def __eq__(self, other):
        if not isinstance(other, Info):
            return NotImplemented
        return self._domain == other._domain and self._possible == other._possible

    def __repr__(self):
        return f"{self.__class__.__name__}({self.possibilities()!r})"


class ColorInfo(Info[int]):
    """Knowledge about the color of a card."""

    def __init__(self, game: Optional[HanabiGame] = None):
        super().__init__((game or STANDARD_GAME).colors_list)

    def __str__(self):
        return "".join(color_index_to_char(color) for color in self.possibilities())


class ValueInfo(Info[int]):
    """Knowledge about the value of a card."""

    def __init__(self, game: Optional[HanabiGame] = None):
        super().__init__((game or STANDARD_GAME).values_list)

    def __str__(self):
        return "".join(rank_index_to_char(value) for value in self.possibilities())
