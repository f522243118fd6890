"""Tracks what an observer can know about the hidden cards of a hanabi hand."""

from .hanabi_game import (
    BLUE,
    COLORS,
    GREEN,
    RED,
    STANDARD_GAME,
    VALUES,
    WHITE,
    YELLOW,
    HanabiGame,
    get_count_for_value,
)
from .hanabi_card import Card, HanabiCard
from .value_knowledge import ColorInfo, Info, ValueInfo
from .card_knowledge import CardInfo, CardPossibilityTable, SimpleCardInfo
from .hanabi_deck import DeckCounts
from .hanabi_hand import HandKnowledge

__all__ = [
    # Catalog
    "HanabiGame",
    "STANDARD_GAME",
    "COLORS",
    "VALUES",
    "RED",
    "YELLOW",
    "GREEN",
    "WHITE",
    "BLUE",
    "get_count_for_value",
    "Card",
    "HanabiCard",
    # Knowledge
    "Info",
    "ColorInfo",
    "ValueInfo",
    "CardInfo",
    "SimpleCardInfo",
    "CardPossibilityTable",
    "DeckCounts",
    "HandKnowledge",
]
