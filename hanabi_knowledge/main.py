"""Replays hint and observation events against one card's knowledge and prints what is still possible."""

import argparse
import logging
from typing import List, NamedTuple, Optional

from .card_knowledge import CardInfo, CardPossibilityTable, SimpleCardInfo
from .hanabi_card import Card
from .hanabi_game import HanabiGame
from .util import char_to_color_index, color_index_to_char

MODELS = {
    "simple": SimpleCardInfo,
    "table": CardPossibilityTable,
}


class Event(NamedTuple):
    kind: str  # "color", "value", "seen" or "card"
    positive: bool
    color: int = -1
    value: int = -1


def parse_card(text: str) -> Card:
    if len(text) != 2 or not text[1].isdigit():
        raise ValueError(f"Expected a card like R3, got {text!r}")
    return Card(char_to_color_index(text[0]), int(text[1]))


def parse_event(text: str) -> Event:
    """Parses color:R, !color:R, value:3, !value:3, seen:R3 or card:R3."""
    positive = not text.startswith("!")
    kind, sep, arg = text.lstrip("!").partition(":")
    try:
        if not sep:
            raise ValueError(f"Missing ':' in event {text!r}")
        if kind == "color":
            return Event(kind, positive, color=char_to_color_index(arg))
        if kind == "value":
            return Event(kind, positive, value=int(arg))
        if kind in ("seen", "card"):
            if not positive:
                raise ValueError(f"Event {kind!r} cannot be negated")
            card = parse_card(arg)
            return Event(kind, True, color=card.color, value=card.value)
        raise ValueError(f"Unknown event kind {kind!r}")
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def apply_event(knowledge: CardInfo, event: Event):
    if event.kind == "color":
        knowledge.mark_color(event.color, event.positive)
    elif event.kind == "value":
        knowledge.mark_value(event.value, event.positive)
    elif event.kind == "card":
        knowledge.mark_true(Card(event.color, event.value))
    elif event.kind == "seen":
        if isinstance(knowledge, CardPossibilityTable):
            knowledge.decrement_weight_if_possible(Card(event.color, event.value))
    else:
        raise ValueError(f"Unknown event kind {event.kind!r}")


def check_event(event: Event, game: HanabiGame):
    """Rejects events naming a color or value the configured game does not have."""
    if event.kind in ("color", "seen", "card") and event.color not in game.colors_list:
        raise ValueError(f"Color {color_index_to_char(event.color)} is not part of {game}")
    if event.kind in ("value", "seen", "card") and event.value not in game.values_list:
        raise ValueError(f"Value {event.value} is not part of {game}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="track what is known about a hidden hanabi card")
    parser.add_argument("--model", type=str, choices=sorted(MODELS), default="table")

    # game settings
    parser.add_argument("--colors", type=int, default=5, help="number of colors")
    parser.add_argument("--ranks", type=int, default=5, help="number of values per color")

    parser.add_argument(
        "--event", type=parse_event, action="append", default=[],
        help="color:R, !color:R, value:3, !value:3, seen:R3 or card:R3 (repeatable)",
    )
    parser.add_argument("--width", type=int, default=0, help="pad the summary to this width")

    parser.add_argument("--log_file", type=str, default="")
    parser.add_argument("--log_level", type=str, default="INFO")

    return parser


def parse_args(argv: Optional[List[str]] = None):
    return build_parser().parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.log_file:
        logging.basicConfig(filename=args.log_file, level=args.log_level.upper())

    try:
        game = HanabiGame({"colors": str(args.colors), "ranks": str(args.ranks)})
        for event in args.event:
            check_event(event, game)
    except ValueError as e:
        parser.error(str(e))

    knowledge = MODELS[args.model](game)
    for event in args.event:
        apply_event(knowledge, event)
        logging.info(f"after {event.kind}: {knowledge}")

    width = str(args.width) if args.width > 0 else ""
    print(f"{knowledge:{width}}|")
    for card, weight in knowledge.weighted_possibilities():
        print(f"  {card} x{weight}")
    return 0
