"""
Deck data model.

A Deck is the value produced by decoding a deck string and consumed by
encoding one. Card and hero identifiers are opaque integers owned by an
external card database; format tags are opaque integers owned by the game's
rules. Neither is validated here.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import IntEnum


class FormatTag(IntEnum):
    """Known play format tags."""

    UNKNOWN = 0
    WILD = 1
    STANDARD = 2
    CLASSIC = 3
    TWIST = 4


@dataclass(frozen=True, slots=True)
class DeckCard:
    """
    One distinct card entry in a deck.

    Attributes:
        card_id: Card identifier in the external card database
        count: Number of copies (1 or more for a well-formed deck)
    """

    card_id: int
    count: int = 1


@dataclass(frozen=True)
class Deck:
    """
    An immutable deck.

    Attributes:
        format: Format tag value (a FormatTag or any raw integer read from a
            deck string)
        heroes: Hero card ids, normally exactly one
        cards: Card entries; decode keeps them in stream order
        name: Display name, recovered from page text (not part of the payload)

    Equality compares `cards` in order, so two decks holding the same cards
    in a different order are not equal. Compare `card_counts()` to ignore
    order.
    """

    format: int
    heroes: tuple[int, ...] = field(default_factory=tuple)
    cards: tuple[DeckCard, ...] = field(default_factory=tuple)
    name: str = ""

    def __post_init__(self) -> None:
        # Accept any iterable but always store tuples so the deck stays hashable
        object.__setattr__(self, "heroes", tuple(self.heroes))
        object.__setattr__(self, "cards", tuple(self.cards))

    @property
    def hero(self) -> int | None:
        """First hero id, or None for a hero-less deck."""
        return self.heroes[0] if self.heroes else None

    @property
    def format_name(self) -> str:
        """Name of the format tag, "UNKNOWN" for values outside the enum."""
        try:
            return FormatTag(self.format).name
        except ValueError:
            return FormatTag.UNKNOWN.name

    def total_cards(self) -> int:
        """Total cards in the deck (counting copies)."""
        return sum(card.count for card in self.cards)

    def card_counts(self) -> dict[int, int]:
        """Copies per card id. Repeated entries for one id are summed."""
        counts: dict[int, int] = {}
        for card in self.cards:
            counts[card.card_id] = counts.get(card.card_id, 0) + card.count
        return counts

    def count_of(self, card_id: int) -> int:
        """Copies of a card in the deck (0 if absent)."""
        return self.card_counts().get(card_id, 0)

    def __contains__(self, card_id: object) -> bool:
        return any(card.card_id == card_id for card in self.cards)

    def __len__(self) -> int:
        """Number of card entries."""
        return len(self.cards)


def create_deck(
    cards: Mapping[int, int],
    heroes: Iterable[int] | int,
    format_tag: int = FormatTag.STANDARD,
    name: str = "",
) -> Deck:
    """
    Build a Deck from a {card_id: count} mapping.

    Entries are ordered by ascending card id. A single hero id may be passed
    instead of a sequence.
    """
    if isinstance(heroes, int):
        heroes = (heroes,)

    return Deck(
        format=format_tag,
        heroes=tuple(heroes),
        cards=tuple(DeckCard(card_id, count) for card_id, count in sorted(cards.items())),
        name=name,
    )
