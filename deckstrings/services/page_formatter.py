"""
Page text formatter.

Renders a deck in the shareable page text format read by
`deckstrings.parsers.page_text`.
"""

from collections.abc import Mapping

from deckstrings.codec.deckstring import write_deckstring
from deckstrings.models.deck import Deck

USAGE_FOOTER = "# To use this deck, copy it to your clipboard and create a new deck in Hearthstone"


def write_deckstring_page(deck: Deck, card_names: Mapping[int, str] | None = None) -> str:
    """
    Format a deck as page text.

    Args:
        deck: Deck to share (must be encodable)
        card_names: Optional {card_id: name} used to list the cards as
            comments. Cards missing from the mapping are listed by id.

    Returns:
        Page text with title, comments, deck string and footer

    Raises:
        DeckstringError: If the deck cannot be encoded
    """
    deckstring = write_deckstring(deck)

    lines: list[str] = []

    # Titles are single-line
    name = " ".join(deck.name.split())
    if name:
        lines.append(f"### {name}")

    lines.append(f"# Format: {deck.format_name.title()}")
    lines.append("#")

    if card_names is not None:
        for card in sorted(deck.cards, key=lambda c: c.card_id):
            lines.append(_format_card_line(card.card_id, card.count, card_names))
        lines.append("#")

    lines.append(deckstring)
    lines.append("#")
    lines.append(USAGE_FOOTER)

    return "\n".join(lines)


def _format_card_line(card_id: int, count: int, card_names: Mapping[int, str]) -> str:
    """Format a single card comment line."""
    return f"# {count}x {card_names.get(card_id, f'Card {card_id}')}"
