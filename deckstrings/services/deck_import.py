"""
Deck import.

Turns user-pasted text into a Deck. The text may be a bare deck string or a
full page text export; either way the first non-comment line is decoded and
the title (if any) becomes the deck name.
"""

import dataclasses
import logging

from deckstrings.codec.deckstring import read_deckstring
from deckstrings.codec.errors import DeckstringError, MissingDeckstringError
from deckstrings.models.deck import Deck
from deckstrings.parsers.page_text import parse_deckstring_page

logger = logging.getLogger(__name__)


def import_deck(text: str | bytes, capacity: int | None = None) -> Deck:
    """
    Import a deck from a deck string or page text.

    Args:
        text: Bare deck string or page text export
        capacity: Name buffer capacity (defaults to settings)

    Returns:
        Decoded Deck with `name` set from the page title ("" if none)

    Raises:
        MissingDeckstringError: If the text holds no deck string line
        DeckstringError: If the deck string fails to decode
    """
    page = parse_deckstring_page(text, capacity)

    if page.deckstring is None:
        logger.warning("Import text has no deck string line")
        raise MissingDeckstringError()

    try:
        deck = read_deckstring(page.deckstring)
    except DeckstringError as e:
        logger.warning("Rejected deck string (%s): %s", e.kind.value, e.detail)
        raise

    logger.info(
        "Imported deck %r: format=%s hero=%s cards=%d",
        page.name,
        deck.format_name,
        deck.hero,
        deck.total_cards(),
    )
    return dataclasses.replace(deck, name=page.name)
