"""
Deckstrings services.

Import and export of decks as user-facing text.
"""

from deckstrings.services.deck_import import import_deck
from deckstrings.services.page_formatter import write_deckstring_page

__all__ = [
    "import_deck",
    "write_deckstring_page",
]
