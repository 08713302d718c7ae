from deckstrings.parsers.page_text import (
    DeckPage,
    PageLine,
    PageLineKind,
    extract_page_deckstring,
    iter_page_lines,
    parse_deckstring_page,
    read_deckstring_page_name,
    read_deckstring_page_name_into,
)

__all__ = [
    "DeckPage",
    "PageLine",
    "PageLineKind",
    "extract_page_deckstring",
    "iter_page_lines",
    "parse_deckstring_page",
    "read_deckstring_page_name",
    "read_deckstring_page_name_into",
]
