"""
Deck string codec.

Binary payload and base64 wrapping for sharing a deck's composition.
"""

from deckstrings.codec.deckstring import (
    decode_deck,
    encode_deck,
    read_deckstring,
    write_deckstring,
)
from deckstrings.codec.errors import (
    DeckstringError,
    DuplicateCardError,
    InvalidCardCountError,
    InvalidCardIdError,
    InvalidEncodingError,
    InvalidFormatError,
    InvalidHeaderError,
    InvalidHeroCountError,
    MissingDeckstringError,
    TrailingDataError,
    TruncatedError,
    UnsupportedVersionError,
    VarintOverflowError,
)
from deckstrings.codec.varint import decode_varint, encode_varint

__all__ = [
    "DeckstringError",
    "DuplicateCardError",
    "InvalidCardCountError",
    "InvalidCardIdError",
    "InvalidEncodingError",
    "InvalidFormatError",
    "InvalidHeaderError",
    "InvalidHeroCountError",
    "MissingDeckstringError",
    "TrailingDataError",
    "TruncatedError",
    "UnsupportedVersionError",
    "VarintOverflowError",
    "decode_deck",
    "decode_varint",
    "encode_deck",
    "encode_varint",
    "read_deckstring",
    "write_deckstring",
]
