"""
Deckstring codec.

A deck string is a base64 (standard alphabet, `=` padded) wrapping of this
binary payload:

    0x00                         reserved byte
    varint version               currently 1
    varint format                FormatTag value
    varint H, H x varint         hero card ids
    varint S, S x varint         cards with exactly one copy
    varint D, D x varint         cards with exactly two copies
    varint M, M x (varint id, varint count)
                                 every other card

Within each block the encoder sorts entries by ascending card id, so equal
decks always produce byte-identical strings. Nothing may follow the last
block.

Example:
    >>> deck = read_deckstring("AAECAdL6AwbkuAPczAOczgP1zgPi7AOXoAQM27gDmLkD4cwD/tED8NQDqN4Dqt4D4OwDre4DjZ8E+Z8E/p8EAA==")
    >>> write_deckstring(deck)
    'AAECAdL6AwbkuAPczAOczgP1zgPi7AOXoAQM27gDmLkD4cwD/tED8NQDqN4Dqt4D4OwDre4DjZ8E+Z8E/p8EAA=='
"""

import base64
import binascii
import logging

from deckstrings.codec.errors import (
    DuplicateCardError,
    InvalidCardCountError,
    InvalidCardIdError,
    InvalidEncodingError,
    InvalidFormatError,
    InvalidHeaderError,
    InvalidHeroCountError,
    TrailingDataError,
    TruncatedError,
    UnsupportedVersionError,
)
from deckstrings.codec.varint import decode_varint, encode_varint
from deckstrings.config import DECKSTRING_VERSION, SUPPORTED_VERSIONS
from deckstrings.models.deck import Deck, DeckCard

logger = logging.getLogger(__name__)

RESERVED_BYTE = 0x00


# =============================================================================
# ENCODING
# =============================================================================


def encode_deck(deck: Deck) -> bytes:
    """
    Encode a deck into the binary payload.

    Raises:
        InvalidFormatError: If the format tag is negative
        InvalidHeroCountError: If the deck has no hero
        InvalidCardIdError: If a hero or card id is not positive
        InvalidCardCountError: If a card has fewer than one copy
        DuplicateCardError: If a card id appears in more than one entry
    """
    _validate_for_encoding(deck)

    singles: list[int] = []
    doubles: list[int] = []
    n_of: list[DeckCard] = []

    for card in sorted(deck.cards, key=lambda c: c.card_id):
        if card.count == 1:
            singles.append(card.card_id)
        elif card.count == 2:
            doubles.append(card.card_id)
        else:
            n_of.append(card)

    payload = bytearray([RESERVED_BYTE])
    payload += encode_varint(DECKSTRING_VERSION)
    payload += encode_varint(int(deck.format))

    payload += encode_varint(len(deck.heroes))
    for hero in deck.heroes:
        payload += encode_varint(hero)

    payload += encode_varint(len(singles))
    for card_id in singles:
        payload += encode_varint(card_id)

    payload += encode_varint(len(doubles))
    for card_id in doubles:
        payload += encode_varint(card_id)

    payload += encode_varint(len(n_of))
    for card in n_of:
        payload += encode_varint(card.card_id)
        payload += encode_varint(card.count)

    logger.debug(
        "Encoded deck: %d singles, %d doubles, %d n-of, %d bytes",
        len(singles),
        len(doubles),
        len(n_of),
        len(payload),
    )
    return bytes(payload)


def write_deckstring(deck: Deck) -> str:
    """Encode a deck as a printable deck string."""
    return base64.b64encode(encode_deck(deck)).decode("ascii")


def _validate_for_encoding(deck: Deck) -> None:
    """Reject decks that cannot be represented unambiguously."""
    if deck.format < 0:
        raise InvalidFormatError(deck.format)

    if not deck.heroes:
        raise InvalidHeroCountError(len(deck.heroes))

    for hero in deck.heroes:
        if hero <= 0:
            raise InvalidCardIdError(hero)

    seen: set[int] = set()
    for card in deck.cards:
        if card.card_id <= 0:
            raise InvalidCardIdError(card.card_id)
        if card.count < 1:
            raise InvalidCardCountError(card.card_id, card.count)
        if card.card_id in seen:
            raise DuplicateCardError(card.card_id)
        seen.add(card.card_id)


# =============================================================================
# DECODING
# =============================================================================


class _PayloadReader:
    """Sequential, bounds-checked reader over a payload."""

    def __init__(self, data: bytes) -> None:
        self.data = data
        self.cursor = 0

    def read_byte(self, field_name: str) -> int:
        if self.cursor >= len(self.data):
            raise TruncatedError(offset=self.cursor, field_name=field_name)
        value = self.data[self.cursor]
        self.cursor += 1
        return value

    def read_varint(self, field_name: str) -> int:
        try:
            value, self.cursor = decode_varint(self.data, self.cursor)
        except TruncatedError as e:
            raise TruncatedError(offset=e.offset, field_name=field_name) from None
        return value

    @property
    def remaining(self) -> int:
        return len(self.data) - self.cursor


def decode_deck(payload: bytes) -> Deck:
    """
    Decode a binary payload into a Deck.

    Card counts in the n-of block are surfaced as-is, including 0.
    A card id repeated across blocks yields separate entries.

    Raises:
        InvalidHeaderError: If the reserved byte is not zero
        UnsupportedVersionError: If the version is unknown
        TruncatedError: If the payload ends mid-field
        VarintOverflowError: If a number exceeds 64 bits
        TrailingDataError: If bytes follow the last block
    """
    reader = _PayloadReader(payload)

    reserved = reader.read_byte("reserved byte")
    if reserved != RESERVED_BYTE:
        raise InvalidHeaderError(reserved)

    version = reader.read_varint("version")
    if version not in SUPPORTED_VERSIONS:
        raise UnsupportedVersionError(version)

    format_tag = reader.read_varint("format")

    hero_count = reader.read_varint("hero count")
    heroes = [reader.read_varint("hero id") for _ in range(hero_count)]

    cards: list[DeckCard] = []

    single_count = reader.read_varint("singles count")
    for _ in range(single_count):
        cards.append(DeckCard(reader.read_varint("card id"), 1))

    double_count = reader.read_varint("doubles count")
    for _ in range(double_count):
        cards.append(DeckCard(reader.read_varint("card id"), 2))

    n_of_count = reader.read_varint("n-of count")
    for _ in range(n_of_count):
        card_id = reader.read_varint("card id")
        count = reader.read_varint("card count")
        cards.append(DeckCard(card_id, count))

    if reader.remaining:
        raise TrailingDataError(offset=reader.cursor, remaining=reader.remaining)

    logger.debug(
        "Decoded deck: format=%d heroes=%d entries=%d",
        format_tag,
        len(heroes),
        len(cards),
    )
    return Deck(format=format_tag, heroes=tuple(heroes), cards=tuple(cards))


def read_deckstring(deckstring: str) -> Deck:
    """
    Decode a printable deck string into a Deck.

    Surrounding whitespace is ignored. The base64 layer is checked in full
    before any binary parsing.

    Raises:
        InvalidEncodingError: If the string is not valid base64
        DeckstringError: Any decode_deck() error
    """
    try:
        payload = base64.b64decode(deckstring.strip(), validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidEncodingError(str(e)) from e

    return decode_deck(payload)
