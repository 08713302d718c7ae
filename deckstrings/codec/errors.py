"""
Deckstring codec errors.

Every codec operation either returns a value or raises exactly one of these.
They are KnownErrors, so the HTTP layer turns them into classified failure
responses without any extra mapping.
"""

from deckstrings.models.failure import FailureKind, KnownError


class DeckstringError(KnownError):
    """
    Base exception for all deck string failures.

    The entire operation is rejected. No partial deck is ever returned.
    """

    kind: FailureKind = FailureKind.UNKNOWN

    def __init__(self, message: str, detail: str | None = None) -> None:
        super().__init__(kind=self.kind, message=message, detail=detail)


# -----------------------------------------------------------------------------
# Decode-time errors
# -----------------------------------------------------------------------------


class InvalidEncodingError(DeckstringError):
    """Raised when the base64 layer rejects the input string."""

    kind = FailureKind.INVALID_ENCODING

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__("Deck string is not valid base64", detail=reason)


class InvalidHeaderError(DeckstringError):
    """Raised when the reserved leading byte is not zero."""

    kind = FailureKind.INVALID_HEADER

    def __init__(self, value: int) -> None:
        self.value = value
        super().__init__(
            "Deck string has an invalid header",
            detail=f"reserved byte is {value:#04x}, expected 0x00",
        )


class UnsupportedVersionError(DeckstringError):
    """Raised when the payload version is not one this codec can parse."""

    kind = FailureKind.UNSUPPORTED_VERSION

    def __init__(self, version: int) -> None:
        self.version = version
        super().__init__(
            f"Deck string version {version} is not supported",
            detail=f"version={version}",
        )


class TruncatedError(DeckstringError):
    """Raised when the payload ends in the middle of a field."""

    kind = FailureKind.TRUNCATED

    def __init__(self, offset: int, field_name: str = "varint") -> None:
        self.offset = offset
        self.field_name = field_name
        super().__init__(
            "Deck string is truncated",
            detail=f"payload ended at byte {offset} while reading {field_name}",
        )


class VarintOverflowError(DeckstringError):
    """Raised when a varint does not fit the supported integer width."""

    kind = FailureKind.OVERFLOW

    def __init__(self, offset: int, bits: int) -> None:
        self.offset = offset
        self.bits = bits
        super().__init__(
            "Deck string contains an out-of-range number",
            detail=f"varint at byte {offset} exceeds {bits} bits",
        )


class TrailingDataError(DeckstringError):
    """Raised when bytes remain after a structurally complete payload."""

    kind = FailureKind.TRAILING_DATA

    def __init__(self, offset: int, remaining: int) -> None:
        self.offset = offset
        self.remaining = remaining
        super().__init__(
            "Deck string has unexpected trailing data",
            detail=f"{remaining} byte(s) left after offset {offset}",
        )


# -----------------------------------------------------------------------------
# Encode-time errors (caller input)
# -----------------------------------------------------------------------------


class InvalidFormatError(DeckstringError):
    """Raised when a deck to encode has a negative format tag."""

    kind = FailureKind.INVALID_FORMAT

    def __init__(self, format_tag: int) -> None:
        self.format_tag = format_tag
        super().__init__(
            f"Format tag {format_tag} is not valid",
            detail=f"format={format_tag}, expected 0 or more",
        )


class InvalidCardCountError(DeckstringError):
    """Raised when a card entry has fewer than one copy."""

    kind = FailureKind.INVALID_CARD_COUNT

    def __init__(self, card_id: int, count: int) -> None:
        self.card_id = card_id
        self.count = count
        super().__init__(
            f"Card {card_id} has an invalid count",
            detail=f"count={count}, expected at least 1",
        )


class InvalidHeroCountError(DeckstringError):
    """Raised when a deck to encode has no hero."""

    kind = FailureKind.INVALID_HERO_COUNT

    def __init__(self, hero_count: int) -> None:
        self.hero_count = hero_count
        super().__init__(
            "A deck needs at least one hero",
            detail=f"hero_count={hero_count}",
        )


class InvalidCardIdError(DeckstringError):
    """Raised when a card or hero id is not a positive integer."""

    kind = FailureKind.INVALID_CARD_ID

    def __init__(self, card_id: int) -> None:
        self.card_id = card_id
        super().__init__(
            f"Card id {card_id} is not a positive integer",
            detail=f"card_id={card_id}",
        )


class DuplicateCardError(DeckstringError):
    """Raised when the same card id appears in more than one entry."""

    kind = FailureKind.DUPLICATE_CARD

    def __init__(self, card_id: int) -> None:
        self.card_id = card_id
        super().__init__(
            f"Card {card_id} appears more than once",
            detail="merge duplicate entries before encoding",
        )


# -----------------------------------------------------------------------------
# Page text
# -----------------------------------------------------------------------------


class MissingDeckstringError(DeckstringError):
    """Raised when page text contains no deck string line."""

    kind = FailureKind.MISSING_DECKSTRING

    def __init__(self) -> None:
        super().__init__(
            "No deck string found in the text",
            detail="every non-blank line is a title or comment",
        )
