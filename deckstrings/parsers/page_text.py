"""
Parser for shared deck page text.

Page text format:
    ### <deck name>
    # <comment lines: class, format, card list, ...>
    #
    <deck string>
    #
    # <usage instructions>

The first `###` line is the title. Other `#` lines are comments and blank
lines are skipped. The first remaining line is the deck string; anything
after it is ignored.

The text is scanned as bytes. Nothing here decodes the deck string and
nothing here raises: a missing title gives an empty name, a missing deck
string gives None.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

from deckstrings.config import settings

TITLE_MARKER = b"###"
COMMENT_MARKER = b"#"

# Terminator written after the name in a caller-supplied buffer
NAME_TERMINATOR = 0


class PageLineKind(str, Enum):
    """Classification of a page text line."""

    TITLE = "title"
    COMMENT = "comment"
    BLANK = "blank"
    DECKSTRING = "deckstring"


@dataclass(frozen=True, slots=True)
class PageLine:
    """
    A classified line of page text.

    Attributes:
        kind: Line classification
        text: For titles the name with marker and whitespace stripped,
            for deck strings the line exactly as written, otherwise the
            stripped line
        line_number: 1-based line number (for diagnostics)
    """

    kind: PageLineKind
    text: bytes
    line_number: int


@dataclass(frozen=True, slots=True)
class DeckPage:
    """Name and deck string extracted from page text."""

    name: str
    deckstring: str | None


def _as_bytes(text: str | bytes) -> bytes:
    if isinstance(text, str):
        # Lone surrogates pass through as raw bytes and decode back as U+FFFD
        return text.encode("utf-8", errors="surrogatepass")
    return bytes(text)


def iter_page_lines(text: str | bytes) -> Iterator[PageLine]:
    """
    Lazily classify each line of page text.

    Call again to restart the scan. Lines after the deck string are still
    yielded; consumers stop at the first DECKSTRING line.
    """
    for line_number, raw in enumerate(_as_bytes(text).splitlines(), start=1):
        line = raw.strip()

        if not line:
            yield PageLine(PageLineKind.BLANK, b"", line_number)
        elif line.startswith(TITLE_MARKER):
            yield PageLine(PageLineKind.TITLE, line[len(TITLE_MARKER) :].strip(), line_number)
        elif line.startswith(COMMENT_MARKER):
            yield PageLine(PageLineKind.COMMENT, line, line_number)
        else:
            yield PageLine(PageLineKind.DECKSTRING, raw, line_number)


def _scan_page(text: str | bytes) -> tuple[bytes, bytes | None]:
    """Return (title, deck string line) from the part of the page before the payload."""
    title: bytes | None = None

    for line in iter_page_lines(text):
        if line.kind is PageLineKind.TITLE and title is None:
            title = line.text
        elif line.kind is PageLineKind.DECKSTRING:
            return title or b"", line.text

    return title or b"", None


def _copy_name(name: bytes, buffer: bytearray) -> int:
    """Copy at most len(buffer) - 1 bytes of name plus a terminator."""
    capacity = len(buffer)
    if capacity == 0:
        return 0

    written = min(len(name), capacity - 1)
    buffer[:written] = name[:written]
    buffer[written] = NAME_TERMINATOR
    return written


def read_deckstring_page_name_into(text: str | bytes, buffer: bytearray) -> int:
    """
    Copy the page title into a fixed-capacity buffer.

    At most len(buffer) - 1 name bytes are written, followed by a NUL
    terminator. Longer names are truncated; this is not an error. A
    multi-byte character can be split at the truncation boundary.

    Args:
        text: Page text
        buffer: Caller-owned destination; its length is the capacity

    Returns:
        Number of name bytes written (excluding the terminator)
    """
    title, _ = _scan_page(text)
    return _copy_name(title, buffer)


def read_deckstring_page_name(text: str | bytes, capacity: int | None = None) -> str:
    """
    Extract the page title, bounded to `capacity` - 1 bytes.

    Args:
        text: Page text
        capacity: Name buffer capacity (defaults to settings.name_buffer_capacity)

    Returns:
        The (possibly truncated) name, empty if the page has no title
    """
    if capacity is None:
        capacity = settings.name_buffer_capacity

    buffer = bytearray(capacity)
    written = read_deckstring_page_name_into(text, buffer)
    return buffer[:written].decode("utf-8", errors="replace")


def extract_page_deckstring(text: str | bytes) -> str | None:
    """Return the embedded deck string line, or None if the page has none."""
    _, deckstring = _scan_page(text)
    if deckstring is None:
        return None
    return deckstring.decode("utf-8", errors="replace")


def parse_deckstring_page(text: str | bytes, capacity: int | None = None) -> DeckPage:
    """Extract both the bounded name and the deck string in one pass."""
    if capacity is None:
        capacity = settings.name_buffer_capacity

    title, deckstring = _scan_page(text)

    buffer = bytearray(capacity)
    written = _copy_name(title, buffer)

    return DeckPage(
        name=buffer[:written].decode("utf-8", errors="replace"),
        deckstring=deckstring.decode("utf-8", errors="replace") if deckstring is not None else None,
    )
