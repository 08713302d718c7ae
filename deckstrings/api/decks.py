"""
Deck API endpoints.

Decode, encode, import and export deck strings. Codec errors propagate as
DeckstringError and are turned into known-failure responses by the
application's exception handler.
"""

import dataclasses
import logging

from fastapi import APIRouter
from pydantic import BaseModel, Field

from deckstrings.codec.deckstring import read_deckstring, write_deckstring
from deckstrings.codec.errors import DeckstringError
from deckstrings.config import settings
from deckstrings.models.deck import Deck, DeckCard
from deckstrings.services.deck_import import import_deck
from deckstrings.services.page_formatter import write_deckstring_page

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/decks", tags=["decks"])


class DeckCardModel(BaseModel):
    """A card entry with its number of copies."""

    card_id: int
    count: int = 1


class DeckResponse(BaseModel):
    """Response model for a decoded deck."""

    name: str = ""
    format: int
    format_name: str
    heroes: list[int] = Field(default_factory=list)
    cards: list[DeckCardModel] = Field(default_factory=list)
    total_cards: int = 0
    deckstring: str | None = Field(
        default=None,
        description="Canonical deck string, absent if the deck cannot be re-encoded",
    )


class DecodeRequest(BaseModel):
    """Request model for decoding a deck string."""

    deckstring: str = Field(
        ...,
        description="Base64 deck string",
        examples=["AAECAdL6AwbkuAPczAOczgP1zgPi7AOXoAQM27gDmLkD4cwD/tED8NQDqN4Dqt4D4OwDre4DjZ8E+Z8E/p8EAA=="],
    )


class EncodeRequest(BaseModel):
    """Request model for encoding a deck."""

    format: int = Field(default_factory=lambda: settings.default_format, ge=0)
    heroes: list[int] = Field(..., description="Hero card ids, normally exactly one")
    cards: list[DeckCardModel] = Field(default_factory=list)
    name: str = ""


class EncodeResponse(BaseModel):
    """Response model for an encoded deck."""

    deckstring: str
    name: str = ""


class ImportRequest(BaseModel):
    """Request model for importing a deck from pasted text."""

    text: str = Field(
        ...,
        description="Bare deck string or page text export",
        examples=["### My Deck\n# Format: Standard\n#\nAAECAdL6AwbkuAPczAOczgP1zgPi7AOXoAQM27gDmLkD4cwD/tED8NQDqN4Dqt4D4OwDre4DjZ8E+Z8E/p8EAA=="],
    )


class ExportRequest(BaseModel):
    """Request model for rendering page text."""

    deckstring: str
    name: str = ""
    card_names: dict[int, str] | None = Field(
        default=None,
        description="Optional {card_id: name} map for listing cards",
    )


class ExportResponse(BaseModel):
    """Response model for rendered page text."""

    text: str


def _canonical_deckstring(deck: Deck) -> str | None:
    try:
        return write_deckstring(deck)
    except DeckstringError:
        return None


def _deck_to_response(deck: Deck) -> DeckResponse:
    return DeckResponse(
        name=deck.name,
        format=int(deck.format),
        format_name=deck.format_name,
        heroes=list(deck.heroes),
        cards=[DeckCardModel(card_id=c.card_id, count=c.count) for c in deck.cards],
        total_cards=deck.total_cards(),
        deckstring=_canonical_deckstring(deck),
    )


@router.post("/decode", response_model=DeckResponse)
async def decode_deckstring(request: DecodeRequest) -> DeckResponse:
    """Decode a deck string."""
    deck = read_deckstring(request.deckstring)
    return _deck_to_response(deck)


@router.post("/encode", response_model=EncodeResponse)
async def encode_deckstring(request: EncodeRequest) -> EncodeResponse:
    """
    Encode a deck.

    Cards must be pre-merged (one entry per card id) with at least one copy.
    """
    deck = Deck(
        format=request.format,
        heroes=tuple(request.heroes),
        cards=tuple(DeckCard(c.card_id, c.count) for c in request.cards),
        name=request.name,
    )
    return EncodeResponse(deckstring=write_deckstring(deck), name=request.name)


@router.post("/import", response_model=DeckResponse)
async def import_deck_text(request: ImportRequest) -> DeckResponse:
    """
    Import a deck from pasted text.

    The title of a page text export becomes the deck name.
    """
    deck = import_deck(request.text)
    return _deck_to_response(deck)


@router.post("/export", response_model=ExportResponse)
async def export_deck(request: ExportRequest) -> ExportResponse:
    """Render a deck string as shareable page text."""
    deck = dataclasses.replace(read_deckstring(request.deckstring), name=request.name)
    logger.debug("Exporting deck %r", deck.name)
    return ExportResponse(text=write_deckstring_page(deck, request.card_names))
