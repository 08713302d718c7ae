from deckstrings.models.deck import Deck, DeckCard, FormatTag, create_deck
from deckstrings.models.failure import (
    STANDARD_MESSAGES,
    STANDARD_SUGGESTIONS,
    ApiResponse,
    FailureDetail,
    FailureKind,
    KnownError,
    OutcomeType,
    create_known_failure,
    create_unknown_failure,
    finalize_response,
)

__all__ = [
    "ApiResponse",
    "Deck",
    "DeckCard",
    "FailureDetail",
    "FailureKind",
    "FormatTag",
    "KnownError",
    "OutcomeType",
    "STANDARD_MESSAGES",
    "STANDARD_SUGGESTIONS",
    "create_deck",
    "create_known_failure",
    "create_unknown_failure",
    "finalize_response",
]
