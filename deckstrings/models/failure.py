"""
Failure Envelope: Response Classification for Deck Codec Outcomes.

Every failed request leaving the HTTP surface is wrapped in an ApiResponse
and classified as one of:

- KnownFailure: the input was rejected for a reason the codec can name
  (bad base64, truncated payload, unsupported version, ...)
- UnknownFailure: something failed that the codec did not anticipate

Successful requests return their own response models. All failure responses
pass through `finalize_response()`.
"""

from enum import Enum

from pydantic import BaseModel, Field


class FailureKind(str, Enum):
    """Classification of failure types."""

    # Base64 layer
    INVALID_ENCODING = "invalid_encoding"

    # Binary payload structure
    INVALID_HEADER = "invalid_header"
    UNSUPPORTED_VERSION = "unsupported_version"
    TRUNCATED = "truncated"
    OVERFLOW = "overflow"
    TRAILING_DATA = "trailing_data"

    # Encode-time caller input
    INVALID_FORMAT = "invalid_format"
    INVALID_CARD_COUNT = "invalid_card_count"
    INVALID_HERO_COUNT = "invalid_hero_count"
    INVALID_CARD_ID = "invalid_card_id"
    DUPLICATE_CARD = "duplicate_card"

    # Page text
    MISSING_DECKSTRING = "missing_deckstring"

    UNKNOWN = "unknown"


class OutcomeType(str, Enum):
    """High-level outcome classification."""

    KNOWN_FAILURE = "known_failure"
    UNKNOWN_FAILURE = "unknown_failure"


class FailureDetail(BaseModel):
    """Detailed information about a failure."""

    kind: FailureKind = Field(
        ...,
        description="Classification of the failure",
    )
    message: str = Field(
        ...,
        description="User-appropriate explanation of what went wrong",
    )
    detail: str | None = Field(
        default=None,
        description="Additional technical detail (optional)",
    )
    suggestion: str | None = Field(
        default=None,
        description="Suggested action for the user",
    )


class ApiResponse(BaseModel):
    """Failure envelope for the deck endpoints."""

    outcome: OutcomeType = Field(
        ...,
        description="High-level classification of the result",
    )
    failure: FailureDetail | None = Field(
        default=None,
        description="Failure details",
    )

    @classmethod
    def known_failure(
        cls,
        kind: FailureKind,
        message: str,
        detail: str | None = None,
        suggestion: str | None = None,
    ) -> "ApiResponse":
        """
        Create a known failure response.

        Use when the codec knows exactly why the input was rejected.
        """
        return cls(
            outcome=OutcomeType.KNOWN_FAILURE,
            failure=FailureDetail(
                kind=kind,
                message=message,
                detail=detail,
                suggestion=suggestion,
            ),
        )

    @classmethod
    def unknown_failure(
        cls,
        detail: str | None = None,
    ) -> "ApiResponse":
        """
        Create an unknown failure response.

        NOTE: Prefer create_unknown_failure() which auto-finalizes.
        """
        return cls(
            outcome=OutcomeType.UNKNOWN_FAILURE,
            failure=FailureDetail(
                kind=FailureKind.UNKNOWN,
                message=STANDARD_MESSAGES[OutcomeType.UNKNOWN_FAILURE],
                detail=detail,
                suggestion=STANDARD_SUGGESTIONS[OutcomeType.UNKNOWN_FAILURE],
            ),
        )


class KnownError(Exception):
    """
    Base class for exceptions that represent known, explainable failures.

    Subclass this for errors where the system knows exactly what went wrong.
    """

    def __init__(
        self,
        kind: FailureKind,
        message: str,
        detail: str | None = None,
        suggestion: str | None = None,
        status_code: int = 400,
    ):
        self.kind = kind
        self.message = message
        self.detail = detail
        self.suggestion = suggestion
        self.status_code = status_code
        super().__init__(message)

    def to_response(self) -> ApiResponse:
        """Convert to an ApiResponse."""
        return ApiResponse.known_failure(
            kind=self.kind,
            message=self.message,
            detail=self.detail,
            suggestion=self.suggestion,
        )


# =============================================================================
# FAILURE AUTHORITY BOUNDARY
# =============================================================================

STANDARD_MESSAGES: dict[OutcomeType, str] = {
    OutcomeType.KNOWN_FAILURE: "The deck could not be processed.",
    OutcomeType.UNKNOWN_FAILURE: (
        "I failed and I don't know why. Try simplifying the request or retrying."
    ),
}

STANDARD_SUGGESTIONS: dict[OutcomeType, str] = {
    OutcomeType.KNOWN_FAILURE: "Check the deck string or export text and try again.",
    OutcomeType.UNKNOWN_FAILURE: "If this persists, please report the issue.",
}


def finalize_response(response: ApiResponse) -> ApiResponse:
    """
    Finalize a response through the authority boundary.

    Raises:
        ValueError: If response structure is invalid
    """
    if response.failure is None:
        raise ValueError(f"{response.outcome.value} response must have failure details")

    return response


def create_unknown_failure(
    exception: Exception,
    include_type: bool = True,
) -> ApiResponse:
    """
    Create a finalized unknown failure response from an exception.

    Only the exception type name is exposed, never its message.
    """
    detail = None
    if include_type:
        detail = f"{type(exception).__name__}"

    return finalize_response(ApiResponse.unknown_failure(detail=detail))


def create_known_failure(error: KnownError) -> ApiResponse:
    """
    Create a finalized known failure response from a KnownError.

    The message is the error's own message; the technical reason goes in
    `detail`.
    """
    response = error.to_response()
    if response.failure is not None and response.failure.suggestion is None:
        response.failure.suggestion = STANDARD_SUGGESTIONS[OutcomeType.KNOWN_FAILURE]
    return finalize_response(response)
