"""
Tests for the failure classification envelope.

Every rejected deck string must reach the client as a classified,
explained failure, never as a raw 500.
"""

import pytest
from fastapi.testclient import TestClient

from deckstrings.codec.errors import (
    DeckstringError,
    InvalidEncodingError,
    InvalidFormatError,
    InvalidHeaderError,
    TruncatedError,
    UnsupportedVersionError,
)
from deckstrings.main import app
from deckstrings.models.failure import (
    ApiResponse,
    FailureKind,
    KnownError,
    OutcomeType,
    create_known_failure,
    create_unknown_failure,
    finalize_response,
)


class TestFailureEnvelope:
    """Tests for the ApiResponse failure envelope."""

    def test_known_failure_response_structure(self) -> None:
        response = ApiResponse.known_failure(
            kind=FailureKind.TRUNCATED,
            message="Deck string is truncated",
            detail="payload ended at byte 3",
        )

        assert response.outcome == OutcomeType.KNOWN_FAILURE
        assert response.failure is not None
        assert response.failure.kind == FailureKind.TRUNCATED

    def test_unknown_failure_response_structure(self) -> None:
        response = ApiResponse.unknown_failure(detail="RuntimeError")

        assert response.outcome == OutcomeType.UNKNOWN_FAILURE
        assert response.failure is not None
        assert response.failure.kind == FailureKind.UNKNOWN
        assert "don't know why" in response.failure.message.lower()
        assert response.failure.suggestion is not None


class TestDeckstringErrors:
    """Codec errors carry their classification."""

    @pytest.mark.parametrize(
        ("error", "kind"),
        [
            (InvalidEncodingError("Incorrect padding"), FailureKind.INVALID_ENCODING),
            (InvalidHeaderError(3), FailureKind.INVALID_HEADER),
            (UnsupportedVersionError(9), FailureKind.UNSUPPORTED_VERSION),
            (TruncatedError(offset=4), FailureKind.TRUNCATED),
            (InvalidFormatError(-1), FailureKind.INVALID_FORMAT),
        ],
    )
    def test_kind(self, error: DeckstringError, kind: FailureKind) -> None:
        assert error.kind == kind
        assert isinstance(error, KnownError)
        assert error.status_code == 400

    def test_to_response(self) -> None:
        response = InvalidHeaderError(0x05).to_response()

        assert response.outcome == OutcomeType.KNOWN_FAILURE
        assert response.failure is not None
        assert response.failure.kind == FailureKind.INVALID_HEADER
        assert response.failure.detail == "reserved byte is 0x05, expected 0x00"


class TestAuthorityBoundary:
    def test_create_known_failure_fills_suggestion(self) -> None:
        response = create_known_failure(TruncatedError(offset=1))

        assert response.outcome == OutcomeType.KNOWN_FAILURE
        assert response.failure is not None
        assert response.failure.suggestion is not None

    def test_create_unknown_failure_hides_message(self) -> None:
        response = create_unknown_failure(RuntimeError("secret internals"))

        assert response.outcome == OutcomeType.UNKNOWN_FAILURE
        assert response.failure is not None
        assert response.failure.detail == "RuntimeError"

    def test_rejects_failure_without_details(self) -> None:
        response = ApiResponse(outcome=OutcomeType.KNOWN_FAILURE)

        with pytest.raises(ValueError):
            finalize_response(response)


class TestHttpClassification:
    """Codec errors raised inside endpoints become 400 known failures."""

    def test_invalid_encoding_is_classified(self) -> None:
        client = TestClient(app)

        response = client.post("/decks/decode", json={"deckstring": "not*base64"})

        assert response.status_code == 400
        body = response.json()
        assert body["outcome"] == "known_failure"
        assert body["failure"]["kind"] == "invalid_encoding"
        assert set(body) == {"outcome", "failure"}

    def test_encode_error_is_classified(self) -> None:
        client = TestClient(app)

        response = client.post("/decks/encode", json={"heroes": [], "cards": []})

        assert response.status_code == 400
        assert response.json()["failure"]["kind"] == "invalid_hero_count"
