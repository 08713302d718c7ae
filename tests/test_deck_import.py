"""Tests for importing decks from pasted text."""

import logging

import pytest

from deckstrings.codec.errors import InvalidEncodingError, MissingDeckstringError
from deckstrings.models.deck import FormatTag
from deckstrings.services.deck_import import import_deck


class TestImportDeck:
    def test_page_text(self, sample_page_text: str, shaman_cards: dict[int, int]) -> None:
        deck = import_deck(sample_page_text)

        assert deck.name == "Mazzo Sciamano2"
        assert deck.hero == 64850
        assert deck.format == FormatTag.STANDARD
        assert deck.card_counts() == shaman_cards

    def test_bare_deckstring(self, shaman_deckstring: str) -> None:
        deck = import_deck(shaman_deckstring)

        assert deck.name == ""
        assert deck.hero == 64850

    def test_name_bounded_by_capacity(self, sample_page_text: str) -> None:
        deck = import_deck(sample_page_text, capacity=6)

        assert deck.name == "Mazzo"

    def test_surrogate_in_title(self, shaman_deckstring: str) -> None:
        deck = import_deck(f"### Deck \ud83d\n{shaman_deckstring}")

        assert deck.name.startswith("Deck ")
        assert deck.hero == 64850

    def test_surrogate_in_deckstring_is_encoding_error(self) -> None:
        with pytest.raises(InvalidEncodingError):
            import_deck("### Deck\nAAEC\udcffAAAA")

    def test_missing_deckstring(self) -> None:
        with pytest.raises(MissingDeckstringError):
            import_deck("### Only a title\n# and a comment")

    def test_invalid_deckstring_propagates(self) -> None:
        with pytest.raises(InvalidEncodingError):
            import_deck("### Broken\nnot base64 at all!")

    def test_logs_rejection(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="deckstrings.services.deck_import"):
            with pytest.raises(InvalidEncodingError):
                import_deck("???")

        assert "invalid_encoding" in caplog.text

    def test_logs_import(self, sample_page_text: str, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="deckstrings.services.deck_import"):
            import_deck(sample_page_text)

        assert "Mazzo Sciamano2" in caplog.text
