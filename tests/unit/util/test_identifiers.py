"""Unit tests for short identifier generation."""

import re

import pytest

from tagkit.config import get_settings
from tagkit.util.identifiers import ALPHABET, generate_short_id


class TestGenerateShortId:
    """Tests for generate_short_id."""

    def test_default_length_from_settings(self):
        assert len(generate_short_id()) == get_settings().identifiers.length

    @pytest.mark.parametrize("length", [4, 12, 64])
    def test_explicit_length(self, length):
        assert len(generate_short_id(length)) == length

    def test_is_url_safe(self):
        """Ids should only contain URL-safe characters."""
        assert re.match(r"^[A-Za-z0-9_-]+$", generate_short_id(64))
        assert set(ALPHABET) == set(
            "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ_-"
        )

    def test_ids_are_unique(self):
        """Consecutive ids should not repeat."""
        ids = {generate_short_id() for _ in range(100)}

        assert len(ids) == 100

    def test_length_from_environment(self, monkeypatch):
        """IDENTIFIERS__LENGTH should change the default length."""
        monkeypatch.setenv("IDENTIFIERS__LENGTH", "16")
        get_settings.cache_clear()

        assert len(generate_short_id()) == 16
