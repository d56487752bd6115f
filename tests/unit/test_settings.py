"""Unit tests for environment-driven settings."""

import pydantic
import pytest

from idverify.core.settings import AppSettings
from idverify.models.dto import NameComparison


class TestNameMatchMode:
    """Tests for NAME_MATCH_MODE loading."""

    def test_default_mode(self, monkeypatch):
        """Test the default is containment in either direction."""
        monkeypatch.delenv("IDVERIFY_NAME_MATCH_MODE", raising=False)
        assert AppSettings().NAME_MATCH_MODE == NameComparison.CONTAINS_EITHER_DIRECTION

    def test_mode_from_environment(self, monkeypatch):
        """Test the environment value is parsed into a NameComparison."""
        monkeypatch.setenv("IDVERIFY_NAME_MATCH_MODE", "fuzzy")
        assert AppSettings().NAME_MATCH_MODE is NameComparison.FUZZY

    def test_unknown_mode_rejected_at_load(self, monkeypatch):
        """Test an unknown mode fails when settings load, not at first use."""
        monkeypatch.setenv("IDVERIFY_NAME_MATCH_MODE", "bogus")
        with pytest.raises(pydantic.ValidationError):
            AppSettings()
