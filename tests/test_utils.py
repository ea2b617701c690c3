"""
Tests for utility functions.
"""

import pytest

from pivnet.exceptions import ValidationError
from pivnet.utils import (
    format_cell,
    is_legacy_token,
    truncate_string,
    validate_id,
    validate_slug,
)


class TestValidateSlug:
    def test_valid(self):
        assert validate_slug(" pivotal-cf_1.2 ") == "pivotal-cf_1.2"

    @pytest.mark.parametrize("slug", ["", "has space", "a/b", "../x", "?q"])
    def test_invalid(self, slug):
        with pytest.raises(ValidationError):
            validate_slug(slug)

    def test_kind_in_message(self):
        with pytest.raises(ValidationError, match="EULA slug cannot be empty"):
            validate_slug("", "EULA slug")


class TestValidateId:
    def test_valid(self):
        assert validate_id(12) == 12
        assert validate_id("34") == 34

    @pytest.mark.parametrize("value", [0, -1, "abc", None, True, "1.5"])
    def test_invalid(self, value):
        with pytest.raises(ValidationError):
            validate_id(value)


class TestTokens:
    def test_legacy_token(self):
        assert is_legacy_token("a" * 20) is True

    def test_refresh_token(self):
        assert is_legacy_token("a" * 21) is False


class TestFormatting:
    def test_truncate_string(self):
        assert truncate_string("short", 10) == "short"
        assert truncate_string("a long description", 10) == "a long ..."

    def test_format_cell(self):
        assert format_cell(None) == ""
        assert format_cell(True) == "Yes"
        assert format_cell(["a", "b"]) == "a, b"
        assert format_cell(3) == "3"
