"""
Utility functions for pivnet-client.

This module provides helper functions for validating arguments before
they are interpolated into API URLs, plus small formatting helpers used
by the command-line printer.
"""

import re
from typing import Any, Union

from .exceptions import ValidationError

LEGACY_TOKEN_LENGTH = 20

_SLUG_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_.\-]*$")


def validate_slug(slug: str, kind: str = "Product slug") -> str:
    """
    Validate a product or EULA slug.

    Args:
        slug: The slug to validate
        kind: Human readable name used in error messages

    Returns:
        The validated slug, stripped of surrounding whitespace

    Raises:
        ValidationError: If the slug is empty or contains URL-unsafe characters
    """
    if not slug:
        raise ValidationError(f"{kind} cannot be empty")

    slug = str(slug).strip()

    if not _SLUG_PATTERN.match(slug):
        raise ValidationError(f"Invalid {kind.lower()}: {slug}")

    return slug


def validate_id(value: Union[int, str], kind: str = "ID") -> int:
    """
    Validate a resource ID.

    Args:
        value: The ID as an int or numeric string
        kind: Human readable name used in error messages

    Returns:
        The ID as a positive integer

    Raises:
        ValidationError: If the ID is not a positive integer
    """
    if isinstance(value, bool):
        raise ValidationError(f"{kind} must be an integer, got: {value}")

    try:
        id_int = int(str(value).strip())
    except (TypeError, ValueError):
        raise ValidationError(f"{kind} must be an integer, got: {value}")

    if id_int <= 0:
        raise ValidationError(f"{kind} must be positive, got: {id_int}")

    return id_int


def is_legacy_token(token: str) -> bool:
    """Legacy API tokens are short; anything longer is a UAA refresh token."""
    return len(token) <= LEGACY_TOKEN_LENGTH


def truncate_string(text: str, max_length: int, suffix: str = "...") -> str:
    """
    Truncate a string to a maximum length.

    Args:
        text: The text to truncate
        max_length: Maximum length allowed
        suffix: Suffix to append if truncated

    Returns:
        Truncated string
    """
    if not text or len(text) <= max_length:
        return text

    return text[: max_length - len(suffix)] + suffix


def format_cell(value: Any) -> str:
    """Render a record value for a table cell."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "Yes" if value else "No"
    if isinstance(value, (list, tuple)):
        return ", ".join(str(item) for item in value)
    return str(value)
