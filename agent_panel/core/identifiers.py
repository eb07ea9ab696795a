"""Identifier normalization for project ids and workspace names."""

import re

_INVALID_RUN = re.compile(r"[^a-z0-9]+")

RESERVED_IDENTIFIERS = frozenset({"inbox"})


def normalize_identifier(value: str) -> str:
    """Normalize a free-form name to a lowercase-hyphen identifier.

    Each run of characters outside [a-z0-9] becomes a single hyphen, and
    leading/trailing hyphens are stripped. Normalizing twice is a no-op.

    Examples:
        >>> normalize_identifier("My Cool App!!")
        'my-cool-app'
        >>> normalize_identifier("  --Ümlaut__Repo  ")
        'mlaut-repo'
        >>> normalize_identifier("!!!")
        ''
    """
    lowered = value.strip().lower()
    return _INVALID_RUN.sub("-", lowered).strip("-")


def is_valid_identifier(value: str) -> bool:
    """True if the value normalizes to a non-empty identifier."""
    return bool(normalize_identifier(value))


def is_reserved_identifier(normalized_id: str) -> bool:
    return normalized_id in RESERVED_IDENTIFIERS
