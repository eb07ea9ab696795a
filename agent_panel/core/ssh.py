"""
SSH helpers shared by config validation and remote command building.

Keeps VS Code Remote-SSH authority parsing and shell escaping consistent
across the codebase.
"""

from enum import Enum
from typing import Optional

REMOTE_AUTHORITY_PREFIX = "ssh-remote+"


class RemoteAuthorityIssue(str, Enum):
    """Why a remote authority string was rejected."""
    MISSING_PREFIX = "missingPrefix"
    CONTAINS_WHITESPACE = "containsWhitespace"
    MISSING_TARGET = "missingTarget"
    TARGET_STARTS_WITH_DASH = "targetStartsWithDash"


class RemoteAuthorityError(ValueError):
    """Remote authority string is malformed."""

    def __init__(self, reason: RemoteAuthorityIssue, authority: str):
        self.reason = reason
        self.authority = authority
        super().__init__(f"Invalid remote authority {authority!r}: {reason.value}")


def parse_remote_authority(authority: str) -> str:
    """
    Parse a VS Code Remote-SSH authority and return the SSH target.

    Args:
        authority: Remote authority string (e.g. ``ssh-remote+user@host``)

    Returns:
        The SSH target (``user@host``)

    Raises:
        RemoteAuthorityError: If the prefix is missing, the target looks like
            an ssh option (starts with '-', ignoring leading whitespace), the
            string contains whitespace, or the target is empty
    """
    if not authority.startswith(REMOTE_AUTHORITY_PREFIX):
        raise RemoteAuthorityError(RemoteAuthorityIssue.MISSING_PREFIX, authority)

    target = authority[len(REMOTE_AUTHORITY_PREFIX):]

    # Reported ahead of whitespace so "ssh-remote+ -oProxyCommand" names the real problem
    if target.lstrip().startswith("-"):
        raise RemoteAuthorityError(RemoteAuthorityIssue.TARGET_STARTS_WITH_DASH, authority)

    if any(char.isspace() for char in authority):
        raise RemoteAuthorityError(RemoteAuthorityIssue.CONTAINS_WHITESPACE, authority)

    if not target:
        raise RemoteAuthorityError(RemoteAuthorityIssue.MISSING_TARGET, authority)

    return target


def extract_target(authority: str) -> Optional[str]:
    """Best-effort variant of parse_remote_authority; None when malformed."""
    try:
        return parse_remote_authority(authority)
    except RemoteAuthorityError:
        return None


def shell_escape(value: str) -> str:
    """
    Single-quote a value for a POSIX shell.

    Embedded single quotes become ``'\\''`` (close quote, escaped quote,
    reopen quote).

    Examples:
        >>> shell_escape("it's")
        "'it'\\\\''s'"
    """
    escaped = value.replace("'", "'\\''")
    return f"'{escaped}'"
