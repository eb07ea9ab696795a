"""
Error taxonomy for AgentPanel.

Two layers:
- ApCoreError: application-wide failures tagged with a category so GUI, CLI
  and diagnostics can handle them uniformly.
- ConfigError: the config file could not be obtained as text (missing,
  could not be created, could not be read).

Content-level problems in a readable config file are not exceptions; they are
reported as ConfigFinding values (see agent_panel.models.findings).
"""

from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, Optional, Sequence, Tuple

if TYPE_CHECKING:
    from .models.findings import ConfigFinding


class ErrorCategory(str, Enum):
    """
    Categories of ApCoreError for programmatic handling.

    The configuration pipeline only produces VALIDATION, FILE_SYSTEM,
    CONFIGURATION and PARSE. COMMAND, WINDOW and SYSTEM belong to the
    process and window-manager layers.
    """

    COMMAND = "command"
    VALIDATION = "validation"
    FILE_SYSTEM = "fileSystem"
    CONFIGURATION = "configuration"
    PARSE = "parse"
    WINDOW = "window"
    SYSTEM = "system"


class ApCoreError(Exception):
    """Base exception for AgentPanel core operations."""

    def __init__(
        self,
        category: ErrorCategory,
        message: str,
        detail: Optional[str] = None,
        command: Optional[str] = None,
        exit_code: Optional[int] = None,
    ):
        """
        Initialize core error.

        Args:
            category: Error category from ErrorCategory enum
            message: Human-readable error message
            detail: Additional detail (stderr output, decoder message, ...)
            command: Command that was executed, if applicable
            exit_code: Exit code from command execution, if applicable
        """
        self.category = category
        self.message = message
        self.detail = detail
        self.command = command
        self.exit_code = exit_code
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert error to dictionary for JSON output.

        Returns:
            Error dictionary with category and message, plus optional fields
        """
        result: Dict[str, Any] = {
            "category": self.category.value,
            "message": self.message,
        }

        if self.detail:
            result["detail"] = self.detail
        if self.command:
            result["command"] = self.command
        if self.exit_code is not None:
            result["exit_code"] = self.exit_code

        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ApCoreError):
            return NotImplemented
        return type(self) is type(other) and self.to_dict() == other.to_dict()

    __hash__ = Exception.__hash__


class ConfigErrorKind(str, Enum):
    """Kind of config loading error."""

    FILE_NOT_FOUND = "fileNotFound"  # starter config was written
    CREATE_FAILED = "createFailed"
    READ_FAILED = "readFailed"


class ConfigError(ApCoreError):
    """The config file could not be obtained as text."""

    def __init__(self, kind: ConfigErrorKind, path: str, message: str, detail: Optional[str] = None):
        """
        Initialize config error.

        Args:
            kind: What went wrong
            path: Resolved config file path
            message: Human-readable error message
            detail: Underlying OS error text, if any
        """
        category = (
            ErrorCategory.CONFIGURATION
            if kind is ConfigErrorKind.FILE_NOT_FOUND
            else ErrorCategory.FILE_SYSTEM
        )
        self.kind = kind
        self.path = path
        super().__init__(category=category, message=message, detail=detail)

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        result["kind"] = self.kind.value
        result["path"] = self.path
        return result


class ConfigLoadError(ApCoreError):
    """Config could not be loaded as a fully valid Config."""

    def __init__(
        self,
        category: ErrorCategory,
        message: str,
        detail: Optional[str] = None,
        findings: Sequence["ConfigFinding"] = (),
    ):
        """
        Initialize config load error.

        Args:
            category: CONFIGURATION, FILE_SYSTEM, PARSE or VALIDATION
            message: Human-readable error message
            detail: Additional detail
            findings: FAIL findings that blocked the load (validation only)
        """
        self.findings: Tuple["ConfigFinding", ...] = tuple(findings)
        super().__init__(category=category, message=message, detail=detail)

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        if self.findings:
            result["findings"] = [finding.to_dict() for finding in self.findings]
        return result


def command_error(command: str, exit_code: int, stderr: str) -> ApCoreError:
    """
    Build an ApCoreError from a failed command.

    Args:
        command: Human-readable command description
        exit_code: Process exit code
        stderr: Captured stderr (trimmed into detail when non-empty)

    Returns:
        COMMAND category error
    """
    trimmed = stderr.strip()
    return ApCoreError(
        category=ErrorCategory.COMMAND,
        message=f"{command} failed with exit code {exit_code}.",
        detail=trimmed or None,
        command=command,
        exit_code=exit_code,
    )


def validation_error(message: str) -> ApCoreError:
    """Build a VALIDATION category error."""
    return ApCoreError(category=ErrorCategory.VALIDATION, message=message)


def file_system_error(message: str, detail: Optional[str] = None) -> ApCoreError:
    """Build a FILE_SYSTEM category error."""
    return ApCoreError(category=ErrorCategory.FILE_SYSTEM, message=message, detail=detail)


def configuration_error(message: str, detail: Optional[str] = None) -> ApCoreError:
    """Build a CONFIGURATION category error."""
    return ApCoreError(category=ErrorCategory.CONFIGURATION, message=message, detail=detail)


def parse_error(message: str, detail: Optional[str] = None) -> ApCoreError:
    """Build a PARSE category error."""
    return ApCoreError(category=ErrorCategory.PARSE, message=message, detail=detail)
