"""
Diagnostic findings produced while parsing config.toml.

A finding describes one content-level issue with a severity, a short title,
and optional detail and remediation text. Findings never raise.
"""

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class FindingSeverity(str, Enum):
    """Severity level for config findings."""
    PASS = "PASS"
    WARN = "WARN"
    FAIL = "FAIL"


class ConfigFinding(BaseModel):
    """A single finding from config parsing."""

    model_config = ConfigDict(frozen=True)

    severity: FindingSeverity = Field(..., description="PASS, WARN or FAIL")
    title: str = Field(..., min_length=1, description="One-line summary")
    detail: Optional[str] = Field(None, description="What was found")
    fix: Optional[str] = Field(None, description="How to fix it")

    @classmethod
    def fail(cls, title: str, detail: Optional[str] = None, fix: Optional[str] = None) -> "ConfigFinding":
        return cls(severity=FindingSeverity.FAIL, title=title, detail=detail, fix=fix)

    @classmethod
    def warn(cls, title: str, detail: Optional[str] = None, fix: Optional[str] = None) -> "ConfigFinding":
        return cls(severity=FindingSeverity.WARN, title=title, detail=detail, fix=fix)

    @property
    def is_failure(self) -> bool:
        return self.severity is FindingSeverity.FAIL

    def to_dict(self) -> Dict[str, Any]:
        """Render as a JSON-friendly dict, omitting empty fields."""
        return self.model_dump(mode="json", exclude_none=True)

    def __str__(self) -> str:
        return f"{self.severity.value}: {self.title}"
