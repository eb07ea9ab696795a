# Data models for config parsing and diagnostics

from .findings import ConfigFinding, FindingSeverity
from .palette import ProjectColorPalette, ProjectColorRGB
from .config import (
    AgentLayerConfig,
    AppConfig,
    ChromeConfig,
    Config,
    ConfigLoadResult,
    IdePosition,
    Justification,
    LayoutConfig,
    LayoutDefaults,
    ProjectConfig,
)

__all__ = [
    "ConfigFinding",
    "FindingSeverity",
    "ProjectColorPalette",
    "ProjectColorRGB",
    "AgentLayerConfig",
    "AppConfig",
    "ChromeConfig",
    "Config",
    "ConfigLoadResult",
    "IdePosition",
    "Justification",
    "LayoutConfig",
    "LayoutDefaults",
    "ProjectConfig",
]
