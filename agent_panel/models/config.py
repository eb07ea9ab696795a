"""
Pydantic data models for the AgentPanel configuration.

Every record is immutable. Field aliases are the camelCase keys used in
config.toml, so ``model_dump(by_alias=True)`` yields on-disk key names.
"""

from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .findings import ConfigFinding, FindingSeverity


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class IdePosition(str, Enum):
    """IDE window side."""
    LEFT = "left"
    RIGHT = "right"


class Justification(str, Enum):
    """Which screen edge windows align to."""
    LEFT = "left"
    RIGHT = "right"


class AppConfig(_Record):
    """[app] section."""

    auto_start_at_login: bool = Field(False, alias="autoStartAtLogin")


class AgentLayerConfig(_Record):
    """[agentLayer] section.

    When enabled, projects use Agent Layer unless they override it.
    """

    enabled: bool = False


class ChromeConfig(_Record):
    """[chrome] section: global browser tab settings."""

    pinned_tabs: Tuple[str, ...] = Field((), alias="pinnedTabs", description="Always-open leftmost tabs")
    default_tabs: Tuple[str, ...] = Field((), alias="defaultTabs", description="Tabs opened when no history exists")
    open_git_remote: bool = Field(False, alias="openGitRemote", description="Add the git remote URL as a tab")


class LayoutDefaults:
    SMALL_SCREEN_THRESHOLD = 24.0
    WINDOW_HEIGHT = 90
    MAX_WINDOW_WIDTH = 18.0
    IDE_POSITION = IdePosition.LEFT
    JUSTIFICATION = Justification.RIGHT
    MAX_GAP = 10


class LayoutConfig(_Record):
    """[layout] section: window positioning settings."""

    small_screen_threshold: float = Field(
        LayoutDefaults.SMALL_SCREEN_THRESHOLD,
        gt=0,
        alias="smallScreenThreshold",
        description="Monitor width in inches below which small mode is used",
    )
    window_height: int = Field(
        LayoutDefaults.WINDOW_HEIGHT,
        ge=1,
        le=100,
        alias="windowHeight",
        description="Window height as % of screen height",
    )
    max_window_width: float = Field(
        LayoutDefaults.MAX_WINDOW_WIDTH,
        gt=0,
        alias="maxWindowWidth",
        description="Max window width in inches",
    )
    ide_position: IdePosition = Field(LayoutDefaults.IDE_POSITION, alias="idePosition")
    justification: Justification = Field(LayoutDefaults.JUSTIFICATION, alias="justification")
    max_gap: int = Field(
        LayoutDefaults.MAX_GAP,
        ge=0,
        le=100,
        alias="maxGap",
        description="Max gap between windows as % of screen width",
    )


class ProjectConfig(_Record):
    """One [[project]] entry."""

    id: str = Field(..., min_length=1, description="Normalized identifier derived from name")
    name: str = Field(..., min_length=1, description="Display name")
    path: str = Field(..., min_length=1, description="Absolute path (remote path when remote is set)")
    remote: Optional[str] = Field(None, description="VS Code remote authority, e.g. ssh-remote+user@host")
    color: str = Field(..., min_length=1, description="#RRGGBB or a palette name")
    use_agent_layer: bool = Field(False, alias="useAgentLayer")
    chrome_pinned_tabs: Tuple[str, ...] = Field((), alias="chromePinnedTabs")
    chrome_default_tabs: Tuple[str, ...] = Field((), alias="chromeDefaultTabs")

    @property
    def is_ssh(self) -> bool:
        """Whether this project lives on an SSH remote."""
        return self.remote is not None


class Config(_Record):
    """Full parsed configuration."""

    app: AppConfig = Field(default_factory=AppConfig)
    agent_layer: AgentLayerConfig = Field(default_factory=AgentLayerConfig, alias="agentLayer")
    chrome: ChromeConfig = Field(default_factory=ChromeConfig)
    layout: LayoutConfig = Field(default_factory=LayoutConfig)
    projects: Tuple[ProjectConfig, ...] = Field((), alias="project", description="In declaration order")

    def project(self, project_id: str) -> Optional[ProjectConfig]:
        """Look up a project by id."""
        for project in self.projects:
            if project.id == project_id:
                return project
        return None


class ConfigLoadResult(_Record):
    """Result of parsing config.toml.

    ``config`` is None exactly when the TOML failed to parse. ``projects``
    holds every project entry that validated, and is available even when
    the rest of the file has problems.
    """

    config: Optional[Config] = None
    findings: Tuple[ConfigFinding, ...] = ()
    projects: Tuple[ProjectConfig, ...] = ()
    has_parse_error: bool = False

    @property
    def failures(self) -> Tuple[ConfigFinding, ...]:
        return tuple(f for f in self.findings if f.severity is FindingSeverity.FAIL)

    @property
    def warnings(self) -> Tuple[ConfigFinding, ...]:
        return tuple(f for f in self.findings if f.severity is FindingSeverity.WARN)

    @property
    def is_valid(self) -> bool:
        """Parsed with no FAIL findings."""
        return self.config is not None and not self.failures
