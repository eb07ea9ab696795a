"""
Writing config.toml: starter template, full serialization, and the
targeted [app] write-back used by the launch-at-login toggle.
"""

import logging
from pathlib import Path
from typing import Optional

import tomli_w
import tomlkit
from tomlkit.exceptions import TOMLKitError

from ..errors import ApCoreError, ErrorCategory
from ..models.config import Config
from ..models.palette import ProjectColorPalette
from .filesystem import DefaultFileSystem, FileSystem

logger = logging.getLogger(__name__)

AUTO_START_KEY = "autoStartAtLogin"

_PALETTE_NAMES = ", ".join(ProjectColorPalette.SORTED_NAMES)

STARTER_CONFIG_TEMPLATE = f"""\
# AgentPanel configuration
#
# [app] (optional): application settings
# - autoStartAtLogin: launch AgentPanel when you log in (default: false)
#
# [agentLayer] (optional): global Agent Layer settings
# - enabled: default useAgentLayer value for all projects (default: false)
#
# [chrome] (optional): global Chrome tab settings
# - pinnedTabs: URLs always opened as leftmost tabs in every fresh Chrome window
# - defaultTabs: URLs opened when no tab history exists for a project
# - openGitRemote: add the git remote URL as an always-open tab (default: false)
#
# [layout] (optional): window positioning settings
# - smallScreenThreshold: monitor width in inches below which "small mode" is used (default: 24)
# - windowHeight: window height as % of screen height, 1-100 (default: 90)
# - maxWindowWidth: max window width in inches (default: 18)
# - idePosition: IDE window side, "left" or "right" (default: "left")
# - justification: which screen edge windows align to, "left" or "right" (default: "right")
# - maxGap: max gap between windows as % of screen width, 0-100 (default: 10)
#
# Each [[project]] entry describes one git repo (local or SSH remote).
# - name: display name (id is derived by lowercasing and replacing non [a-z0-9] runs with '-')
# - remote: (optional) VS Code SSH remote authority (e.g. ssh-remote+user@host)
# - path: absolute path to the repo (remote path when remote is set)
# - color: (optional) "#RRGGBB" or a named color, default "gray"
#   ({_PALETTE_NAMES})
# - useAgentLayer: (optional) override the global agentLayer.enabled default per project
# - chromePinnedTabs: (optional) per-project URLs always opened as leftmost tabs
# - chromeDefaultTabs: (optional) per-project URLs opened when no tab history exists
#
# Example:
#
# [app]
# autoStartAtLogin = true
#
# [agentLayer]
# enabled = true
#
# [chrome]
# pinnedTabs = ["https://dashboard.example.com"]
# defaultTabs = ["https://docs.example.com"]
# openGitRemote = true
#
# [layout]
# smallScreenThreshold = 24
# windowHeight = 90
# maxWindowWidth = 18
# idePosition = "left"
# justification = "right"
# maxGap = 10
#
# [[project]]
# name = "AgentPanel"
# path = "/home/you/src/agent-panel"
# color = "indigo"
# useAgentLayer = false
# chromePinnedTabs = ["https://api.example.com"]
# chromeDefaultTabs = ["https://jira.example.com"]
#
# [[project]]
# name = "Remote ML"
# remote = "ssh-remote+you@my-remote-host.local"
# path = "/home/you/src/local-ml"
# color = "teal"
# useAgentLayer = false
"""


def render_config(config: Config) -> str:
    """
    Serialize a Config to config.toml text.

    Every section is written with every key, so the output documents the
    effective values. ``ConfigParser.parse(render_config(c)).config == c``.
    """
    document = config.model_dump(mode="json", by_alias=True, exclude_none=True)

    # Project ids are derived from names on load
    for project in document["project"]:
        del project["id"]
    if not document["project"]:
        del document["project"]

    return tomli_w.dumps(document)


def update_auto_start_at_login(content: str, value: bool) -> str:
    """
    Set [app].autoStartAtLogin in config.toml text, leaving everything else alone.

    The document is edited in place with tomlkit, so comments, key order and
    formatting survive. ``[app]`` may be a header table, an inline table or
    dotted keys; when it is absent a new ``[app]`` table is appended.

    Args:
        content: Existing config.toml contents
        value: Desired value

    Returns:
        Updated contents

    Raises:
        ApCoreError: PARSE if the contents are not valid TOML, VALIDATION if
            ``app`` is not a table
    """
    try:
        document = tomlkit.parse(content)
    except TOMLKitError as e:
        raise ApCoreError(
            category=ErrorCategory.PARSE,
            message="Config TOML parse error",
            detail=str(e),
        ) from e

    app = document.get("app")
    if app is None:
        app = tomlkit.table()
        app.add(AUTO_START_KEY, value)
        document.add("app", app)
    elif isinstance(app, dict):
        app[AUTO_START_KEY] = value
    else:
        raise ApCoreError(
            category=ErrorCategory.VALIDATION,
            message="[app] must be a table",
            detail=f"Found {type(app).__name__} for key 'app'.",
        )

    return tomlkit.dumps(document)


class ConfigWriteBack:
    """Targeted read-modify-write updates of config.toml."""

    @staticmethod
    def set_auto_start_at_login(value: bool, path: Path, file_system: Optional[FileSystem] = None) -> None:
        """
        Persist [app].autoStartAtLogin.

        Args:
            value: Desired value
            path: config.toml path
            file_system: FileSystem to use (DefaultFileSystem if None)

        Raises:
            ApCoreError: FILE_SYSTEM category if the file cannot be read,
                decoded or written; PARSE or VALIDATION from
                update_auto_start_at_login, in which case nothing is written
        """
        fs = file_system or DefaultFileSystem()

        try:
            content = fs.read_bytes(path).decode("utf-8")
        except OSError as e:
            raise ApCoreError(
                category=ErrorCategory.FILE_SYSTEM,
                message=f"Failed to read config at {path}",
                detail=str(e),
            ) from e
        except UnicodeDecodeError as e:
            raise ApCoreError(
                category=ErrorCategory.FILE_SYSTEM,
                message="Config file is not valid UTF-8",
                detail=str(e),
            ) from e

        updated = update_auto_start_at_login(content, value)

        try:
            fs.write_bytes(path, updated.encode("utf-8"))
        except OSError as e:
            raise ApCoreError(
                category=ErrorCategory.FILE_SYSTEM,
                message=f"Failed to write config at {path}",
                detail=str(e),
            ) from e

        logger.info(f"Set {AUTO_START_KEY} = {str(value).lower()} in {path}")
