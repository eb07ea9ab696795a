"""
Parsers for the optional global sections of config.toml.

Each parser follows the same contract:
- section absent -> defaults, no finding
- section not a table -> FAIL, defaults
- unknown keys -> WARN per key
- any bound/format check failure -> the whole section reverts to defaults
  (fields that validated on their own are dropped too)
"""

import logging
from typing import List, Optional

from ..models.config import (
    AgentLayerConfig,
    AppConfig,
    ChromeConfig,
    IdePosition,
    Justification,
    LayoutConfig,
    LayoutDefaults,
)
from ..models.findings import ConfigFinding
from .document import TomlTable, is_table
from .readers import (
    check_unknown_keys,
    read_optional_bool,
    read_optional_integer,
    read_optional_number,
    read_optional_string,
    read_optional_string_array,
    trimmed_values,
    validate_urls,
)

logger = logging.getLogger(__name__)

KNOWN_APP_KEYS = frozenset({"autoStartAtLogin"})
KNOWN_AGENT_LAYER_KEYS = frozenset({"enabled"})
KNOWN_CHROME_KEYS = frozenset({"pinnedTabs", "defaultTabs", "openGitRemote"})
KNOWN_LAYOUT_KEYS = frozenset({
    "smallScreenThreshold", "windowHeight", "maxWindowWidth",
    "idePosition", "justification", "maxGap",
})


def _section_table(root: TomlTable, key: str, findings: List[ConfigFinding]) -> Optional[TomlTable]:
    """Return the section table, or None when absent or not a table."""
    if key not in root:
        return None

    section = root[key]
    if not is_table(section):
        findings.append(ConfigFinding.fail(
            f"[{key}] must be a table",
            fix=f"Use [{key}] as a TOML table section."
        ))
        return None

    return section


def parse_app_section(root: TomlTable, findings: List[ConfigFinding]) -> AppConfig:
    table = _section_table(root, "app", findings)
    if table is None:
        return AppConfig()

    check_unknown_keys(table, KNOWN_APP_KEYS, "[app]", findings)

    auto_start = read_optional_bool(
        table, "autoStartAtLogin", False, "app.autoStartAtLogin", findings
    )
    return AppConfig(auto_start_at_login=auto_start)


def parse_agent_layer_section(root: TomlTable, findings: List[ConfigFinding]) -> AgentLayerConfig:
    table = _section_table(root, "agentLayer", findings)
    if table is None:
        return AgentLayerConfig()

    check_unknown_keys(table, KNOWN_AGENT_LAYER_KEYS, "[agentLayer]", findings)

    enabled = read_optional_bool(table, "enabled", False, "agentLayer.enabled", findings)
    return AgentLayerConfig(enabled=enabled)


def parse_chrome_section(root: TomlTable, findings: List[ConfigFinding]) -> ChromeConfig:
    """Parse [chrome]; any invalid tab URL reverts the whole section to defaults."""
    table = _section_table(root, "chrome", findings)
    if table is None:
        return ChromeConfig()

    check_unknown_keys(table, KNOWN_CHROME_KEYS, "[chrome]", findings)

    pinned_tabs = read_optional_string_array(table, "pinnedTabs", "chrome.pinnedTabs", findings)
    pinned_valid = validate_urls(pinned_tabs, "chrome.pinnedTabs", findings)

    default_tabs = read_optional_string_array(table, "defaultTabs", "chrome.defaultTabs", findings)
    default_valid = validate_urls(default_tabs, "chrome.defaultTabs", findings)

    open_git_remote = read_optional_bool(
        table, "openGitRemote", False, "chrome.openGitRemote", findings
    )

    if not (pinned_valid and default_valid):
        logger.debug("[chrome] has invalid URLs; using defaults for the whole section")
        return ChromeConfig()

    return ChromeConfig(
        pinned_tabs=trimmed_values(pinned_tabs),
        default_tabs=trimmed_values(default_tabs),
        open_git_remote=open_git_remote,
    )


def parse_layout_section(root: TomlTable, findings: List[ConfigFinding]) -> LayoutConfig:
    """
    Parse [layout].

    Bounds: smallScreenThreshold > 0, windowHeight 1-100, maxWindowWidth > 0,
    maxGap 0-100; idePosition and justification must be "left" or "right".
    A single violation reverts the whole section to LayoutConfig().
    """
    table = _section_table(root, "layout", findings)
    if table is None:
        return LayoutConfig()

    check_unknown_keys(table, KNOWN_LAYOUT_KEYS, "[layout]", findings)

    small_screen_threshold = read_optional_number(
        table, "smallScreenThreshold", "layout.smallScreenThreshold", findings
    )
    window_height = read_optional_integer(table, "windowHeight", "layout.windowHeight", findings)
    max_window_width = read_optional_number(table, "maxWindowWidth", "layout.maxWindowWidth", findings)
    ide_position_str = read_optional_string(table, "idePosition", "layout.idePosition", findings)
    justification_str = read_optional_string(table, "justification", "layout.justification", findings)
    max_gap = read_optional_integer(table, "maxGap", "layout.maxGap", findings)

    valid = True

    if small_screen_threshold is not None and not small_screen_threshold > 0:
        findings.append(ConfigFinding.fail(
            "layout.smallScreenThreshold must be > 0",
            detail=f"Got {small_screen_threshold:g}.",
            fix="Set smallScreenThreshold to a positive number (default: 24)."
        ))
        valid = False

    if window_height is not None and not 1 <= window_height <= 100:
        findings.append(ConfigFinding.fail(
            "layout.windowHeight must be 1-100",
            detail=f"Got {window_height}.",
            fix="Set windowHeight to a value between 1 and 100 (default: 90)."
        ))
        valid = False

    if max_window_width is not None and not max_window_width > 0:
        findings.append(ConfigFinding.fail(
            "layout.maxWindowWidth must be > 0",
            detail=f"Got {max_window_width:g}.",
            fix="Set maxWindowWidth to a positive number (default: 18)."
        ))
        valid = False

    ide_position = LayoutDefaults.IDE_POSITION
    if ide_position_str is not None:
        try:
            ide_position = IdePosition(ide_position_str)
        except ValueError:
            findings.append(ConfigFinding.fail(
                'layout.idePosition must be "left" or "right"',
                detail=f'Got "{ide_position_str}".',
                fix='Set idePosition to "left" or "right" (default: "left").'
            ))
            valid = False

    justification = LayoutDefaults.JUSTIFICATION
    if justification_str is not None:
        try:
            justification = Justification(justification_str)
        except ValueError:
            findings.append(ConfigFinding.fail(
                'layout.justification must be "left" or "right"',
                detail=f'Got "{justification_str}".',
                fix='Set justification to "left" or "right" (default: "right").'
            ))
            valid = False

    if max_gap is not None and not 0 <= max_gap <= 100:
        findings.append(ConfigFinding.fail(
            "layout.maxGap must be 0-100",
            detail=f"Got {max_gap}.",
            fix="Set maxGap to a value between 0 and 100 (default: 10)."
        ))
        valid = False

    if not valid:
        logger.debug("[layout] failed bounds checks; using defaults for the whole section")
        return LayoutConfig()

    return LayoutConfig(
        small_screen_threshold=_or_default(small_screen_threshold, LayoutDefaults.SMALL_SCREEN_THRESHOLD),
        window_height=_or_default(window_height, LayoutDefaults.WINDOW_HEIGHT),
        max_window_width=_or_default(max_window_width, LayoutDefaults.MAX_WINDOW_WIDTH),
        ide_position=ide_position,
        justification=justification,
        max_gap=_or_default(max_gap, LayoutDefaults.MAX_GAP),
    )


def _or_default(value, default):
    return default if value is None else value
