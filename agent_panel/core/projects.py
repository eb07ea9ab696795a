"""
[[project]] entry parsing.

Unlike the global sections, a project whose identity is invalid is dropped
rather than defaulted: bad name, path, id, color or remote, a bad path form,
Agent Layer on an SSH project, or an invalid tab URL. A wrongly typed
useAgentLayer falls back to its default, and non-string tab elements are
skipped; both keep the project. Other entries are unaffected.
"""

import logging
from typing import Dict, List, Optional

from ..models.config import ProjectConfig
from ..models.findings import ConfigFinding
from ..models.palette import ProjectColorPalette
from .document import TomlTable, ValueKind, is_table, kind_of
from .identifiers import is_reserved_identifier, normalize_identifier
from .readers import (
    check_unknown_keys,
    read_optional_bool,
    read_optional_string,
    read_optional_string_array,
    read_required_string,
    trimmed_values,
    validate_urls,
)
from .ssh import REMOTE_AUTHORITY_PREFIX, RemoteAuthorityError, RemoteAuthorityIssue, parse_remote_authority

logger = logging.getLogger(__name__)

KNOWN_PROJECT_KEYS = frozenset({
    "name", "path", "remote", "color", "useAgentLayer",
    "chromePinnedTabs", "chromeDefaultTabs",
})

DEFAULT_PROJECT_COLOR = "gray"

_REMOTE_FIX = 'Use format: remote = "ssh-remote+user@host"'

_REMOTE_ISSUE_TITLES = {
    RemoteAuthorityIssue.MISSING_PREFIX: "SSH remote authority must start with 'ssh-remote+'",
    RemoteAuthorityIssue.CONTAINS_WHITESPACE: "SSH remote authority must not contain whitespace",
    RemoteAuthorityIssue.MISSING_TARGET: "SSH remote authority is missing host (expected ssh-remote+user@host)",
    RemoteAuthorityIssue.TARGET_STARTS_WITH_DASH: "SSH remote authority must not start with '-'",
}


def parse_projects(
    root: TomlTable, agent_layer_enabled: bool, findings: List[ConfigFinding]
) -> List[ProjectConfig]:
    """
    Parse every [[project]] entry.

    Args:
        root: Top-level TOML table
        agent_layer_enabled: Global agentLayer.enabled, the useAgentLayer default
        findings: Findings list to append to

    Returns:
        Valid projects in declaration order
    """
    if "project" not in root:
        findings.append(_no_projects_warning())
        return []

    entries = root["project"]
    if kind_of(entries) is not ValueKind.ARRAY:
        findings.append(ConfigFinding.fail(
            "project must be an array of tables",
            fix="Use [[project]] entries in config.toml."
        ))
        return []

    if not entries:
        findings.append(_no_projects_warning())
        return []

    projects = []
    seen_ids: Dict[str, int] = {}

    for index, entry in enumerate(entries):
        if not is_table(entry):
            findings.append(ConfigFinding.fail(
                f"project[{index}] must be a table",
                fix="Ensure each [[project]] entry is a TOML table."
            ))
            continue

        project = parse_project(entry, index, agent_layer_enabled, seen_ids, findings)
        if project is None:
            logger.debug(f"Dropped project[{index}]")
        else:
            projects.append(project)

    return projects


def _no_projects_warning() -> ConfigFinding:
    return ConfigFinding.warn(
        "No [[project]] entries",
        fix="Add at least one [[project]] entry to config.toml."
    )


def parse_project(
    table: TomlTable,
    index: int,
    agent_layer_enabled: bool,
    seen_ids: Dict[str, int],
    findings: List[ConfigFinding],
) -> Optional[ProjectConfig]:
    """
    Parse one [[project]] table.

    ``seen_ids`` maps already-claimed ids to the index that claimed them and
    is updated when this entry claims a new id.

    Returns:
        The project, or None if its identity fields did not validate
    """
    label = f"project[{index}]"

    check_unknown_keys(table, KNOWN_PROJECT_KEYS, "[[project]]", findings)

    # name, path, remote and color must all read cleanly
    first_read = len(findings)
    name = read_required_string(table, "name", f"{label}.name", findings)
    remote = read_optional_string(table, "remote", f"{label}.remote", findings)
    path = read_required_string(table, "path", f"{label}.path", findings)
    color = read_optional_string(table, "color", f"{label}.color", findings)
    valid = not any(finding.is_failure for finding in findings[first_read:])

    use_agent_layer = read_optional_bool(
        table, "useAgentLayer", agent_layer_enabled, f"{label}.useAgentLayer", findings
    )

    project_id = None
    if name is not None:
        project_id = _derive_id(name, index, seen_ids, findings)
        valid = valid and project_id is not None

    normalized_color = _normalize_color(color, label, findings)
    valid = valid and normalized_color is not None

    valid_remote = None
    if remote is not None:
        try:
            parse_remote_authority(remote)
            valid_remote = remote
        except RemoteAuthorityError as e:
            findings.append(ConfigFinding.fail(
                f"{label}.remote: {_REMOTE_ISSUE_TITLES[e.reason]}",
                fix=_REMOTE_FIX
            ))
            valid = False

    if valid_remote is not None:
        if use_agent_layer:
            findings.append(ConfigFinding.fail(
                f"{label}: Agent Layer is not supported with SSH projects",
                fix="Set useAgentLayer = false for this project (SSH projects cannot use Agent Layer)."
            ))
            valid = False
        if path is not None and not path.startswith("/"):
            findings.append(ConfigFinding.fail(
                f"{label}.path: remote path must be an absolute path (starting with /)",
                fix="Use a remote absolute path, e.g. /home/you/src/project"
            ))
            valid = False
    elif path is not None:
        if path.startswith(REMOTE_AUTHORITY_PREFIX):
            findings.append(ConfigFinding.fail(
                f"{label}.path: legacy SSH path format is not supported",
                detail="Found an ssh-remote+ prefix in project.path but project.remote is not set.",
                fix='Use remote = "ssh-remote+user@host" and path = "/remote/absolute/path"'
            ))
            valid = False
        elif not path.startswith("/"):
            findings.append(ConfigFinding.fail(
                f"{label}.path: local path must be an absolute path (starting with /)",
                fix="Use an absolute path, e.g. /home/you/src/project"
            ))
            valid = False

    pinned_tabs = read_optional_string_array(table, "chromePinnedTabs", f"{label}.chromePinnedTabs", findings)
    if not validate_urls(pinned_tabs, f"{label}.chromePinnedTabs", findings):
        valid = False

    default_tabs = read_optional_string_array(table, "chromeDefaultTabs", f"{label}.chromeDefaultTabs", findings)
    if not validate_urls(default_tabs, f"{label}.chromeDefaultTabs", findings):
        valid = False

    if not valid:
        return None

    return ProjectConfig(
        id=project_id,
        name=name,
        path=path,
        remote=valid_remote,
        color=normalized_color,
        use_agent_layer=use_agent_layer,
        chrome_pinned_tabs=trimmed_values(pinned_tabs),
        chrome_default_tabs=trimmed_values(default_tabs),
    )


def _derive_id(name: str, index: int, seen_ids: Dict[str, int], findings: List[ConfigFinding]) -> Optional[str]:
    normalized = normalize_identifier(name)

    if not normalized:
        findings.append(ConfigFinding.fail(
            f"project[{index}].name cannot derive an id",
            detail="Normalized id was empty after removing invalid characters.",
            fix="Use a name with letters or numbers so an id can be derived."
        ))
        return None

    if is_reserved_identifier(normalized):
        findings.append(ConfigFinding.fail(
            f"project[{index}].id is reserved",
            detail=f"The id '{normalized}' is reserved.",
            fix="Choose a different project name so the derived id is not reserved."
        ))
        return None

    if normalized in seen_ids:
        findings.append(ConfigFinding.fail(
            f"Duplicate project.id: {normalized}",
            detail=f"Derived from project indexes {seen_ids[normalized]} and {index}.",
            fix="Ensure project names normalize to unique ids."
        ))
        return None

    seen_ids[normalized] = index
    return normalized


def _normalize_color(color: Optional[str], label: str, findings: List[ConfigFinding]) -> Optional[str]:
    """Hex colors are kept as written; palette names are lowercased."""
    if color is None:
        return DEFAULT_PROJECT_COLOR

    if ProjectColorPalette.is_valid_hex(color):
        return color

    if ProjectColorPalette.is_named(color):
        return color.lower()

    findings.append(ConfigFinding.fail(
        f"{label}.color is invalid",
        detail=f'Got "{color}". Color must be #RRGGBB or a named color.',
        fix=f"Use a hex color or one of: {', '.join(ProjectColorPalette.SORTED_NAMES)}."
    ))
    return None
