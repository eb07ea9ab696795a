"""CLI command handlers for agent-panel-config.

Implements validate, show, projects, init and autostart over the config
pipeline in agent_panel.core.
"""

import argparse
import logging
import sys
import time
from typing import List, Optional

from .. import __version__
from ..core.filesystem import resolve_config_path
from ..core.loader import ConfigLoader
from ..core.writer import ConfigWriteBack
from ..errors import ApCoreError, ConfigError, ConfigErrorKind
from ..services.project_sorter import sorted_projects
from .formatters import (
    console,
    format_config_summary,
    format_findings_table,
    format_json,
    format_project_table,
    print_error,
    print_success,
    print_warning,
)
from .logging_config import configure_logging, log_config_error, log_load_result

logger = logging.getLogger(__name__)


def _load(args: argparse.Namespace):
    """Load the config selected by --config / $AGENT_PANEL_CONFIG.

    Raises:
        ConfigError: Propagated from ConfigLoader.load
    """
    path = resolve_config_path(args.config)
    started = time.perf_counter()
    try:
        result = ConfigLoader.load(path)
    except ConfigError as e:
        log_config_error(logger, e)
        raise

    log_load_result(logger, path, result, (time.perf_counter() - started) * 1000)
    return path, result


def _report_config_error(error: ConfigError, as_json: bool) -> int:
    if as_json:
        print(format_json({"valid": False, "error": error.to_dict()}))
    elif error.kind is ConfigErrorKind.FILE_NOT_FOUND:
        print_warning(error.message)
    else:
        print_error(error.message)
        if error.detail:
            print_error(error.detail)
    return 1


def cmd_validate(args: argparse.Namespace) -> int:
    """Validate config.toml.

    Returns:
        0 if there are no FAIL findings, 1 otherwise
    """
    try:
        path, result = _load(args)
    except ConfigError as e:
        return _report_config_error(e, args.json)

    failures = result.failures
    warnings = result.warnings

    if args.json:
        print(format_json({
            "path": str(path),
            "valid": result.is_valid,
            "has_parse_error": result.has_parse_error,
            "projects": len(result.projects),
            "findings": [finding.to_dict() for finding in result.findings],
        }))
        return 0 if result.is_valid else 1

    if result.findings:
        console.print(format_findings_table(result.findings))

    if failures:
        print_error(f"Validation failed with {len(failures)} error(s)")
        return 1
    if warnings:
        print_warning(f"Validation passed with {len(warnings)} warning(s)")
        return 0

    print_success(f"{path}: {len(result.projects)} project(s), all checks passed")
    return 0


def cmd_show(args: argparse.Namespace) -> int:
    """Print the effective configuration.

    Returns:
        0 if the config parsed, 1 on I/O or TOML syntax errors
    """
    try:
        _, result = _load(args)
    except ConfigError as e:
        return _report_config_error(e, args.json)

    if result.config is None:
        if args.json:
            print(format_json({
                "valid": False,
                "findings": [finding.to_dict() for finding in result.findings],
            }))
        else:
            console.print(format_findings_table(result.findings))
            print_error("Config could not be parsed")
        return 1

    if args.json:
        print(format_json(result.config.model_dump(mode="json", by_alias=True)))
        return 0

    console.print(format_config_summary(result.config))
    console.print(format_project_table(result.config.projects))
    if result.failures:
        print_warning(
            f"{len(result.failures)} error(s) in config; invalid sections use defaults. "
            "Run 'agent-panel-config validate' for details."
        )
    return 0


def cmd_projects(args: argparse.Namespace) -> int:
    """List projects ranked for the switcher."""
    try:
        _, result = _load(args)
    except ConfigError as e:
        return _report_config_error(e, args.json)

    ranked = sorted_projects(result.projects, args.query or "", args.recent or [])

    if args.json:
        print(format_json([project.model_dump(mode="json", by_alias=True) for project in ranked]))
        return 0

    title = f"Projects matching '{args.query}'" if args.query else "Projects"
    console.print(format_project_table(ranked, title=title))
    return 0


def cmd_init(args: argparse.Namespace) -> int:
    """Write the starter config if none exists."""
    path = resolve_config_path(args.config)

    if path.exists():
        print_warning(f"Config already exists at {path}")
        return 0

    try:
        ConfigLoader.load(path)
    except ConfigError as e:
        if e.kind is ConfigErrorKind.FILE_NOT_FOUND:
            print_success(f"Created starter config at {path}")
            return 0
        return _report_config_error(e, False)

    return 0


def cmd_autostart(args: argparse.Namespace) -> int:
    """Set [app].autoStartAtLogin."""
    path = resolve_config_path(args.config)
    value = args.state == "on"

    try:
        ConfigWriteBack.set_auto_start_at_login(value, path)
    except ApCoreError as e:
        print_error(e.message)
        if e.detail:
            print_error(e.detail)
        return 1

    print_success(f"autoStartAtLogin = {'true' if value else 'false'} in {path}")
    return 0


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="agent-panel-config",
        description="AgentPanel config - validate and inspect ~/.config/agent-panel/config.toml",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"agent-panel-config {__version__}"
    )

    # Global logging flags
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging (INFO level)"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging (DEBUG level, includes verbose)"
    )
    parser.add_argument(
        "--config",
        metavar="PATH",
        help="Config file (default: $AGENT_PANEL_CONFIG or ~/.config/agent-panel/config.toml)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # agent-panel-config validate
    parser_validate = subparsers.add_parser(
        "validate",
        help="Validate config.toml",
        description="Parse config.toml and report PASS/WARN/FAIL findings"
    )
    parser_validate.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON"
    )

    # agent-panel-config show
    parser_show = subparsers.add_parser(
        "show",
        help="Show the effective configuration",
        description="Show the parsed configuration with defaults applied"
    )
    parser_show.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON (config.toml key names)"
    )

    # agent-panel-config projects
    parser_projects = subparsers.add_parser(
        "projects",
        help="List projects as the switcher ranks them",
        description="List valid projects, filtered and ranked by query and recent activations"
    )
    parser_projects.add_argument(
        "--query", "-q",
        default="",
        help="Search text (matches name or id)"
    )
    parser_projects.add_argument(
        "--recent",
        nargs="*",
        metavar="ID",
        default=[],
        help="Recently activated project ids, newest first"
    )
    parser_projects.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON"
    )

    # agent-panel-config init
    subparsers.add_parser(
        "init",
        help="Create a starter config.toml",
        description="Write the commented starter config if no config exists"
    )

    # agent-panel-config autostart on|off
    parser_autostart = subparsers.add_parser(
        "autostart",
        help="Set [app].autoStartAtLogin",
        description="Update autoStartAtLogin in place, preserving comments and formatting"
    )
    parser_autostart.add_argument(
        "state",
        choices=["on", "off"],
        help="Desired state"
    )

    return parser


def cli_main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose, debug=args.debug)

    if not args.command:
        parser.print_help()
        return 0

    # Command routing
    command_handlers = {
        "validate": cmd_validate,
        "show": cmd_show,
        "projects": cmd_projects,
        "init": cmd_init,
        "autostart": cmd_autostart,
    }

    handler = command_handlers.get(args.command)
    if handler:
        return handler(args)

    print_error(f"Unknown command: {args.command}")
    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(cli_main())
