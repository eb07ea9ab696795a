"""Rich formatters for agent-panel-config output.

Formatted, colored output for findings, the parsed configuration and the
ranked project list.
"""

import json
from typing import Any, Sequence

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..models.config import Config, ProjectConfig
from ..models.findings import ConfigFinding, FindingSeverity


# Global console instances
console = Console()
err_console = Console(stderr=True)

SEVERITY_STYLES = {
    FindingSeverity.PASS: "bold green",
    FindingSeverity.WARN: "bold yellow",
    FindingSeverity.FAIL: "bold red",
}


def format_findings_table(findings: Sequence[ConfigFinding]) -> Table:
    """Format findings as a Rich table, one row per finding.

    Args:
        findings: Findings in encounter order

    Returns:
        Rich Table object ready for display
    """
    table = Table(title="Config findings", show_header=True, header_style="bold cyan")

    table.add_column("Severity", width=8)
    table.add_column("Finding", style="bold")
    table.add_column("Detail / Fix", style="dim")

    for finding in findings:
        notes = [part for part in (finding.detail, finding.fix) if part]
        table.add_row(
            Text(finding.severity.value, style=SEVERITY_STYLES[finding.severity]),
            Text(finding.title),
            Text("\n".join(notes)),
        )

    return table


def format_config_summary(config: Config) -> Panel:
    """Format the effective global settings as a Rich panel."""
    layout = config.layout
    chrome = config.chrome

    lines = [
        f"[bold cyan]Auto-start at login:[/bold cyan] {config.app.auto_start_at_login}",
        f"[bold cyan]Agent Layer enabled:[/bold cyan] {config.agent_layer.enabled}",
        "",
        "[bold cyan]Chrome:[/bold cyan]",
        f"  Pinned tabs: {len(chrome.pinned_tabs)}",
    ]
    lines.extend(f"    • {escape(url)}" for url in chrome.pinned_tabs)
    lines.append(f"  Default tabs: {len(chrome.default_tabs)}")
    lines.extend(f"    • {escape(url)}" for url in chrome.default_tabs)
    lines += [
        f"  Open git remote: {chrome.open_git_remote}",
        "",
        "[bold cyan]Layout:[/bold cyan]",
        f"  Small screen threshold: {layout.small_screen_threshold:g}in",
        f"  Window height: {layout.window_height}%",
        f"  Max window width: {layout.max_window_width:g}in",
        f"  IDE position: {layout.ide_position.value}",
        f"  Justification: {layout.justification.value}",
        f"  Max gap: {layout.max_gap}%",
    ]

    return Panel("\n".join(lines), title="AgentPanel config", border_style="cyan")


def format_project_table(projects: Sequence[ProjectConfig], title: str = "Projects") -> Table:
    """Format projects as a Rich table.

    Args:
        projects: Projects in display order
        title: Table title

    Returns:
        Rich Table object ready for display
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")

    table.add_column("ID", style="bold green")
    table.add_column("Name")
    table.add_column("Location", style="blue")
    table.add_column("Color")
    table.add_column("Agent Layer", justify="center")

    for project in projects:
        location = f"{project.remote}:{project.path}" if project.is_ssh else project.path
        table.add_row(
            Text(project.id),
            Text(project.name),
            Text(location),
            Text(project.color),
            "✓" if project.use_agent_layer else "",
        )

    return table


def format_success(message: str) -> Text:
    return Text.from_markup(f"[bold green]✓[/bold green] {escape(message)}")


def format_error(message: str) -> Text:
    return Text.from_markup(f"[bold red]✗[/bold red] {escape(message)}")


def format_warning(message: str) -> Text:
    return Text.from_markup(f"[bold yellow]⚠[/bold yellow]  {escape(message)}")


def format_json(data: Any, pretty: bool = True) -> str:
    """Format data as JSON string.

    Args:
        data: The data to format as JSON
        pretty: Whether to pretty-print with indentation

    Returns:
        JSON string
    """
    if pretty:
        return json.dumps(data, indent=2, default=str)
    return json.dumps(data, default=str)


def print_success(message: str) -> None:
    console.print(format_success(message))


def print_error(message: str) -> None:
    """Print an error message to stderr."""
    err_console.print(format_error(message))


def print_warning(message: str) -> None:
    console.print(format_warning(message))
