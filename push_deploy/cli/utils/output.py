# push_deploy/cli/utils/output.py
"""Output formatting utilities"""

from typing import Any, Dict, List, Optional, Tuple

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich import box
from rich.markup import escape

from ...api.exceptions import DeployAgentError, HookError
from ...constants import EMOJI_ERROR, EMOJI_WARNING
from ...models import DeployResult

console = Console()
err_console = Console(stderr=True)


def format_deploy_result(result: DeployResult) -> None:
    """Format and display deploy operation result"""
    lines = [
        f"[green]✓[/green] Deployment completed successfully!",
        f"",
        f"[bold]Commit:[/bold] {result.commit}",
        f"[bold]Base:[/bold] {result.base}",
        f"[bold]Version dir:[/bold] {result.version_dir}",
    ]

    if result.previous_version:
        lines.append(f"[bold]Previous:[/bold] {result.previous_version}")

    if result.init and result.init.performed:
        lines.append(f"[bold]Init:[/bold] {result.init.command}")
    else:
        lines.append("[bold]Init:[/bold] [yellow]none performed[/yellow]")

    if result.services:
        lines.append(f"[bold]Restarted:[/bold] {', '.join(result.services)}")
    else:
        lines.append("[bold]Restarted:[/bold] [dim]no services[/dim]")

    if result.duration is not None:
        lines.append(f"[bold]Duration:[/bold] {result.duration:.1f}s")

    panel = Panel(
        "\n".join(lines),
        title="Deploy Result",
        border_style="green"
    )
    console.print(panel)


def format_deploy_error(error: DeployAgentError) -> None:
    """Display a failed deployment"""
    lines = [f"[red]{EMOJI_ERROR} Deploy failed:[/red] {escape(str(error))}"]

    if error.error_code:
        lines.append(f"[dim]Error code: {error.error_code}[/dim]")

    if isinstance(error, HookError) and error.output:
        lines.append("")
        lines.append("[bold]Command output:[/bold]")
        lines.extend(escape(line) for line in error.output.rstrip().splitlines()[-20:])

    panel = Panel(
        "\n".join(lines),
        title="Deploy Error",
        border_style="red"
    )
    err_console.print(panel)


def print_error(message: str) -> None:
    err_console.print(f"[red]{EMOJI_ERROR} {escape(message)}[/red]")


def print_warning(message: str) -> None:
    console.print(f"[yellow]{EMOJI_WARNING} {message}[/yellow]")


def format_table(data: List[Dict[str, Any]],
                 columns: List[Tuple[str, str]],
                 title: Optional[str] = None) -> Table:
    """Create a formatted table

    Args:
        data: List of dictionaries with data
        columns: List of (key, header) tuples
        title: Optional table title

    Returns:
        Rich Table object
    """
    table = Table(title=title, box=box.ROUNDED)

    for key, header in columns:
        table.add_column(header, style="cyan" if key == "name" else None)

    for item in data:
        row = []
        for key, _ in columns:
            value = item.get(key, "")
            if not isinstance(value, str):
                value = str(value)
            row.append(value)
        table.add_row(*row)

    return table
