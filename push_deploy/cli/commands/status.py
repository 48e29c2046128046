"""Status command"""

import click

from ..decorators import require_base
from ..utils.output import console, format_table


@click.command()
@click.pass_context
@require_base
def status(ctx):
    """Show the current version and deployed versions"""
    resolver = ctx.obj.path_resolver
    current = resolver.get_current_version()

    console.print(f"[bold]Base:[/bold] {resolver.base}")
    console.print(f"[bold]Current:[/bold] {current or '[dim]none[/dim]'}")

    versions = resolver.list_versions()
    if not versions:
        console.print("[dim]No versions deployed[/dim]")
        return

    rows = [
        {
            "name": commit,
            "work": "yes" if resolver.get_work_dir(commit).is_dir() else "missing",
            "current": "*" if commit == current else "",
        }
        for commit in versions
    ]
    console.print(format_table(
        rows,
        [("name", "Commit"), ("work", "Work tree"), ("current", "Current")],
        title="Versions"
    ))
