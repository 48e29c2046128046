"""Services command: show what a deployment would restart"""

import click

from .deploy import build_deployer, directory_options
from ..decorators import require_base
from ..utils.output import console, format_deploy_error
from ...api.exceptions import DeployAgentError


@click.command()
@directory_options
@click.pass_context
@require_base
def services(ctx, systemd_dirs, apache2_dirs):
    """List running services that reference this deployment base"""
    try:
        deployer = build_deployer(ctx.obj, systemd_dirs=systemd_dirs, apache2_dirs=apache2_dirs)
        affected = deployer.affected_services()
    except DeployAgentError as e:
        format_deploy_error(e)
        ctx.exit(1)

    if not affected:
        console.print("[dim]No running services reference this deployment[/dim]")
        return

    for service in affected:
        console.print(service)
