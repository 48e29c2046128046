"""post-receive hook command"""

import click

from .deploy import build_deployer, deploy_options
from ..decorators import require_base
from ..utils.output import console, format_deploy_error, format_deploy_result
from ...api.exceptions import DeployAgentError


@click.command(name='post-receive-hook')
@deploy_options
@click.pass_context
@require_base
def post_receive_hook(ctx, init_command, systemd_dirs, apache2_dirs):
    """Deploy a push; run by git from repo.git/hooks/post-receive

    Reads `<old> <new> <ref>` lines from standard input and deploys the
    new commit of the primary branch. Pushes to other refs are ignored.
    """
    try:
        deployer = build_deployer(ctx.obj, init_command, systemd_dirs, apache2_dirs)
        stdin = click.get_text_stream('stdin')
        result = deployer.handle_push(stdin.read().splitlines())
    except DeployAgentError as e:
        format_deploy_error(e)
        ctx.exit(1)

    if result is None:
        console.print(f"[dim]No push to {deployer.config.primary_ref}; nothing deployed[/dim]")
        return

    format_deploy_result(result)
