"""Initialize command for creating deployment bases"""

from pathlib import Path

import click

from ..utils.output import console, format_deploy_error, print_warning
from ...api.exceptions import DeployAgentError
from ...constants import APP_NAME, EMOJI_ROCKET, EMOJI_SUCCESS
from ...core.path_resolver import PathResolver
from ...models.config import DeployConfig
from ...services.config_service import ConfigService
from ...utils.file_utils import write_executable
from ...utils.git_utils import init_bare_repo

HOOK_TEMPLATE = """#!/bin/sh
{command} -v post-receive-hook
"""


def init_base(base: Path, command: str = APP_NAME) -> PathResolver:
    """Create repo.git, its post-receive hook, versions/ and a default
    push-deploy.yaml under base

    Existing pieces are kept; the hook script is always rewritten.
    """
    resolver = PathResolver(base)
    resolver.base.mkdir(parents=True, exist_ok=True)

    if not resolver.repo_dir.exists():
        init_bare_repo(resolver.repo_dir)

    write_executable(resolver.post_receive_hook, HOOK_TEMPLATE.format(command=command))
    resolver.versions_dir.mkdir(exist_ok=True)

    if not resolver.config_file.exists():
        ConfigService(resolver.base).save(DeployConfig())

    return resolver


@click.command()
@click.option(
    '--command', 'hook_command',
    default=APP_NAME,
    show_default=True,
    help='Program the post-receive hook invokes'
)
@click.pass_context
def init(ctx, hook_command):
    """Initialize a deployment base

    Creates repo.git (a bare, group-shared repository), installs its
    post-receive hook, creates the versions directory and writes a
    default push-deploy.yaml. The base is --directory, or the current
    directory.

    Examples:
        push-deploy -C /srv/myapp init
        git remote add live ssh://host/srv/myapp/repo.git
    """
    base = Path(ctx.obj.directory or Path.cwd())
    resolver = PathResolver(base)

    if resolver.repo_dir.exists():
        print_warning(f"Keeping existing repository {resolver.repo_dir}")
    if resolver.config_file.exists():
        print_warning(f"Keeping existing configuration {resolver.config_file}")

    console.print(f"{EMOJI_ROCKET} Initializing deployment base in {base}")
    try:
        resolver = init_base(base, hook_command)
    except DeployAgentError as e:
        format_deploy_error(e)
        ctx.exit(1)

    console.print(f"{EMOJI_SUCCESS} Repository: {resolver.repo_dir}")
    console.print(f"{EMOJI_SUCCESS} Hook: {resolver.post_receive_hook}")
    console.print(f"{EMOJI_SUCCESS} Versions: {resolver.versions_dir}")
    console.print(f"{EMOJI_SUCCESS} Configuration: {resolver.config_file}")
