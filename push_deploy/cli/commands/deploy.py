"""Deploy command implementation"""

import click

from ..decorators import Context, require_base
from ..utils.output import format_deploy_error, format_deploy_result
from ...api import Deployer
from ...api.exceptions import DeployAgentError


def directory_options(func):
    """Options naming the service-definition directories to scan"""
    func = click.option(
        '--apache2-directories', 'apache2_dirs',
        metavar='DIR[:DIR...]',
        help='Web-server config directories (colon-separated)'
    )(func)
    func = click.option(
        '--systemd-directories', 'systemd_dirs',
        metavar='DIR[:DIR...]',
        help='Locations of systemd unit files (colon-separated)'
    )(func)
    return func


def deploy_options(func):
    """Options shared by commands that run a deployment"""
    func = directory_options(func)
    func = click.option(
        '--init', 'init_command',
        metavar='COMMAND',
        help='Command to run to init new version'
    )(func)
    return func


def build_deployer(obj: Context, init_command=None, systemd_dirs=None,
                   apache2_dirs=None) -> Deployer:
    """Create a Deployer for the base found by require_base"""
    return Deployer(
        obj.path_resolver.base,
        init_command=init_command,
        systemd_dirs=systemd_dirs,
        apache2_dirs=apache2_dirs
    )


@click.command()
@click.argument('commit')
@deploy_options
@click.pass_context
@require_base
def deploy(ctx, commit, init_command, systemd_dirs, apache2_dirs):
    """Deploy COMMIT from the base's repository

    Checks the commit out into versions/COMMIT/work, runs its
    initialisation command, then restarts the running services that
    reference the deployment around the switch of the current link.

    Examples:

        # Redeploy by hand after a failed hook
        push-deploy deploy 3f2c9e1

        # Override the detected initialisation
        push-deploy deploy 3f2c9e1 --init "make build"
    """
    try:
        deployer = build_deployer(ctx.obj, init_command, systemd_dirs, apache2_dirs)
        result = deployer.deploy(commit)
    except DeployAgentError as e:
        format_deploy_error(e)
        ctx.exit(1)

    format_deploy_result(result)
