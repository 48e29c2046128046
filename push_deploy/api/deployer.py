"""Deployer API for deployment operations"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

from ..constants import MSG_NOTHING_TO_DEPLOY
from ..core.path_resolver import PathResolver
from ..core.service_manager import SystemctlManager
from ..models.config import DeployConfig
from ..models.push import parse_ref_updates, select_commit
from ..models.result import DeployResult
from ..services.config_service import ConfigService
from ..services.deploy_service import DeployService, ServiceManager

logger = logging.getLogger(__name__)


class Deployer:
    """Deployer class for deployment operations"""

    def __init__(self,
                 directory: Union[str, Path, None] = None,
                 config: Optional[DeployConfig] = None,
                 service_manager: Optional[ServiceManager] = None,
                 **overrides):
        """
        Initialize deployer

        Args:
            directory: Directory inside the deployment base (defaults to cwd)
            config: Configuration to use instead of loading it
            service_manager: Service manager collaborator (defaults to systemctl)
            **overrides: init_command, systemd_dirs, apache2_dirs overrides

        Raises:
            BaseNotFoundError: If directory is not inside a deployment base
            ConfigError: If the configuration is invalid
        """
        self.path_resolver = PathResolver.discover(directory)
        self.config = config or ConfigService(self.path_resolver.base).load(**overrides)
        self.service_manager = service_manager or SystemctlManager(
            use_sudo=self.config.use_sudo
        )
        self.deploy_service = DeployService(
            self.path_resolver,
            self.config,
            self.service_manager
        )

    @property
    def base(self) -> Path:
        return self.path_resolver.base

    def deploy(self, commit: str) -> DeployResult:
        """
        Deploy a commit

        Args:
            commit: Commit id

        Returns:
            DeployResult: Deployment result

        Raises:
            DeployAgentError: If any deployment step fails
        """
        return self.deploy_service.deploy(commit)

    def handle_push(self, lines: Iterable[str]) -> Optional[DeployResult]:
        """
        Deploy the primary-branch commit of a post-receive push

        Args:
            lines: `<old> <new> <ref>` lines from git

        Returns:
            DeployResult, or None when the push did not touch the primary ref
        """
        commit = select_commit(parse_ref_updates(lines), self.config.primary_ref)
        if commit is None:
            logger.info(MSG_NOTHING_TO_DEPLOY.format(ref=self.config.primary_ref))
            return None
        return self.deploy(commit)

    def affected_services(self) -> List[str]:
        """Get running services that reference the deployment base"""
        return self.deploy_service.resolve_services()


def deploy(commit: str,
           directory: Union[str, Path, None] = None,
           **options) -> DeployResult:
    """
    Deploy a commit into the deployment base containing directory

    Args:
        commit: Commit id
        directory: Directory inside the deployment base
        **options: Passed to Deployer

    Returns:
        DeployResult: Deployment result
    """
    return Deployer(directory, **options).deploy(commit)
