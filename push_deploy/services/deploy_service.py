"""Deploy service: the deployment transaction"""

import logging
from pathlib import Path
from typing import Callable, List, Protocol, Sequence

from ..api.exceptions import HookError, PreconditionError
from ..constants import MSG_LINK_UPDATED
from ..core.materializer import VersionMaterializer
from ..core.path_resolver import PathResolver
from ..core.service_resolver import get_affected_services
from ..models.config import DeployConfig
from ..models.result import DeployResult, DeployStep, OperationStatus
from ..utils.file_utils import DeploymentLock, replace_symlink


class ServiceManager(Protocol):
    """Operations the deployment needs from the service manager"""

    def stop(self, services: Sequence[str], wait: bool = True) -> None: ...

    def start(self, services: Sequence[str]) -> None: ...

    def reload(self) -> None: ...

    def is_active(self, service: str) -> bool: ...


class LinkManager:
    """Manages the current-version link of a deployment base"""

    def __init__(self, path_resolver: PathResolver):
        self.path_resolver = path_resolver

    def check_current_link(self) -> None:
        """Ensure current is a link or absent

        Raises:
            PreconditionError: If current is a regular file or directory
        """
        link = self.path_resolver.current_link
        if link.exists() and not link.is_symlink():
            raise PreconditionError(f"{link} exists and is not a symbolic link")

    def switch_to(self, commit: str) -> Path:
        """Point current at versions/<commit>

        Returns:
            Path to the current link
        """
        link = self.path_resolver.current_link
        target = self.path_resolver.get_commit_dir(commit)
        replace_symlink(link, target)
        return link


class DeployService:
    """Runs one deployment of a commit into a deployment base

    Steps run strictly in order and the first failure aborts the rest.
    Completed steps are not undone.
    """

    def __init__(self,
                 path_resolver: PathResolver,
                 config: DeployConfig,
                 service_manager: ServiceManager):
        """Initialize deploy service

        Args:
            path_resolver: Paths of the deployment base
            config: Effective configuration
            service_manager: Collaborator for stop/start/reload/is_active
        """
        self.path_resolver = path_resolver
        self.config = config
        self.service_manager = service_manager

        self.materializer = VersionMaterializer(path_resolver)
        self.link_manager = LinkManager(path_resolver)
        self.logger = logging.getLogger(self.__class__.__name__)

    def resolve_services(self, commit: str = "") -> List[str]:
        """Get running services that reference the deployment base"""
        return get_affected_services(
            self.path_resolver.base,
            commit,
            self.config,
            self.service_manager.is_active
        )

    def deploy(self, commit: str) -> DeployResult:
        """Deploy a commit

        Args:
            commit: Commit to deploy

        Returns:
            DeployResult of the completed deployment

        Raises:
            PreconditionError: If the commit id is unusable or was already deployed
            CheckoutError: If the checkout fails
            HookError: If the initialisation command fails
            ServiceManagerError: If stop, reload or start fail
            LockError: If another deployment holds the lock
        """
        lock = DeploymentLock(
            self.path_resolver.lock_file,
            blocking=self.config.wait_for_lock
        )
        with lock:
            return self._deploy_locked(commit)

    def _deploy_locked(self, commit: str) -> DeployResult:
        result = DeployResult(
            commit=commit,
            base=self.path_resolver.base,
            previous_version=self.path_resolver.get_current_version()
        )
        self.logger.info(f"Deploying {commit} to {self.path_resolver.base}")

        steps: List[Callable[[DeployResult], None]] = [
            self._materialize,
            self._initialize,
            self._resolve,
            self._stop,
            self._swap,
            self._reload,
            self._start,
        ]

        for step in steps:
            try:
                step(result)
            except Exception:
                result.complete(OperationStatus.FAILED)
                done = ", ".join(s.value for s in result.completed_steps) or "none"
                self.logger.error(f"Deployment of {commit} aborted (completed: {done})")
                raise

        result.complete(OperationStatus.SUCCESS)
        self.logger.info(f"Deployed {commit} in {result.duration:.1f}s")
        return result

    def _materialize(self, result: DeployResult) -> None:
        self.link_manager.check_current_link()
        result.version_dir = self.materializer.materialize(result.commit)
        result.mark_step(DeployStep.MATERIALIZE)

    def _initialize(self, result: DeployResult) -> None:
        init = self.materializer.initialize(result.version_dir, self.config.init_command)
        result.init = init
        if not init.succeeded:
            raise HookError(init.command, init.returncode, init.output)
        result.mark_step(DeployStep.INITIALIZE)

    def _resolve(self, result: DeployResult) -> None:
        result.services = self.resolve_services(result.commit)
        if result.services:
            self.logger.info(f"Affected services: {', '.join(result.services)}")
        else:
            self.logger.info("No running services reference this deployment")
        result.mark_step(DeployStep.RESOLVE_SERVICES)

    def _stop(self, result: DeployResult) -> None:
        if result.services:
            self.service_manager.stop(result.services, wait=True)
        result.mark_step(DeployStep.STOP)

    def _swap(self, result: DeployResult) -> None:
        link = self.link_manager.switch_to(result.commit)
        self.logger.info(MSG_LINK_UPDATED.format(
            link=link,
            target=self.path_resolver.get_commit_dir(result.commit)
        ))
        result.mark_step(DeployStep.SWAP)

    def _reload(self, result: DeployResult) -> None:
        self.service_manager.reload()
        result.mark_step(DeployStep.RELOAD)

    def _start(self, result: DeployResult) -> None:
        if result.services:
            self.service_manager.start(result.services)
        result.mark_step(DeployStep.START)
