"""Path resolution for a deployment base"""

import os
from pathlib import Path
from typing import List, Optional, Union

from ..api.exceptions import BaseNotFoundError
from ..constants import (
    REPO_DIR_NAME,
    VERSIONS_DIR_NAME,
    WORK_DIR_NAME,
    CURRENT_LINK_NAME,
    DEPLOYMENT_LOCK_FILE,
    PROJECT_CONFIG_FILE,
    POST_RECEIVE_HOOK,
)


def find_deployment_base(start_path: Union[str, Path, None] = None) -> Optional[Path]:
    """Find the nearest ancestor containing repo.git

    Args:
        start_path: Directory to start from (defaults to cwd)

    Returns:
        Deployment base or None if the filesystem root is reached
    """
    current = Path(start_path or os.getcwd()).absolute()

    while True:
        repo = current / REPO_DIR_NAME
        if repo.exists():
            if not repo.is_dir():
                raise NotADirectoryError(f"{repo} exists but is not a directory")
            return current
        if current.parent == current:
            return None
        current = current.parent


class PathResolver:
    """Resolves paths within a deployment base

    Layout::

        <base>/repo.git/              bare repository
        <base>/versions/<commit>/work materialized tree
        <base>/current                link to versions/<commit>
    """

    def __init__(self, base: Union[str, Path]):
        """Initialize path resolver

        Args:
            base: Deployment base directory
        """
        self.base = Path(base).absolute()

    @classmethod
    def discover(cls, start_path: Union[str, Path, None] = None) -> 'PathResolver':
        """Create a resolver for the base above start_path

        Raises:
            BaseNotFoundError: If no base is found
        """
        base = find_deployment_base(start_path)
        if base is None:
            raise BaseNotFoundError(str(start_path or os.getcwd()))
        return cls(base)

    @property
    def repo_dir(self) -> Path:
        return self.base / REPO_DIR_NAME

    @property
    def versions_dir(self) -> Path:
        return self.base / VERSIONS_DIR_NAME

    @property
    def current_link(self) -> Path:
        return self.base / CURRENT_LINK_NAME

    @property
    def lock_file(self) -> Path:
        return self.base / DEPLOYMENT_LOCK_FILE

    @property
    def config_file(self) -> Path:
        return self.base / PROJECT_CONFIG_FILE

    @property
    def post_receive_hook(self) -> Path:
        return self.repo_dir / POST_RECEIVE_HOOK

    def get_commit_dir(self, commit: str) -> Path:
        """Get versions/<commit> for a commit"""
        return self.versions_dir / commit

    def get_work_dir(self, commit: str) -> Path:
        """Get the work tree directory for a commit"""
        return self.get_commit_dir(commit) / WORK_DIR_NAME

    def get_current_version(self) -> Optional[str]:
        """Get the commit CurrentLink points at

        Returns:
            Commit id or None if there is no current link
        """
        if not self.current_link.is_symlink():
            return None
        return Path(os.readlink(self.current_link)).name

    def list_versions(self) -> List[str]:
        """List materialized commits, sorted by name"""
        if not self.versions_dir.is_dir():
            return []
        return sorted(p.name for p in self.versions_dir.iterdir() if p.is_dir())
