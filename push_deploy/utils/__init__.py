"""Utility functions for push-deploy"""

from .file_utils import (
    DeploymentLock,
    replace_symlink,
    write_executable,
)

from .git_utils import (
    checkout,
    init_bare_repo,
)

__all__ = [
    "DeploymentLock",
    "replace_symlink",
    "write_executable",
    "checkout",
    "init_bare_repo",
]
