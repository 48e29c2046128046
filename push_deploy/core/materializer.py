"""Materialize commits into version directories"""

import logging
import os
import subprocess
from pathlib import Path
from typing import Optional

from .path_resolver import PathResolver
from ..api.exceptions import PreconditionError, VersionExistsError
from ..constants import INIT_COMMANDS
from ..models.result import InitResult
from ..utils import git_utils


def check_commit_id(commit: str) -> None:
    """Ensure a commit id is usable as a single directory name

    Raises:
        PreconditionError: If the id is empty, a dot name, or contains
            a path separator or NUL
    """
    if not commit or commit in (os.curdir, os.pardir):
        raise PreconditionError(f"Invalid commit id: {commit!r}")
    if os.sep in commit or "\0" in commit or (os.altsep and os.altsep in commit):
        raise PreconditionError(f"Invalid commit id: {commit!r}")


def select_init_command(work_dir: Path, init_override: Optional[str] = None) -> Optional[str]:
    """Pick the command that initialises a work tree

    Args:
        work_dir: Materialized work tree
        init_override: Explicit command, wins over detection

    Returns:
        Shell command or None if nothing applies
    """
    if init_override:
        return init_override

    for marker, command in INIT_COMMANDS:
        if (work_dir / marker).exists():
            return command

    return None


class VersionMaterializer:
    """Creates version directories and runs their build hook"""

    def __init__(self, path_resolver: PathResolver):
        self.path_resolver = path_resolver
        self.logger = logging.getLogger(self.__class__.__name__)

    def check_not_deployed(self, commit: str) -> None:
        """Refuse a commit whose directories already exist

        Raises:
            PreconditionError: If the commit id is not a plain name
            VersionExistsError: If versions/<commit> or its work dir exists
        """
        check_commit_id(commit)
        for path in (self.path_resolver.get_commit_dir(commit),
                     self.path_resolver.get_work_dir(commit)):
            if path.exists() or path.is_symlink():
                raise VersionExistsError(commit, str(path))

    def materialize(self, commit: str) -> Path:
        """Create versions/<commit>/work and check the commit out into it

        Args:
            commit: Commit to materialize

        Returns:
            Work tree directory

        Raises:
            VersionExistsError: If the commit was deployed before
            CheckoutError: If git checkout fails
        """
        self.check_not_deployed(commit)

        commit_dir = self.path_resolver.get_commit_dir(commit)
        work_dir = self.path_resolver.get_work_dir(commit)

        self.path_resolver.versions_dir.mkdir(exist_ok=True)
        try:
            commit_dir.mkdir()
            work_dir.mkdir()
        except FileExistsError as e:
            raise VersionExistsError(commit, e.filename or str(commit_dir)) from e

        self.logger.info(f"Checking out {commit} into {work_dir}")
        git_utils.checkout(self.path_resolver.repo_dir, work_dir, commit)

        return work_dir

    def initialize(self, work_dir: Path, init_override: Optional[str] = None) -> InitResult:
        """Run the initialisation command in a work tree

        Returns:
            InitResult with exit status and combined output
        """
        command = select_init_command(work_dir, init_override)
        if command is None:
            self.logger.warning("No initialisation performed")
            return InitResult(command=None)

        self.logger.info(f"{work_dir}$ {command}")
        result = subprocess.run(
            command,
            shell=True,
            cwd=work_dir,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            errors="replace"
        )

        for line in result.stdout.splitlines():
            self.logger.info(f"  {line}")

        return InitResult(
            command=command,
            returncode=result.returncode,
            output=result.stdout
        )
