"""Git operation utilities"""

import subprocess
from pathlib import Path

from ..api.exceptions import CheckoutError, DeployAgentError


def checkout(repo_dir: Path, work_tree: Path, commit: str) -> None:
    """
    Check out a commit of a bare repository into a work tree

    Args:
        repo_dir: Bare repository
        work_tree: Directory receiving the files
        commit: Commit to check out

    Raises:
        CheckoutError: If git fails or is not installed
    """
    try:
        result = subprocess.run(
            ['git',
             '--git-dir', str(repo_dir),
             '--work-tree', str(work_tree),
             'checkout', '-f', commit],
            capture_output=True,
            text=True,
            errors="replace"
        )
    except FileNotFoundError as e:
        raise CheckoutError(commit, str(e)) from e

    if result.returncode != 0:
        raise CheckoutError(commit, result.stderr or result.stdout)


def init_bare_repo(repo_dir: Path, shared: str = 'group') -> None:
    """
    Create a bare repository

    Args:
        repo_dir: Repository directory
        shared: Value for --shared

    Raises:
        DeployAgentError: If git fails
    """
    repo_dir.mkdir(parents=True, exist_ok=True)
    try:
        result = subprocess.run(
            ['git', f'--git-dir={repo_dir}', 'init', '--bare', f'--shared={shared}'],
            capture_output=True,
            text=True,
            errors="replace"
        )
    except FileNotFoundError as e:
        raise DeployAgentError(f"git not available: {e}") from e

    if result.returncode != 0:
        raise DeployAgentError(f"git init failed: {result.stderr.strip()}")
