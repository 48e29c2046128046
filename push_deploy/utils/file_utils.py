# push_deploy/utils/file_utils.py
"""File operation utilities"""

import fcntl
import os
from pathlib import Path
from typing import Optional, Union

from ..api.exceptions import LockError


def replace_symlink(link: Path, target: Union[str, Path]) -> None:
    """
    Point link at target atomically

    A temporary link is created next to link and renamed over it, so
    readers see either the old target or the new one.

    Args:
        link: Link path
        target: New link target
    """
    temp_link = link.with_name(f".{link.name}.tmp")

    # Remove temp link if it exists
    if temp_link.exists() or temp_link.is_symlink():
        temp_link.unlink()

    temp_link.symlink_to(target, target_is_directory=True)

    try:
        os.replace(temp_link, link)
    except OSError:
        temp_link.unlink()
        raise


def write_executable(file_path: Path, content: str) -> None:
    """
    Write a script and mark it executable

    Args:
        file_path: Target file path
        content: Script content
    """
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(content)
    file_path.chmod(0o755)


class DeploymentLock:
    """Exclusive advisory lock on a file, held for a with-block"""

    def __init__(self, lock_path: Path, blocking: bool = True):
        self.lock_path = lock_path
        self.blocking = blocking
        self._fd: Optional[int] = None

    def acquire(self) -> None:
        fd = os.open(self.lock_path, os.O_RDWR | os.O_CREAT, 0o644)
        flags = fcntl.LOCK_EX if self.blocking else fcntl.LOCK_EX | fcntl.LOCK_NB
        try:
            fcntl.flock(fd, flags)
        except BlockingIOError:
            os.close(fd)
            raise LockError(str(self.lock_path))
        self._fd = fd

    def release(self) -> None:
        if self._fd is None:
            return
        try:
            fcntl.flock(self._fd, fcntl.LOCK_UN)
        finally:
            os.close(self._fd)
            self._fd = None

    @property
    def locked(self) -> bool:
        return self._fd is not None

    def __enter__(self) -> 'DeploymentLock':
        self.acquire()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.release()
