"""Find symbolic links that point into a directory"""

import os
from typing import Iterator, List, Tuple, Union

PathLike = Union[str, os.PathLike]


def iter_symlinks(scan_root: PathLike) -> Iterator[Tuple[str, str]]:
    """Walk scan_root depth-first and yield (link path, stored target)

    Links are reported but never descended into, so cyclic links cannot
    loop. Unreadable or missing directories yield nothing.
    """
    stack = [os.fspath(scan_root)]

    while stack:
        directory = stack.pop()
        try:
            with os.scandir(directory) as it:
                entries = sorted(it, key=lambda e: e.name)
        except OSError:
            continue

        subdirs = []
        for entry in entries:
            if entry.is_symlink():
                try:
                    yield entry.path, os.readlink(entry.path)
                except OSError:
                    continue
            elif entry.is_dir(follow_symlinks=False):
                subdirs.append(entry.path)

        stack.extend(reversed(subdirs))


def is_within(path: str, directory: str) -> bool:
    """Check lexically whether path is directory or lies below it"""
    relative = os.path.relpath(path, directory)
    return relative != os.pardir and not relative.startswith(os.pardir + os.sep)


def find_links_to(scan_root: PathLike, target: PathLike) -> List[str]:
    """Find links under scan_root whose target lies inside target

    Args:
        scan_root: Directory tree to scan (may be absent)
        target: Directory the links must point into

    Returns:
        Sorted, deduplicated link paths relative to scan_root
    """
    root = os.path.abspath(os.fspath(scan_root))
    target = os.path.abspath(os.fspath(target))
    links = set()

    for link_path, stored in iter_symlinks(root):
        # relative targets are relative to the link's own directory
        resolved = os.path.normpath(
            os.path.join(os.path.dirname(link_path), stored)
        )
        if is_within(resolved, target):
            links.add(os.path.relpath(link_path, root))

    return sorted(links)
