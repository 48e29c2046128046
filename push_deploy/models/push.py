"""Ref updates received by the post-receive hook"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RefUpdate:
    """One `<old-id> <new-id> <ref-name>` line from git"""

    old_commit: str
    new_commit: str
    ref: str


def parse_ref_updates(lines: Iterable[str]) -> List[RefUpdate]:
    """Parse post-receive input

    Blank and malformed lines are skipped.
    """
    updates = []
    for line in lines:
        tokens = line.split()
        if not tokens:
            continue
        if len(tokens) != 3:
            logger.debug(f"Ignoring malformed ref update: {line!r}")
            continue
        updates.append(RefUpdate(*tokens))
    return updates


def select_commit(updates: Iterable[RefUpdate], primary_ref: str) -> Optional[str]:
    """Return the new commit pushed to primary_ref, if any

    When the ref appears more than once the last update wins.
    """
    commit = None
    for update in updates:
        if update.ref == primary_ref:
            commit = update.new_commit
    return commit
