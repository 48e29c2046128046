"""Work out which running services depend on a deployment base"""

import logging
import os
from pathlib import Path
from typing import Callable, Iterable, List, Set, Union

from .link_scanner import find_links_to
from ..models.config import DeployConfig

logger = logging.getLogger(__name__)


class ServiceResolver:
    """Maps service-definition links to service ids

    Web-server directories implicate the web server as a whole; unit
    directories yield one service per matching link, named after the link.
    """

    def __init__(self,
                 systemd_dirs: Iterable[Union[str, Path]],
                 apache2_dirs: Iterable[Union[str, Path]],
                 is_service_running: Callable[[str], bool],
                 web_server_service: str = "apache2"):
        self.systemd_dirs = list(systemd_dirs)
        self.apache2_dirs = list(apache2_dirs)
        self.is_service_running = is_service_running
        self.web_server_service = web_server_service

    @classmethod
    def from_config(cls,
                    config: DeployConfig,
                    is_service_running: Callable[[str], bool]) -> 'ServiceResolver':
        return cls(
            systemd_dirs=config.systemd_dirs,
            apache2_dirs=config.apache2_dirs,
            is_service_running=is_service_running,
            web_server_service=config.web_server_service
        )

    def find_candidates(self, base: Union[str, Path]) -> Set[str]:
        """Collect service ids referencing base, running or not"""
        candidates = set()

        for directory in self.apache2_dirs:
            links = find_links_to(directory, base)
            if links:
                logger.debug(f"{directory}: {len(links)} link(s) into {base}")
                candidates.add(self.web_server_service)

        for directory in self.systemd_dirs:
            for link in find_links_to(directory, base):
                logger.debug(f"{directory}: unit link {link}")
                candidates.add(os.path.basename(link))

        return candidates

    def resolve(self, base: Union[str, Path]) -> List[str]:
        """Get the running services that reference base

        Returns:
            Sorted service ids
        """
        candidates = self.find_candidates(base)
        running = [s for s in sorted(candidates) if self.is_service_running(s)]

        skipped = candidates.difference(running)
        if skipped:
            logger.info(f"Not running, left alone: {', '.join(sorted(skipped))}")

        return running


def get_affected_services(base: Union[str, Path],
                          commit: str,
                          config: DeployConfig,
                          is_service_running: Callable[[str], bool]) -> List[str]:
    """Get the sorted running services that reference base

    Args:
        base: Deployment base directory
        commit: Commit being deployed (informational)
        config: Directories to scan
        is_service_running: Predicate called once per candidate

    Returns:
        Sorted, deduplicated service ids
    """
    services = ServiceResolver.from_config(config, is_service_running).resolve(base)
    logger.debug(f"Affected services for {commit}: {services}")
    return services
