"""systemd service manager collaborator"""

import logging
import subprocess
from typing import List, Sequence

from ..api.exceptions import ServiceManagerError


class SystemctlManager:
    """Runs systemctl, optionally through sudo

    Every call is synchronous; stop/start/reload raise on failure.
    """

    def __init__(self, use_sudo: bool = True, systemctl: str = "systemctl"):
        self.use_sudo = use_sudo
        self.systemctl = systemctl
        self.logger = logging.getLogger(self.__class__.__name__)

    def _command(self, args: Sequence[str]) -> List[str]:
        cmd = [self.systemctl, *args]
        if self.use_sudo:
            cmd = ["sudo", *cmd]
        return cmd

    def _run(self, args: Sequence[str]) -> str:
        cmd = self._command(args)
        self.logger.debug(f"$ {' '.join(cmd)}")
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                errors="replace"
            )
        except FileNotFoundError as e:
            raise ServiceManagerError(cmd, str(e)) from e

        if result.returncode != 0:
            raise ServiceManagerError(cmd, (result.stderr or result.stdout))
        return result.stdout

    def stop(self, services: Sequence[str], wait: bool = True) -> None:
        """Stop services as one batch

        Args:
            services: Service ids
            wait: Block until the stop jobs have finished
        """
        if not services:
            return
        args = ["stop"] if wait else ["stop", "--no-block"]
        self.logger.info(f"Stopping {', '.join(services)}")
        self._run([*args, *services])

    def start(self, services: Sequence[str]) -> None:
        if not services:
            return
        self.logger.info(f"Starting {', '.join(services)}")
        self._run(["start", *services])

    def reload(self) -> None:
        """Reload unit definitions"""
        self.logger.info("Reloading service manager")
        self._run(["daemon-reload"])

    def is_active(self, service: str) -> bool:
        """Check whether a service is currently active"""
        cmd = self._command(["is-active", "--quiet", service])
        try:
            result = subprocess.run(cmd, capture_output=True)
        except FileNotFoundError:
            return False
        return result.returncode == 0
