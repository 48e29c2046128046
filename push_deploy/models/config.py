"""Configuration data models"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Any, Union

from ..api.exceptions import ConfigError
from ..constants import (
    DEFAULT_APACHE2_DIRS,
    DEFAULT_PRIMARY_REF,
    DEFAULT_SYSTEMD_DIRS,
    DEFAULT_WEB_SERVER_SERVICE,
    PATH_LIST_SEPARATOR,
)


def split_path_list(value: Union[str, List[str], None]) -> List[str]:
    """Split a colon-separated directory list

    Args:
        value: Colon-separated string, list of paths, or None

    Returns:
        List of non-empty paths
    """
    if value is None:
        return []
    if isinstance(value, str):
        parts = value.split(PATH_LIST_SEPARATOR)
    elif isinstance(value, (list, tuple)):
        parts = value
    else:
        raise ConfigError(f"Expected a path list, got {type(value).__name__}")

    paths = []
    for part in parts:
        if not isinstance(part, str):
            raise ConfigError(f"Invalid path entry: {part!r}")
        if part:
            paths.append(part)
    return paths


@dataclass
class DeployConfig:
    """Settings for one deployment base"""

    # Command run in the new work tree, auto-detected when unset
    init_command: Optional[str] = None

    # Process-manager unit directories, one service per matching link
    systemd_dirs: List[str] = field(default_factory=lambda: list(DEFAULT_SYSTEMD_DIRS))

    # Web-server config directories, any match implicates the web server
    apache2_dirs: List[str] = field(default_factory=lambda: list(DEFAULT_APACHE2_DIRS))
    web_server_service: str = DEFAULT_WEB_SERVER_SERVICE

    primary_ref: str = DEFAULT_PRIMARY_REF
    use_sudo: bool = True
    wait_for_lock: bool = True

    def __post_init__(self):
        """Validate configuration"""
        if self.init_command is not None and not isinstance(self.init_command, str):
            raise ConfigError("init_command must be a string")
        for name in ("web_server_service", "primary_ref"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value:
                raise ConfigError(f"{name} must be a non-empty string")
        for name in ("use_sudo", "wait_for_lock"):
            if not isinstance(getattr(self, name), bool):
                raise ConfigError(f"{name} must be true or false")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        data = {
            "systemd_dirs": list(self.systemd_dirs),
            "apache2_dirs": list(self.apache2_dirs),
            "web_server_service": self.web_server_service,
            "primary_ref": self.primary_ref,
            "use_sudo": self.use_sudo,
            "wait_for_lock": self.wait_for_lock,
        }

        if self.init_command:
            data["init"] = self.init_command

        return data

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'DeployConfig':
        """Create from dictionary"""
        data = data or {}
        if not isinstance(data, dict):
            raise ConfigError("Configuration must be a mapping")

        defaults = cls()
        return cls(
            init_command=data.get("init"),
            systemd_dirs=split_path_list(data["systemd_dirs"])
            if "systemd_dirs" in data else defaults.systemd_dirs,
            apache2_dirs=split_path_list(data["apache2_dirs"])
            if "apache2_dirs" in data else defaults.apache2_dirs,
            web_server_service=data.get("web_server_service", defaults.web_server_service),
            primary_ref=data.get("primary_ref", defaults.primary_ref),
            use_sudo=data.get("use_sudo", defaults.use_sudo),
            wait_for_lock=data.get("wait_for_lock", defaults.wait_for_lock),
        )
