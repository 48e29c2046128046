"""Configuration loading service"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ..api.exceptions import ConfigError
from ..constants import ENV_CONFIG_PATH, PROJECT_CONFIG_FILE
from ..models.config import DeployConfig, split_path_list


class ConfigService:
    """Builds the DeployConfig for a deployment base

    Values come from the defaults, then the YAML file in the base (or the
    file named by PUSH_DEPLOY_CONFIG), then command-line overrides.
    """

    def __init__(self, base: Path):
        """Initialize config service

        Args:
            base: Deployment base directory
        """
        self.base = base
        self.logger = logging.getLogger(self.__class__.__name__)

    @property
    def config_path(self) -> Path:
        env_path = os.environ.get(ENV_CONFIG_PATH)
        if env_path:
            return Path(env_path)
        return self.base / PROJECT_CONFIG_FILE

    def read_file(self) -> Dict[str, Any]:
        """Read the YAML file, empty when absent

        Raises:
            ConfigError: If the file cannot be parsed
        """
        path = self.config_path
        if not path.exists():
            self.logger.debug(f"No configuration file at {path}, using defaults")
            return {}

        with open(path, 'r') as f:
            content = f.read()

        # Simple environment variable expansion
        content = os.path.expandvars(content)

        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(f"{path} must contain a mapping")
        return data

    def load(self,
             init_command: Optional[str] = None,
             systemd_dirs: Optional[str] = None,
             apache2_dirs: Optional[str] = None) -> DeployConfig:
        """Load configuration with command-line overrides

        Args:
            init_command: Overrides the initialisation command
            systemd_dirs: Colon-separated unit directories
            apache2_dirs: Colon-separated web-server directories

        Returns:
            Effective configuration
        """
        data = self.read_file()

        if init_command:
            data["init"] = init_command
        if systemd_dirs is not None:
            data["systemd_dirs"] = split_path_list(systemd_dirs)
        if apache2_dirs is not None:
            data["apache2_dirs"] = split_path_list(apache2_dirs)

        try:
            return DeployConfig.from_dict(data)
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid configuration: {e}") from e

    def save(self, config: DeployConfig) -> Path:
        """Write configuration to the base's YAML file"""
        path = self.base / PROJECT_CONFIG_FILE
        with open(path, 'w') as f:
            yaml.dump(config.to_dict(), f, default_flow_style=False, sort_keys=False)
        return path
