# push_deploy/services/__init__.py
"""Business logic services for push-deploy"""

from .config_service import ConfigService
from .deploy_service import DeployService, LinkManager

__all__ = [
    "ConfigService",
    "DeployService",
    "LinkManager",
]
