"""Public API for push-deploy"""

from .exceptions import (
    DeployAgentError,
    PreconditionError,
    BaseNotFoundError,
    VersionExistsError,
    CheckoutError,
    HookError,
    ServiceManagerError,
    ConfigError,
    LockError,
)
from .deployer import Deployer, deploy

__all__ = [
    "Deployer",
    "deploy",
    "DeployAgentError",
    "PreconditionError",
    "BaseNotFoundError",
    "VersionExistsError",
    "CheckoutError",
    "HookError",
    "ServiceManagerError",
    "ConfigError",
    "LockError",
]
