"""push-deploy - deploy on git push.

Checks out each commit pushed to the primary branch into its own version
directory, initialises it, and restarts the services that reference the
deployment around an atomic switch of the ``current`` link.
"""

from .__version__ import __version__, __version_info__, __license__

# Exceptions
from .api.exceptions import (
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

# Core API
from .api.deployer import Deployer, deploy
from .core.link_scanner import find_links_to
from .core.service_resolver import get_affected_services

# Data models
from .models.config import DeployConfig
from .models.result import DeployResult, InitResult

__all__ = [
    # Version information
    "__version__",
    "__version_info__",
    "__license__",

    # Main classes
    "Deployer",

    # Core API functions
    "deploy",
    "find_links_to",
    "get_affected_services",

    # Data models
    "DeployConfig",
    "DeployResult",
    "InitResult",

    # Exceptions
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
