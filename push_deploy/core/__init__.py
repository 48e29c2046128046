"""Core functionality for push-deploy"""

from .path_resolver import PathResolver, find_deployment_base
from .link_scanner import find_links_to
from .service_resolver import ServiceResolver, get_affected_services
from .service_manager import SystemctlManager
from .materializer import VersionMaterializer, select_init_command

__all__ = [
    "PathResolver",
    "find_deployment_base",
    "find_links_to",
    "ServiceResolver",
    "get_affected_services",
    "SystemctlManager",
    "VersionMaterializer",
    "select_init_command",
]
