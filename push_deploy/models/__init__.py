# push_deploy/models/__init__.py
"""Data models for push-deploy"""

from .config import DeployConfig, split_path_list
from .push import RefUpdate, parse_ref_updates, select_commit
from .result import DeployResult, DeployStep, InitResult, OperationStatus

__all__ = [
    # Config models
    "DeployConfig",
    "split_path_list",

    # Push models
    "RefUpdate",
    "parse_ref_updates",
    "select_commit",

    # Result models
    "DeployResult",
    "DeployStep",
    "InitResult",
    "OperationStatus",
]
