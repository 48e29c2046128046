# push_deploy/cli/commands/__init__.py
"""CLI commands"""

from . import init
from . import hook
from . import deploy
from . import services
from . import status

__all__ = [
    "init",
    "hook",
    "deploy",
    "services",
    "status",
]
