# push_deploy/cli/decorators/__init__.py
"""CLI decorators"""

from .project import Context, require_base

__all__ = [
    'Context',
    'require_base',
]
