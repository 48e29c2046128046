"""CLI utility functions"""

from .output import (
    console,
    format_deploy_result,
    format_deploy_error,
    format_table,
    print_error,
    print_warning,
)

__all__ = [
    'console',
    'format_deploy_result',
    'format_deploy_error',
    'format_table',
    'print_error',
    'print_warning',
]
