"""Deployment base decorator for CLI commands"""

from functools import wraps
from typing import Callable

import click

from ..utils.output import print_error
from ...api.exceptions import BaseNotFoundError
from ...core.path_resolver import PathResolver


def require_base(func: Callable) -> Callable:
    """Decorator that ensures command runs inside a deployment base

    The resolver is stored on the context object as ``path_resolver``.

    Args:
        func: Command function to decorate

    Returns:
        Decorated function
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        ctx = click.get_current_context()
        obj = ctx.find_object(Context)

        try:
            obj.path_resolver = PathResolver.discover(obj.directory)
        except BaseNotFoundError as e:
            print_error(str(e))
            ctx.exit(1)

        return func(*args, **kwargs)

    return wrapper


class Context:
    """CLI context object"""

    def __init__(self, directory=None, verbose: bool = False, debug: bool = False):
        self.directory = directory
        self.verbose = verbose
        self.debug = debug
        self.path_resolver = None
