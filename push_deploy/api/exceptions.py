"""Exception definitions for push-deploy"""

from typing import List, Optional

from ..constants import ErrorCode


class DeployAgentError(Exception):
    """Base exception for push-deploy"""

    def __init__(self, message: str, error_code: str = None):
        super().__init__(message)
        self.error_code = error_code


class PreconditionError(DeployAgentError):
    """A deployment precondition does not hold"""

    def __init__(self, message: str, error_code: str = ErrorCode.PRECONDITION_FAILED):
        super().__init__(message, error_code)


class BaseNotFoundError(PreconditionError):
    """No deployment base above the working directory"""

    def __init__(self, start_path: str):
        message = (
            f"No deployment base found above {start_path}.\n"
            "A deployment base is a directory containing repo.git/.\n"
            "\n"
            "Initialize one with: push-deploy init"
        )
        super().__init__(message, ErrorCode.BASE_NOT_FOUND)
        self.start_path = start_path


class VersionExistsError(PreconditionError):
    """Version directory for a commit already exists"""

    def __init__(self, commit: str, path: str):
        message = f"Commit {commit} already deployed (or partially deployed): {path}"
        super().__init__(message, ErrorCode.VERSION_ALREADY_DEPLOYED)
        self.commit = commit
        self.path = path


class CheckoutError(DeployAgentError):
    """git checkout of a commit failed"""

    def __init__(self, commit: str, output: str = ""):
        message = f"Checkout of {commit} failed"
        if output:
            message = f"{message}: {output.strip()}"
        super().__init__(message, ErrorCode.CHECKOUT_FAILED)
        self.commit = commit
        self.output = output


class HookError(DeployAgentError):
    """Initialisation command exited nonzero"""

    def __init__(self, command: str, returncode: int, output: str = ""):
        message = f"Initialisation command `{command}` exited with status {returncode}"
        super().__init__(message, ErrorCode.HOOK_FAILED)
        self.command = command
        self.returncode = returncode
        self.output = output


class ServiceManagerError(DeployAgentError):
    """Service manager operation failed"""

    def __init__(self, command: List[str], output: Optional[str] = None):
        message = f"Service manager command failed: {' '.join(command)}"
        if output:
            message = f"{message}\n{output.strip()}"
        super().__init__(message, ErrorCode.SERVICE_MANAGER_FAILED)
        self.command = command
        self.output = output


class ConfigError(DeployAgentError):
    """Configuration error"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.CONFIG_FORMAT_ERROR)


class LockError(DeployAgentError):
    """Deployment lock is held by another run"""

    def __init__(self, lock_path: str):
        super().__init__(
            f"Another deployment holds {lock_path}",
            ErrorCode.LOCK_UNAVAILABLE
        )
        self.lock_path = lock_path
