"""Operation result models"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional, Any


class OperationStatus(Enum):
    """Operation status"""
    SUCCESS = "success"
    FAILED = "failed"
    IN_PROGRESS = "in_progress"


class DeployStep(Enum):
    """Deployment steps, in execution order"""
    MATERIALIZE = "materialize"
    INITIALIZE = "initialize"
    RESOLVE_SERVICES = "resolve_services"
    STOP = "stop"
    SWAP = "swap"
    RELOAD = "reload"
    START = "start"


@dataclass
class InitResult:
    """Outcome of the work tree initialisation command"""

    command: Optional[str]
    returncode: int = 0
    output: str = ""

    @property
    def performed(self) -> bool:
        return self.command is not None

    @property
    def succeeded(self) -> bool:
        return self.returncode == 0


@dataclass
class DeployResult:
    """Result of one deployment transaction"""

    commit: str
    base: Path
    status: OperationStatus = OperationStatus.IN_PROGRESS
    version_dir: Optional[Path] = None
    previous_version: Optional[str] = None
    services: List[str] = field(default_factory=list)
    init: Optional[InitResult] = None
    completed_steps: List[DeployStep] = field(default_factory=list)
    start_time: datetime = field(default_factory=datetime.now)
    end_time: Optional[datetime] = None

    @property
    def is_success(self) -> bool:
        """Check if deployment was successful"""
        return self.status == OperationStatus.SUCCESS

    @property
    def duration(self) -> Optional[float]:
        """Get deployment duration in seconds"""
        if self.end_time:
            return (self.end_time - self.start_time).total_seconds()
        return None

    def mark_step(self, step: DeployStep) -> None:
        self.completed_steps.append(step)

    def complete(self, status: OperationStatus) -> None:
        """Mark deployment as finished"""
        self.end_time = datetime.now()
        self.status = status

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        data = {
            "commit": self.commit,
            "base": str(self.base),
            "status": self.status.value,
            "services": list(self.services),
            "completed_steps": [step.value for step in self.completed_steps],
            "duration": self.duration,
        }

        if self.version_dir:
            data["version_dir"] = str(self.version_dir)
        if self.previous_version:
            data["previous_version"] = self.previous_version
        if self.init and self.init.performed:
            data["init_command"] = self.init.command

        return data
