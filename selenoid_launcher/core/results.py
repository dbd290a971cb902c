"""
Lifecycle step result models.

Every runtime invocation made by the controller is recorded as a StepResult so
callers can tell a clean step from one that failed and was absorbed.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class StepStatus(str, Enum):
    OK = "ok"
    DEGRADED = "degraded"
    FATAL = "fatal"


class StepResult(BaseModel):
    """Outcome of a single lifecycle step."""

    step: str
    status: StepStatus = StepStatus.OK
    output: str = ""
    error: Optional[str] = None
    skipped: bool = False

    @property
    def ok(self) -> bool:
        return self.status == StepStatus.OK

    @classmethod
    def success(cls, step: str, output: str = "", skipped: bool = False) -> "StepResult":
        return cls(step=step, output=output.strip(), skipped=skipped)

    @classmethod
    def degraded(cls, step: str, error: str) -> "StepResult":
        return cls(step=step, status=StepStatus.DEGRADED, error=error)

    @classmethod
    def fatal(cls, step: str, error: str) -> "StepResult":
        return cls(step=step, status=StepStatus.FATAL, error=error)


class LifecycleReport(BaseModel):
    """
    Ordered record of the steps taken by one prepare/complete call.

    Fatal steps never appear here; they are raised as SevereServiceError.
    """

    phase: str
    steps: List[StepResult] = Field(default_factory=list)

    def add(self, result: StepResult) -> StepResult:
        self.steps.append(result)
        return result

    @property
    def ok(self) -> bool:
        return all(step.ok for step in self.steps)

    @property
    def degraded(self) -> bool:
        return not self.ok

    @property
    def failed_steps(self) -> List[StepResult]:
        return [step for step in self.steps if not step.ok]

    @property
    def pulled(self) -> List[str]:
        """Images actually transferred during this call."""
        return [
            step.step.split(":", 1)[1]
            for step in self.steps
            if step.step.startswith("pull:") and step.ok and not step.skipped
        ]
