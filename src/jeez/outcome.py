"""Step outcomes consumed by the pipeline."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class StepStatus(Enum):
    SUCCESS = "success"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(frozen=True)
class StepOutcome:
    """Result of one pipeline step: Success, Skipped or Failed(reason)."""

    status: StepStatus
    reason: Optional[str] = None

    @classmethod
    def success(cls):
        return cls(StepStatus.SUCCESS)

    @classmethod
    def skipped(cls, reason=None):
        return cls(StepStatus.SKIPPED, reason)

    @classmethod
    def failed(cls, reason):
        return cls(StepStatus.FAILED, str(reason))

    @property
    def is_success(self) -> bool:
        return self.status is StepStatus.SUCCESS

    @property
    def is_skipped(self) -> bool:
        return self.status is StepStatus.SKIPPED

    @property
    def is_failure(self) -> bool:
        return self.status is StepStatus.FAILED
