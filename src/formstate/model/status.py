"""Submission status values and the read-only submit snapshot."""

from dataclasses import dataclass
from enum import Enum


class SubmissionStatus(Enum):
    """Lifecycle stage of the current or most recent submission."""

    IDLE = "idle"
    LOADING = "loading"  # Callback in flight
    SUCCESS = "success"
    ERROR = "error"  # Callback raised


@dataclass(frozen=True)
class SubmitStates:
    """Snapshot of the submission state with derived booleans."""

    status: SubmissionStatus
    error: BaseException | None = None  # Set only while status is ERROR

    @property
    def is_loading(self) -> bool:
        return self.status is SubmissionStatus.LOADING

    @property
    def is_success(self) -> bool:
        return self.status is SubmissionStatus.SUCCESS

    @property
    def is_error(self) -> bool:
        return self.status is SubmissionStatus.ERROR
