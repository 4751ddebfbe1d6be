"""Execution statuses and status details."""

from dataclasses import dataclass
from enum import Enum


class Status(str, Enum):
    """Status of a test or a step."""

    PASSED = "passed"
    FAILED = "failed"
    SKIPPED = "skipped"
    BROKEN = "broken"
    UNKNOWN = "unknown"

    def __str__(self) -> str:
        return self.value


@dataclass
class StatusDetail:
    """Short message and full trace describing a status."""

    message: str = ""
    trace: str = ""

    def to_dict(self) -> dict:
        return {"message": self.message, "trace": self.trace}