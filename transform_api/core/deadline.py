"""
Request deadline token - lets a long pipeline stop between steps.
"""

import time
from dataclasses import dataclass

from transform_api.core.errors import DeadlineExceeded


@dataclass(frozen=True)
class Deadline:
    """Absolute point on the monotonic clock after which work must stop."""

    expires_at: float

    @classmethod
    def after(cls, seconds: float) -> "Deadline":
        return cls(time.monotonic() + seconds)

    @classmethod
    def from_timeout(cls, seconds: float | None) -> "Deadline | None":
        """None when no timeout is configured."""
        if seconds is None:
            return None
        return cls.after(seconds)

    def check(self, step: str) -> None:
        """Raise DeadlineExceeded if the deadline has passed before `step`."""
        if time.monotonic() >= self.expires_at:
            raise DeadlineExceeded(step)


def check_deadline(deadline: Deadline | None, step: str) -> None:
    if deadline is not None:
        deadline.check(step)
