"""
Time budget of one correction call.

.. autoclass:: Deadline
    :members:
"""

from __future__ import annotations

import time

from dataclasses import dataclass, field
from typing import Callable


Clock = Callable[[], float]


@dataclass(frozen=True)
class Deadline:
    """
    Absolute point in time (in ``clock`` seconds) after which the search should stop. It is created
    once per call and passed as is into every nested edit generation, never changed. ``clock``
    is ``time.monotonic`` by default, so once the deadline is expired, it stays expired.

    Checks are advisory: algorithms look at the deadline only between batches of candidates, so
    the actual call might take somewhat longer than the timeout.
    """

    #: Moment (in ``clock`` seconds) the deadline expires at
    at: float
    clock: Clock = field(default=time.monotonic, compare=False, repr=False)

    @classmethod
    def after(cls, timeout: int, *, clock: Clock = time.monotonic) -> Deadline:
        """
        Args:
            timeout: Milliseconds from now; negative timeouts are treated as zero
        """
        return cls(clock() + max(timeout, 0) / 1000, clock)

    def expired(self) -> bool:
        return self.clock() >= self.at

