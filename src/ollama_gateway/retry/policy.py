"""
Retry policy value.

A RetryPolicy describes how many times an operation may run and how long to
wait between runs. It is immutable and shared by all concurrent callers.
"""

from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class RetryPolicy:
    """
    Bounded attempts with exponential backoff.
    
    The wait before the first retry is `initial_delay`; each following wait is
    the previous one times `multiplier`. Every wait is clamped to `max_delay`.
    
    Attributes:
        max_attempts: Total attempts including the first one (>= 1)
        initial_delay: Seconds to wait before the first retry (>= 0)
        multiplier: Growth factor between consecutive waits (> 1)
        max_delay: Upper bound for any single wait, in seconds (>= 0)
    """

    max_attempts: int = 3
    initial_delay: float = 1.0
    multiplier: float = 2.0
    max_delay: float = 10.0

    def __post_init__(self) -> None:
        """Validate policy invariants."""
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be >= 1")
        
        if self.initial_delay < 0:
            raise ValueError("initial_delay must be >= 0")
        
        if self.multiplier <= 1:
            raise ValueError("multiplier must be > 1")
        
        if self.max_delay < 0:
            raise ValueError("max_delay must be >= 0")

    def delays(self) -> Iterator[float]:
        """
        Yield the waits between consecutive attempts.
        
        Produces `max_attempts - 1` values; with the defaults: 1.0, 2.0.
        """
        delay = self.initial_delay
        for _ in range(self.max_attempts - 1):
            yield min(delay, self.max_delay)
            delay = min(delay * self.multiplier, self.max_delay)


DEFAULT_RETRY_POLICY = RetryPolicy()
