"""Exponential backoff with jitter for retrying rate-limited requests."""

import random


class RateLimiter:
    """Bounded exponential backoff with jitter.

    One limiter tracks one logical request: ``backoff()`` is called per failed
    attempt and ``exhausted`` turns true once ``max_retries`` delays were handed out.
    """

    def __init__(
        self,
        initial_delay: float = 1.0,
        max_delay: float = 60.0,
        backoff_factor: float = 2.0,
        jitter_factor: float = 0.1,
        max_retries: int = 3,
    ):
        self.initial_delay = initial_delay
        self.max_delay = max_delay
        self.backoff_factor = backoff_factor
        self.jitter_factor = jitter_factor
        self.max_retries = max_retries
        self._delay = initial_delay
        self._attempts = 0

    @property
    def exhausted(self) -> bool:
        """Whether the retry budget is used up."""
        return self._attempts >= self.max_retries

    def backoff(self, retry_after: float | None = None) -> float:
        """Record a failed attempt and return the delay before the next one.

        Args:
            retry_after: Server-provided delay (Retry-After header) in seconds.
                Honored as a floor, still capped at ``max_delay``.

        Returns:
            Seconds to wait before the next attempt
        """
        self._attempts += 1
        self._delay = min(
            self._delay * self.backoff_factor,
            self.max_delay,
        )
        # Add jitter: +/- jitter_factor of the delay
        jitter = self._delay * self.jitter_factor * (2 * random.random() - 1)
        delay = self._delay + jitter
        if retry_after is not None:
            delay = min(max(delay, retry_after), self.max_delay)
        return delay
