"""
Retry executor with exponential backoff.

Wraps a zero-argument async operation and re-runs it while it fails with a
retryable error, waiting between attempts according to a RetryPolicy. The
executor is generic: it knows nothing about HTTP or prompts, only which
exception types are worth another attempt.

Usage:
    executor = RetryExecutor(DEFAULT_RETRY_POLICY)
    result = await executor.execute(partial(client.send, request))
"""

import asyncio
import time
from typing import Awaitable, Callable, Optional, TypeVar

import structlog

from ollama_gateway.exceptions import TransientIOError
from ollama_gateway.monitoring.metrics import retries_total, retry_backoff_seconds
from ollama_gateway.retry.policy import DEFAULT_RETRY_POLICY, RetryPolicy

logger = structlog.get_logger(__name__)

T = TypeVar("T")

SleepFunc = Callable[[float], Awaitable[None]]


class RetryExecutor:
    """
    Bounded retry around a single fallible operation.

    State machine (attempt starts at 1):
        1. Await the operation; on success return immediately.
        2. Non-retryable error: propagate without further attempts.
        3. Retryable error on the last allowed attempt: propagate it.
        4. Otherwise sleep for the current delay, grow the delay, try again.

    The delay is a running value: it starts at `initial_delay` and is
    multiplied after every retry, each wait clamped to `max_delay`.

    Attributes:
        policy: Policy used when `execute()` is not given one
        retry_on: Exception types that trigger another attempt
    """

    def __init__(
        self,
        policy: RetryPolicy = DEFAULT_RETRY_POLICY,
        retry_on: tuple[type[BaseException], ...] = (TransientIOError,),
        sleep: SleepFunc = asyncio.sleep,
    ):
        """
        Initialize retry executor.

        Args:
            policy: Default retry policy
            retry_on: Retryable exception types
            sleep: Awaitable sleep, suspends only the calling task
        """
        self.policy = policy
        self.retry_on = retry_on
        self._sleep = sleep

        logger.info(
            "RetryExecutor initialized",
            max_attempts=policy.max_attempts,
            initial_delay=policy.initial_delay,
            multiplier=policy.multiplier,
            max_delay=policy.max_delay,
            retry_on=[exc.__name__ for exc in retry_on],
        )

    async def execute(
        self,
        operation: Callable[[], Awaitable[T]],
        policy: Optional[RetryPolicy] = None,
    ) -> T:
        """
        Run `operation` under the retry policy.

        Args:
            operation: Zero-argument callable returning an awaitable
            policy: Overrides the executor's default policy

        Returns:
            The operation's result from the first successful attempt

        Raises:
            The last error observed, once it is non-retryable or attempts
            are exhausted
        """
        policy = policy or self.policy
        delays = policy.delays()
        started = time.perf_counter()
        attempt = 1

        while True:
            try:
                result = await operation()

            except self.retry_on as e:
                if attempt >= policy.max_attempts:
                    logger.error(
                        "Retries exhausted",
                        attempts=attempt,
                        error_type=type(e).__name__,
                        error=str(e),
                        elapsed_ms=int((time.perf_counter() - started) * 1000),
                    )
                    raise

                delay = next(delays)
                logger.warning(
                    "Attempt failed, retrying",
                    attempt=attempt,
                    max_attempts=policy.max_attempts,
                    backoff_seconds=delay,
                    error_type=type(e).__name__,
                    error=str(e),
                )
                retries_total.labels(error_type=type(e).__name__).inc()
                retry_backoff_seconds.observe(delay)

                await self._sleep(delay)
                attempt += 1

            except Exception as e:
                logger.info(
                    "Non-retryable error, not retrying",
                    attempt=attempt,
                    error_type=type(e).__name__,
                )
                raise

            else:
                if attempt > 1:
                    logger.info(
                        "Operation succeeded after retry",
                        attempts=attempt,
                        elapsed_ms=int((time.perf_counter() - started) * 1000),
                    )
                return result
