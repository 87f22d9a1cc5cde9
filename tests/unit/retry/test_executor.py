"""
Unit tests for RetryExecutor.

Operations are AsyncMocks with scripted side effects; sleeps are recorded
rather than awaited.
"""

from unittest.mock import AsyncMock, Mock

import pytest

from ollama_gateway.exceptions import (
    BackendTimeoutError,
    ProtocolError,
    TransientIOError,
    ValidationError,
)
import ollama_gateway.retry.executor as executor_module
from ollama_gateway.retry.executor import RetryExecutor
from ollama_gateway.retry.policy import RetryPolicy
from stubs import RecordingSleep


def transient(code: int = 503) -> TransientIOError:
    return TransientIOError(f"HTTP error code: {code}", status_code=code)


# ============================================================================
# Success Scenarios
# ============================================================================


@pytest.mark.asyncio
async def test_success_first_attempt(executor, recording_sleep):
    """Immediate success: one call, no waiting."""
    operation = AsyncMock(return_value="Hi there")

    result = await executor.execute(operation)

    assert result == "Hi there"
    assert operation.await_count == 1
    assert recording_sleep.calls == []


@pytest.mark.asyncio
async def test_success_after_transient_failures(executor, recording_sleep):
    """Two transient failures then success on the last allowed attempt."""
    operation = AsyncMock(side_effect=[transient(), transient(), "Hi there"])

    result = await executor.execute(operation)

    assert result == "Hi there"
    assert operation.await_count == 3
    assert recording_sleep.calls == [1.0, 2.0]


# ============================================================================
# Exhaustion
# ============================================================================


@pytest.mark.asyncio
async def test_exhaustion_propagates_last_error(executor, recording_sleep):
    """Always transient: exactly max_attempts calls, last error re-raised."""
    errors = [transient(500), transient(502), transient(503)]
    operation = AsyncMock(side_effect=errors)

    with pytest.raises(TransientIOError) as exc_info:
        await executor.execute(operation)

    assert exc_info.value is errors[-1]
    assert operation.await_count == 3
    assert recording_sleep.calls == [1.0, 2.0]


@pytest.mark.asyncio
async def test_timeout_subclass_is_retried(executor, recording_sleep):
    operation = AsyncMock(side_effect=BackendTimeoutError("Request timeout after 5s"))

    with pytest.raises(BackendTimeoutError):
        await executor.execute(operation)

    assert operation.await_count == 3


@pytest.mark.asyncio
async def test_backoff_sequence_clamped_to_max_delay(recording_sleep):
    """Running delay compounds and each wait is clamped to max_delay."""
    executor = RetryExecutor(sleep=recording_sleep)
    policy = RetryPolicy(max_attempts=6, initial_delay=1.0, multiplier=3.0, max_delay=10.0)
    operation = AsyncMock(side_effect=transient())

    with pytest.raises(TransientIOError):
        await executor.execute(operation, policy)

    assert operation.await_count == 6
    assert recording_sleep.calls == [1.0, 3.0, 9.0, 10.0, 10.0]
    assert all(d <= policy.max_delay for d in recording_sleep.calls)


@pytest.mark.asyncio
async def test_single_attempt_policy_never_sleeps(executor, recording_sleep):
    operation = AsyncMock(side_effect=transient())

    with pytest.raises(TransientIOError):
        await executor.execute(operation, RetryPolicy(max_attempts=1))

    assert operation.await_count == 1
    assert recording_sleep.calls == []


# ============================================================================
# Non-retryable errors
# ============================================================================


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "error",
    [
        ProtocolError("Invalid response format from Ollama API"),
        ValidationError("Prompt cannot be empty or null"),
        RuntimeError("unexpected"),
    ],
)
async def test_non_retryable_error_propagates_immediately(executor, recording_sleep, error):
    operation = AsyncMock(side_effect=error)

    with pytest.raises(type(error)) as exc_info:
        await executor.execute(operation)

    assert exc_info.value is error
    assert operation.await_count == 1
    assert recording_sleep.calls == []


@pytest.mark.asyncio
async def test_protocol_error_after_transient_stops_retrying(executor, recording_sleep):
    """A ProtocolError mid-sequence ends the loop without consuming attempts."""
    operation = AsyncMock(side_effect=[transient(), ProtocolError("Invalid response format")])

    with pytest.raises(ProtocolError):
        await executor.execute(operation)

    assert operation.await_count == 2
    assert recording_sleep.calls == [1.0]


# ============================================================================
# Configuration
# ============================================================================


@pytest.mark.asyncio
async def test_custom_retryable_types():
    """The executor is generic: retryable set is configurable."""
    sleep = RecordingSleep()
    executor = RetryExecutor(
        policy=RetryPolicy(max_attempts=2, initial_delay=0.5),
        retry_on=(KeyError,),
        sleep=sleep,
    )
    operation = AsyncMock(side_effect=[KeyError("x"), 42])

    assert await executor.execute(operation) == 42
    assert sleep.calls == [0.5]


@pytest.mark.asyncio
async def test_policy_argument_overrides_default(recording_sleep):
    executor = RetryExecutor(policy=RetryPolicy(max_attempts=5), sleep=recording_sleep)
    operation = AsyncMock(side_effect=transient())

    with pytest.raises(TransientIOError):
        await executor.execute(operation, RetryPolicy(max_attempts=2))

    assert operation.await_count == 2


@pytest.mark.asyncio
async def test_each_execute_starts_fresh(executor, recording_sleep):
    """Delay state is per call, not shared across executions."""
    await executor.execute(AsyncMock(side_effect=[transient(), "a"]))
    await executor.execute(AsyncMock(side_effect=[transient(), "b"]))

    assert recording_sleep.calls == [1.0, 1.0]


@pytest.mark.asyncio
async def test_retry_warning_uses_constant_event(monkeypatch, executor):
    """Attempt details travel as fields; the event name stays constant."""
    logger = Mock()
    monkeypatch.setattr(executor_module, "logger", logger)
    operation = AsyncMock(side_effect=[transient(), transient(), "ok"])

    await executor.execute(operation)

    assert logger.warning.call_count == 2
    for call, (attempt, delay) in zip(logger.warning.call_args_list, [(1, 1.0), (2, 2.0)]):
        assert call.args == ("Attempt failed, retrying",)
        assert call.kwargs["attempt"] == attempt
        assert call.kwargs["max_attempts"] == 3
        assert call.kwargs["backoff_seconds"] == delay
