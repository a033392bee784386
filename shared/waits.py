"""Condition-based waiting shared by page objects and suite fixtures."""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import TypeVar

T = TypeVar("T")


class WaitTimeoutError(AssertionError):
    """Raised when a polled condition does not hold within its budget.

    Subclasses ``AssertionError`` so pytest reports it as a test failure
    at the call site rather than as an error in the harness.
    """

    def __init__(self, description: str, timeout_ms: int):
        self.description = description
        self.timeout_ms = timeout_ms
        super().__init__(f"Timed out after {timeout_ms}ms waiting for {description}")


def _sleep_ms(milliseconds: float) -> None:
    time.sleep(milliseconds / 1000)


def wait_until(
    predicate: Callable[[], T],
    timeout_ms: int,
    interval_ms: int = 100,
    description: str = "condition",
    sleep: Callable[[float], None] | None = None,
    clock: Callable[[], float] = time.monotonic,
) -> T:
    """
    Poll ``predicate`` until it returns a truthy value.

    The predicate is always evaluated at least once, and once more after
    the deadline passes so a condition that becomes true during the last
    sleep is not reported as a timeout.

    Args:
        predicate: Zero-argument callable; its truthy result is returned.
        timeout_ms: Upper bound on the total wait, in milliseconds.
        interval_ms: Delay between polls, in milliseconds.
        description: Human-readable name used in the timeout message.
        sleep: Callable taking milliseconds. Page objects pass
            ``page.wait_for_timeout`` so the browser keeps dispatching
            events while we poll.
        clock: Monotonic clock in seconds.

    Returns:
        The first truthy value produced by ``predicate``.

    Raises:
        WaitTimeoutError: If the predicate stays falsy past the deadline.
    """
    sleep = sleep or _sleep_ms
    deadline = clock() + timeout_ms / 1000
    while True:
        result = predicate()
        if result:
            return result
        remaining_ms = (deadline - clock()) * 1000
        if remaining_ms <= 0:
            break
        sleep(min(interval_ms, remaining_ms))

    result = predicate()
    if result:
        return result
    raise WaitTimeoutError(description, timeout_ms)
