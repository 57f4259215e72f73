#!/usr/bin/env python3
# ABOUTME: Retry orchestration with capped exponential backoff.
# ABOUTME: Retries rate-limit and quota failures; everything else propagates at once.

import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional, TypeVar

from tenacity import (
    RetryCallState,
    Retrying,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from translingo.classifier import is_retryable

logger = logging.getLogger(__name__)

T = TypeVar("T")

MAX_RETRIES = 5
INITIAL_RETRY_DELAY = 1.0  # seconds
MAX_RETRY_DELAY = 32.0  # seconds

RetryObserver = Callable[[float, int, int], None]


@dataclass(frozen=True)
class RetryPolicy:
    """Backoff settings for one translate call.

    Attributes:
        max_retries: Retries allowed after the first attempt
        initial_delay: Wait before the first retry, in seconds
        max_delay: Upper bound on any single wait, in seconds
        multiplier: Factor applied to the wait after each retry
    """

    max_retries: int = MAX_RETRIES
    initial_delay: float = INITIAL_RETRY_DELAY
    max_delay: float = MAX_RETRY_DELAY
    multiplier: float = 2.0

    @property
    def max_attempts(self) -> int:
        return self.max_retries + 1


@dataclass(frozen=True)
class RetryState:
    """Progress of a single call: retries made so far and the pending wait."""

    attempts_made: int
    current_delay: float

    @classmethod
    def from_call_state(cls, call_state: RetryCallState) -> "RetryState":
        return cls(
            attempts_made=call_state.attempt_number,
            current_delay=call_state.next_action.sleep if call_state.next_action else 0.0,
        )


def call_with_retry(
    func: Callable[[], T],
    policy: Optional[RetryPolicy] = None,
    on_retry: Optional[RetryObserver] = None,
    sleep: Callable[[float], None] = time.sleep,
) -> T:
    """Call ``func`` until it succeeds, fails terminally, or retries run out.

    Retryable failures (see ``translingo.classifier``) are retried after
    waits of 1, 2, 4, 8 and 16 seconds with the default policy. Terminal
    failures, and the last retryable failure once the budget is spent, are
    re-raised unchanged.

    Args:
        func: Zero-argument callable performing one attempt
        policy: Backoff settings (defaults to ``RetryPolicy()``)
        on_retry: Observer called as ``on_retry(delay, attempt, max_retries)``
            before each wait
        sleep: Blocking wait function, injectable for tests

    Returns:
        Whatever ``func`` returns on its first successful attempt
    """
    policy = policy or RetryPolicy()

    def before_sleep(call_state: RetryCallState) -> None:
        state = RetryState.from_call_state(call_state)
        logger.debug(
            "Retryable failure on attempt %d: %s",
            state.attempts_made,
            call_state.outcome.exception(),
        )
        if on_retry is not None:
            on_retry(state.current_delay, state.attempts_made, policy.max_retries)

    retrying = Retrying(
        stop=stop_after_attempt(policy.max_attempts),
        wait=wait_exponential(
            multiplier=policy.initial_delay,
            exp_base=policy.multiplier,
            max=policy.max_delay,
        ),
        retry=retry_if_exception(is_retryable),
        before_sleep=before_sleep,
        sleep=sleep,
        reraise=True,
    )
    return retrying(func)
