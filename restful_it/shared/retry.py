"""Retry helpers for requests against flaky external APIs.

Only failures that look transient (no HTTP status, a 5xx status or a known
network error text) are retried. Everything else propagates on the first
attempt, unchanged.
"""

from __future__ import annotations

import enum
import math
import numbers
import re
import time
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional, TypeVar

from tenacity import AsyncRetrying, Retrying, retry_if_exception, stop_after_attempt, wait_fixed

T = TypeVar("T")

_TRANSIENT_NETWORK_PATTERN = re.compile(
    r"timeout|timed out"
    r"|ECONNREFUSED|connection refused"
    r"|ENOTFOUND|name or service not known|nodename nor servname|getaddrinfo failed"
    r"|EAI_AGAIN|temporary failure in name resolution",
    re.IGNORECASE,
)


class FailureKind(enum.Enum):
    TRANSIENT = "transient"
    NON_TRANSIENT = "non_transient"


@dataclass(frozen=True)
class RetryPolicy:
    """How many times to re-run an operation and how long to wait in between."""

    max_retries: int = 2
    delay_ms: int = 500

    def __post_init__(self) -> None:
        if self.max_retries < 0:
            raise ValueError(f"max_retries must be >= 0, got {self.max_retries}")
        if self.delay_ms < 0:
            raise ValueError(f"delay_ms must be >= 0, got {self.delay_ms}")

    @classmethod
    def from_options(
        cls, retries: Optional[int] = None, delay_ms: Optional[int] = None
    ) -> "RetryPolicy":
        """Build a policy from per-call options, ``None`` meaning the default."""

        default = cls()
        return cls(
            max_retries=default.max_retries if retries is None else retries,
            delay_ms=default.delay_ms if delay_ms is None else delay_ms,
        )

    @property
    def max_attempts(self) -> int:
        return self.max_retries + 1

    @property
    def delay_seconds(self) -> float:
        return self.delay_ms / 1000


def _probe(obj: Any, name: str) -> Any:
    try:
        return getattr(obj, name, None)
    except Exception:  # properties may raise on partially built objects
        return None


def _as_status(value: Any) -> Any:
    """Normalize a probed status; ``None`` means nothing usable was found.

    Falsy values (``None``, ``False``, ``0``, ``NaN``, ``""``) count as absent.
    Real numbers and numeric strings come back as numbers, integral ones as
    ``int``. Any other value is returned as is: it was found, it is just not
    a number.
    """

    if value is None or value is False:
        return None
    if value is True:
        return value
    if isinstance(value, numbers.Real):
        if math.isnan(value) or value == 0:
            return None
        if math.isfinite(value) and value == int(value):
            return int(value)
        return value
    if isinstance(value, str):
        if value == "":
            return None
        try:
            number = float(value)
        except ValueError:
            return value
        if not math.isfinite(number):
            return value
        return int(number) if number == int(number) else number
    return value


def _is_number(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def extract_status_code(error: Any) -> Any:
    """Return the HTTP status exposed by ``error``, if any.

    Precedence: ``error.response.status`` (or ``status_code``), then
    ``error.status``, then ``error.statusCode`` / ``error.status_code``.
    The first usable value wins even when it is not numeric.
    """

    response = _probe(error, "response")
    if response is not None:
        for name in ("status", "status_code"):
            status = _as_status(_probe(response, name))
            if status is not None:
                return status
    for name in ("status", "statusCode", "status_code"):
        status = _as_status(_probe(error, name))
        if status is not None:
            return status
    return None


def classify_failure(error: Any) -> FailureKind:
    """Classify ``error`` as transient (worth retrying) or not."""

    status = extract_status_code(error)
    if status is None or (_is_number(status) and 500 <= status < 600):
        return FailureKind.TRANSIENT
    if _TRANSIENT_NETWORK_PATTERN.search(str(error)):
        return FailureKind.TRANSIENT
    return FailureKind.NON_TRANSIENT


def is_transient(error: Any) -> bool:
    return classify_failure(error) is FailureKind.TRANSIENT


def _should_retry(error: BaseException) -> bool:
    # cancellation and interpreter exit are never retried
    return isinstance(error, Exception) and is_transient(error)


def _retry_kwargs(policy: RetryPolicy) -> dict[str, Any]:
    return {
        "retry": retry_if_exception(_should_retry),
        "stop": stop_after_attempt(policy.max_attempts),
        "wait": wait_fixed(policy.delay_seconds),
        "reraise": True,
    }


async def run_with_retry(
    operation: Callable[[], Awaitable[T]],
    policy: Optional[RetryPolicy] = None,
    *,
    sleep: Optional[Callable[[float], Awaitable[None]]] = None,
) -> T:
    """Await ``operation`` re-running it on transient failures.

    The exception raised by the last attempt propagates as is.
    """

    kwargs = _retry_kwargs(policy or RetryPolicy())
    if sleep is not None:
        kwargs["sleep"] = sleep
    retrying = AsyncRetrying(**kwargs)

    # tenacity awaits only coroutine functions, never callables that
    # merely return an awaitable
    async def _attempt() -> T:
        return await operation()

    return await retrying(_attempt)


def run_with_retry_sync(
    operation: Callable[[], T],
    policy: Optional[RetryPolicy] = None,
    *,
    sleep: Callable[[float], None] = time.sleep,
) -> T:
    """Blocking counterpart of :func:`run_with_retry`."""

    retrying = Retrying(sleep=sleep, **_retry_kwargs(policy or RetryPolicy()))
    return retrying(operation)


async def request_with_retry(
    operation: Callable[[], Awaitable[T]],
    *,
    retries: Optional[int] = None,
    delay_ms: Optional[int] = None,
) -> T:
    return await run_with_retry(operation, RetryPolicy.from_options(retries, delay_ms))
