"""Errors raised by the request layer.

Every error carries the HTTP status it observed (``None`` when no response
arrived) so :func:`restful_it.shared.retry.classify_failure` can decide on
retries without inspecting message text first.
"""

from __future__ import annotations

from typing import Optional

import httpx


class ApiError(Exception):
    """Base class for failures talking to the objects API."""

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        response: Optional[httpx.Response] = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.response = response


class TransportError(ApiError):
    """The request never produced a response (timeout, refused, DNS...)."""


class ExpectationError(ApiError, AssertionError):
    """A response was received but did not satisfy an expectation."""

    def __init__(self, message: str, *, response: httpx.Response) -> None:
        super().__init__(message, status_code=response.status_code, response=response)
