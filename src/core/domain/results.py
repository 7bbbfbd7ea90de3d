"""Result values returned by the HTTP adapters.

Adapters never raise for network or protocol failures. Instead every call
returns an `ApiResult` carrying either the value or the kind of failure,
so each caller decides whether to ignore, propagate or report it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Failure categories for a remote call."""

    TRANSPORT = "transport"
    PROTOCOL = "protocol"


@dataclass(frozen=True)
class ApiResult(Generic[T]):
    """Outcome of one remote call.

    `value` always holds something usable: the decoded payload on success,
    the operation's default (empty list, empty string, ...) on failure.
    """

    value: T
    error: ErrorKind | None = None
    detail: str | None = None
    status_code: int | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T, *, status_code: int | None = None) -> "ApiResult[T]":
        return cls(value=value, status_code=status_code)

    @classmethod
    def failure(
        cls,
        default: T,
        kind: ErrorKind,
        detail: str,
        *,
        status_code: int | None = None,
    ) -> "ApiResult[T]":
        return cls(value=default, error=kind, detail=detail, status_code=status_code)
