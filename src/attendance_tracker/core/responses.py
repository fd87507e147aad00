from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterable, Optional, TypeVar

from .constants import ERROR_PREFIX

T = TypeVar("T")


@dataclass(frozen=True)
class ServiceResponse(Generic[T]):
    """Result envelope returned by every JSON-facing service operation.

    ``result`` is typed per call site (a record, a list of rows, an id ...),
    and is always ``None`` on failure.
    """

    is_success: bool
    message: str
    result: Optional[T] = None

    @classmethod
    def ok(cls, message: str, result: Optional[T] = None) -> "ServiceResponse[T]":
        return cls(is_success=True, message=message, result=result)

    @classmethod
    def fail(cls, message: str) -> "ServiceResponse[T]":
        return cls(is_success=False, message=message, result=None)

    @classmethod
    def from_exception(cls, exc: BaseException) -> "ServiceResponse[T]":
        return cls.fail(f"{ERROR_PREFIX}{exc}")

    @classmethod
    def invalid(cls, errors: Iterable[str]) -> "ServiceResponse[T]":
        return cls.fail(", ".join(errors))
