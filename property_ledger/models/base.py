"""Base models shared across the registry."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Generic, TypeVar

from property_ledger.exceptions import OperationRejectedError
from property_ledger.models.enums import ErrorCode

T = TypeVar("T")


@dataclass
class Event:
    """Standard event envelope for the registry journal."""

    event_id: str
    event_type: str  # entity.action (e.g., property.registered)
    event_time: datetime
    source: str  # Principal that triggered the event
    subject: str  # Entity ID affected
    data: dict
    metadata: dict = field(default_factory=dict)


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of a registry operation.

    ``value`` holds the payload when ``ok`` is true and the rejecting
    ``ErrorCode`` otherwise.
    """

    ok: bool
    value: Any

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, code: ErrorCode) -> "Result[T]":
        return cls(ok=False, value=code)

    @property
    def error(self) -> ErrorCode | None:
        return None if self.ok else self.value

    def unwrap(self) -> T:
        """Return the payload, raising if the operation was rejected."""
        if not self.ok:
            raise OperationRejectedError(self.value)
        return self.value
