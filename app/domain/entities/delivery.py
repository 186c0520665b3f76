"""Outcome types returned by realtime delivery operations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Categories of failures a delivery operation can report."""

    VALIDATION = "validation"
    UNAUTHORIZED = "unauthorized"
    PERSISTENCE = "persistence"
    DELIVERY = "delivery"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class DeliveryFailure:
    """Reason a delivery operation did not complete."""

    kind: ErrorKind
    detail: str


@dataclass(frozen=True)
class DeliveryOutcome(Generic[T]):
    """Either the value produced by an operation or the failure that stopped it."""

    value: T | None = None
    error: DeliveryFailure | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T | None = None) -> "DeliveryOutcome[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, kind: ErrorKind, detail: str) -> "DeliveryOutcome[T]":
        return cls(error=DeliveryFailure(kind=kind, detail=detail))


__all__ = ["DeliveryFailure", "DeliveryOutcome", "ErrorKind"]
