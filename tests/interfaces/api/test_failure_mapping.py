"""Tests for translating delivery failures into HTTP errors."""

from __future__ import annotations

import warnings

import pytest
from fastapi import HTTPException

from app.domain.entities import DeliveryOutcome, ErrorKind
from app.interfaces.api.dependencies import raise_for_failure


@pytest.mark.parametrize(
    ("kind", "status_code"),
    [
        (ErrorKind.VALIDATION, 422),
        (ErrorKind.UNAUTHORIZED, 401),
        (ErrorKind.NOT_FOUND, 404),
        (ErrorKind.PERSISTENCE, 503),
        (ErrorKind.DELIVERY, 502),
    ],
)
def test_failure_kinds_map_to_http_status(kind: ErrorKind, status_code: int) -> None:
    with warnings.catch_warnings():
        warnings.simplefilter("error", DeprecationWarning)
        with pytest.raises(HTTPException) as exc_info:
            raise_for_failure(DeliveryOutcome.failure(kind, "detail"))

    assert exc_info.value.status_code == status_code
    assert exc_info.value.detail == "detail"


def test_unauthorized_failures_ask_for_a_bearer_token() -> None:
    with pytest.raises(HTTPException) as exc_info:
        raise_for_failure(DeliveryOutcome.failure(ErrorKind.UNAUTHORIZED, "nope"))

    assert exc_info.value.headers == {"WWW-Authenticate": "Bearer"}


def test_successful_outcome_passes_through() -> None:
    raise_for_failure(DeliveryOutcome.success("ok"))
