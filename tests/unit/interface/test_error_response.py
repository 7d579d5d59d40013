"""Tests for mapping expected failures onto HTTP responses."""

import json

import pytest

from penpal.adapter.error import (
    RemoteRequestFailed,
    RemoteResponseInvalid,
    RemoteServiceUnavailable,
    RemoteServiceUnconfigured,
)
from penpal.domain.error import NotFoundError, PreconditionFailedError, ValidationError
from penpal.interface.error import error_response


def _body(response) -> dict:
    return json.loads(response.body)


@pytest.mark.parametrize(
    "error, status_code",
    [
        (RemoteServiceUnconfigured(["MEWE__API_KEY"]), 503),
        (RemoteServiceUnavailable("connection refused"), 502),
        (RemoteResponseInvalid("not JSON"), 502),
        (NotFoundError("Letter", "abc"), 404),
        (PreconditionFailedError("must link account first"), 409),
        (ValidationError("MeWe token exchange returned no token"), 400),
    ],
)
def test_status_codes(error, status_code):
    assert error_response(error).status_code == status_code


def test_remote_failure_carries_remote_status_and_body():
    # Arrange
    error = RemoteRequestFailed(status=401, body="token revoked", operation="followed")

    # Act
    response = error_response(error)

    # Assert
    assert response.status_code == 502
    body = _body(response)
    assert body["remote_status"] == 401
    assert body["remote_body"] == "token revoked"


def test_precondition_message_is_the_detail():
    response = error_response(PreconditionFailedError("must link account first"))

    assert _body(response) == {"detail": "must link account first"}


def test_unconfigured_detail_does_not_leak_setting_names():
    response = error_response(RemoteServiceUnconfigured(["MEWE__API_KEY"]))

    assert _body(response) == {"detail": "MeWe integration is not configured"}
