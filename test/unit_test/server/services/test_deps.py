"""
Unit tests for the Authorization header parsing used by the auth dependencies.
"""

import pytest
from fastapi import HTTPException

from dhivyuga.server.services.deps import _extract_bearer_token


@pytest.mark.parametrize("header", ["Bearer abc.def", "bearer abc.def", "  BEARER   abc.def  "])
def test_extracts_token(header):
    assert _extract_bearer_token(header) == "abc.def"


@pytest.mark.parametrize(
    "header,detail",
    [
        (None, "Missing Authorization header."),
        ("   ", "Missing Authorization header."),
        ("abc.def", "Invalid Authorization header format."),
        ("Basic abc.def", "Authorization must be: Bearer <token>."),
    ],
)
def test_rejects_malformed_header(header, detail):
    with pytest.raises(HTTPException) as exc_info:
        _extract_bearer_token(header)
    assert exc_info.value.status_code == 401
    assert exc_info.value.detail == detail
