import json

import pytest
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.requests import Request

from app.core.exception_handlers.http_exception_handler import http_exception_handler


def make_request() -> Request:
    return Request({"type": "http", "method": "GET", "path": "/", "headers": []})


@pytest.mark.parametrize(
    "status_code, error_code",
    [
        (401, "unauthorized"),
        (404, "not_found"),
        (405, "method_not_allowed"),
        (403, "client_error"),
        (409, "client_error"),
        (503, "internal_server_error"),
    ],
)
async def test_error_code_for_status(status_code, error_code):
    response = await http_exception_handler(
        make_request(), StarletteHTTPException(status_code, detail="nope")
    )

    assert response.status_code == status_code
    assert json.loads(response.body) == {"error_code": error_code, "detail": "nope"}


async def test_unknown_route_is_not_found(async_client):
    response = await async_client.get("/no_such_route")

    assert response.status_code == 404
    assert response.json()["error_code"] == "not_found"


async def test_wrong_method_is_method_not_allowed(async_client):
    response = await async_client.post("/bridge_transactions/by_hash")

    assert response.status_code == 405
    assert response.json()["error_code"] == "method_not_allowed"
