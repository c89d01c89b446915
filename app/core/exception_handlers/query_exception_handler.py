import logging
from fastapi import Request
from fastapi.responses import JSONResponse

from app.core.exception_handlers.error_response import error_response
from app.lib.exception.query_errors import (
    NotFoundError,
    QueryError,
    StorageError,
    ValidationError,
)

logger = logging.getLogger(__name__)

STATUS_CODES: dict[type[QueryError], int] = {
    ValidationError: 400,
    NotFoundError: 404,
    StorageError: 500,
}


def status_code_for(exc: QueryError) -> int:
    for cls in type(exc).__mro__:
        if cls in STATUS_CODES:
            return STATUS_CODES[cls]
    return 500


async def query_exception_handler(request: Request, exc: QueryError) -> JSONResponse:
    status_code = status_code_for(exc)
    if status_code >= 500:
        # cause was logged where the error was raised
        logger.error(
            "%s %s failed: %s", request.method, request.url.path, exc.error_code.value
        )
    else:
        logger.warning("%s %s: %s", request.method, request.url.path, exc.detail)
    return error_response(status_code, exc.error_code, exc.detail)
