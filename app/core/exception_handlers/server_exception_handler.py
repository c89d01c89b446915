import logging
from fastapi import Request
from fastapi.responses import JSONResponse

from app.core.exception_handlers.error_response import error_response
from app.lib.error_code import ErrorCode

logger = logging.getLogger(__name__)


async def server_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(
        "Unhandled %s on %s %s",
        type(exc).__name__,
        request.method,
        request.url.path,
    )
    return error_response(
        500, ErrorCode.INTERNAL_SERVER_ERROR, "Internal server error."
    )
