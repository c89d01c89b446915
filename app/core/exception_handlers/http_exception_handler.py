from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.exception_handlers.error_response import error_response
from app.lib.error_code import ErrorCode

ERROR_CODES = {
    401: ErrorCode.UNAUTHORIZED,
    404: ErrorCode.NOT_FOUND,
    405: ErrorCode.METHOD_NOT_ALLOWED,
}


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    if exc.status_code >= 500:
        error_code = ErrorCode.INTERNAL_SERVER_ERROR
    else:
        error_code = ERROR_CODES.get(exc.status_code, ErrorCode.CLIENT_ERROR)
    response = error_response(exc.status_code, error_code, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response
