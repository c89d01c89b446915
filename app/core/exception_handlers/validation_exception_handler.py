from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.exception_handlers.error_response import error_response
from app.lib.error_code import ErrorCode
from app.lib.utils.format_validation_errors import format_validation_errors


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return error_response(
        422, ErrorCode.VALIDATION_ERROR, format_validation_errors(exc.errors())
    )
