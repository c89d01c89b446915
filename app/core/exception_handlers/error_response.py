from fastapi.responses import JSONResponse
from app.lib.error_code import ErrorCode


def error_response(status_code: int, error_code: ErrorCode, detail: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error_code": error_code.value, "detail": detail},
    )
