from fastapi import FastAPI
from app.v1.routers import api as api_router
from app.core.config import settings

from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from scalar_fastapi import get_scalar_api_reference
from fastapi.responses import HTMLResponse

from app.lib.exception.query_errors import QueryError
from app.core.exception_handlers.http_exception_handler import http_exception_handler
from app.core.exception_handlers.query_exception_handler import (
    query_exception_handler,
)
from app.core.exception_handlers.server_exception_handler import (
    server_exception_handler,
)
from app.core.exception_handlers.validation_exception_handler import (
    validation_exception_handler,
)

v1_app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Version 1 of the BridgeScan API",
    version="1.0.0",
)

v1_app.include_router(api_router.api_router)

v1_app.add_exception_handler(StarletteHTTPException, http_exception_handler)  # type: ignore
v1_app.add_exception_handler(Exception, server_exception_handler)  # type: ignore
v1_app.add_exception_handler(
    RequestValidationError, validation_exception_handler  # type: ignore
)

v1_app.add_exception_handler(QueryError, query_exception_handler)  # type: ignore


@v1_app.get("/scalar", include_in_schema=False, response_class=HTMLResponse)
async def scalar_docs():
    return get_scalar_api_reference(
        openapi_url=f"/app/v1{v1_app.openapi_url}",
        title="BridgeScan Scalar API",
        scalar_proxy_url="https://proxy.scalar.com",
    )
