from app.lib.error_code import ErrorCode


class QueryError(Exception):
    """Base class for errors raised while reading bridge transactions.

    Carries no transport knowledge; the HTTP layer maps each subclass to a
    status code.
    """

    error_code: ErrorCode = ErrorCode.INTERNAL_SERVER_ERROR
    default_detail: str = "Internal server error."

    def __init__(self, detail: str | None = None):
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class ValidationError(QueryError):
    error_code = ErrorCode.VALIDATION_ERROR
    default_detail = "Invalid query parameters."


class NotFoundError(QueryError):
    error_code = ErrorCode.NOT_FOUND
    default_detail = "Resource not found."


class StorageError(QueryError):
    """Connection, execution or row decoding failure.

    The detail is safe to return to clients; the cause is chained and logged
    where it is raised.
    """

    error_code = ErrorCode.STORAGE_ERROR
    default_detail = "Failed to read from storage."
