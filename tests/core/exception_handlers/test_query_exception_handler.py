import pytest

from app.core.exception_handlers.query_exception_handler import status_code_for
from app.lib.error_code import ErrorCode
from app.lib.exception.query_errors import (
    NotFoundError,
    QueryError,
    StorageError,
    ValidationError,
)


@pytest.mark.parametrize(
    "exc, status_code, error_code",
    [
        (ValidationError(), 400, ErrorCode.VALIDATION_ERROR),
        (NotFoundError(), 404, ErrorCode.NOT_FOUND),
        (StorageError(), 500, ErrorCode.STORAGE_ERROR),
        (QueryError(), 500, ErrorCode.INTERNAL_SERVER_ERROR),
    ],
)
def test_status_code_for(exc, status_code, error_code):
    assert status_code_for(exc) == status_code
    assert exc.error_code == error_code


def test_subclasses_inherit_the_mapping():
    class RowDecodeError(StorageError):
        pass

    assert status_code_for(RowDecodeError()) == 500


def test_detail_defaults_and_overrides():
    assert NotFoundError().detail == "Resource not found."
    assert NotFoundError("gone").detail == "gone"
    assert str(NotFoundError("gone")) == "gone"
