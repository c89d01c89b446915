from typing import Any, Mapping, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic import ValidationError as PydanticValidationError

from app.core.config import settings
from app.lib.exception.query_errors import ValidationError
from app.lib.utils.format_validation_errors import format_validation_errors

# Largest OFFSET PostgreSQL accepts (bigint).
MAX_OFFSET = 2**63 - 1


class BridgeTransactionSearchParams(BaseModel):
    sender: Optional[str] = Field(None, alias="from")
    receiver: Optional[str] = Field(None, alias="to")
    page: int = 1
    page_size: int = Field(settings.DEFAULT_PAGE_SIZE, alias="pageSize")

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @field_validator("sender", "receiver", mode="before")
    @classmethod
    def _blank_to_none(cls, v: Any) -> Any:
        # "?from=" must not turn into `sender = ''`
        if isinstance(v, str):
            v = v.strip()
            return v or None
        return v

    @field_validator("page")
    @classmethod
    def _check_page(cls, v: int) -> int:
        if v < 1:
            raise ValueError("page must be greater than or equal to 1")
        return v

    @field_validator("page_size")
    @classmethod
    def _check_page_size(cls, v: int) -> int:
        if v < 1 or v > settings.MAX_PAGE_SIZE:
            raise ValueError(
                f"pageSize must be between 1 and {settings.MAX_PAGE_SIZE}"
            )
        return v

    @model_validator(mode="after")
    def _check_offset(self) -> "BridgeTransactionSearchParams":
        if self.offset > MAX_OFFSET:
            raise ValueError("page is too large")
        return self

    @property
    def limit(self) -> int:
        return self.page_size

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size


def build_search_params(
    raw_params: Mapping[str, Any],
) -> BridgeTransactionSearchParams:
    """
    Validate raw listing parameters ("from", "to", "page", "pageSize").

    Absent (None) parameters take their defaults. Raises ValidationError
    instead of pydantic's error so callers only see the query error taxonomy.
    """
    present = {key: value for key, value in raw_params.items() if value is not None}
    try:
        return BridgeTransactionSearchParams.model_validate(present)
    except PydanticValidationError as e:
        raise ValidationError(format_validation_errors(e.errors())) from e
