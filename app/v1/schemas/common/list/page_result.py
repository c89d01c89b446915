from typing import Generic, List, TypeVar
from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class PageResult(BaseModel, Generic[T]):
    total: int = Field(
        ...,
        description="Number of records matching the filters, ignoring pagination.",
        json_schema_extra={"example": 42},
    )
    page: int = Field(..., description="1-based page number.")
    page_size: int = Field(..., alias="pageSize", description="Maximum page length.")
    data: List[T]

    model_config = ConfigDict(populate_by_name=True)
