from typing import Any
from pydantic import BaseModel, ConfigDict, Field, field_validator


class BridgeTransactionRead(BaseModel):
    tx_hash: str = Field(..., description="Hash of the bridge transaction.")
    block_hash: str = Field(..., description="Hash of the containing block.")
    from_: str = Field(..., alias="from", description="Sender address.")
    to: str = Field(..., description="Receiver address.")
    asset: str = Field(..., description="Asset identifier.")
    amount: str = Field(
        ...,
        description="Transferred amount as a decimal string.",
        json_schema_extra={"example": "123.450000"},
    )
    decimal: int = Field(
        ..., description="Number of fractional digits carried by amount."
    )
    height: int = Field(..., description="Block height.")
    timestamp: int = Field(..., description="Block time as Unix seconds.")
    value: Any = Field(..., description="Raw event payload, passed through.")

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("value")
    @classmethod
    def _require_payload(cls, v: Any) -> Any:
        # the indexer always writes a payload; NULL means a broken row
        if v is None:
            raise ValueError("value must not be null")
        return v
