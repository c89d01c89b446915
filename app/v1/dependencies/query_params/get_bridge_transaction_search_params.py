from typing import Optional
from fastapi import Query
from app.v1.schemas.bridge_transaction.search_params import (
    BridgeTransactionSearchParams,
    build_search_params,
)


def get_bridge_transaction_search_params(
    from_: Optional[str] = Query(None, alias="from", description="Sender address."),
    to: Optional[str] = Query(None, description="Receiver address."),
    page: Optional[int] = Query(None, description="1-based page number."),
    page_size: Optional[int] = Query(
        None, alias="pageSize", description="Page length, at most 100."
    ),
) -> BridgeTransactionSearchParams:
    # Bounds are checked by build_search_params so that every range error
    # surfaces as a ValidationError.
    return build_search_params(
        {
            "from": from_,
            "to": to,
            "page": page,
            "pageSize": page_size,
        }
    )
