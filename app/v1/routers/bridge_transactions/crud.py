from fastapi import Depends, Query, Request
from app.v1.schemas.bridge_transaction import (
    BridgeTransactionListRead,
    BridgeTransactionRead,
    BridgeTransactionSearchParams,
)
from app.v1.dependencies.services.bridge_transaction_service import (
    get_bridge_transaction_service,
)
from app.v1.services.bridge_transaction_service import BridgeTransactionService
from app.v1.dependencies.query_params.get_bridge_transaction_search_params import (
    get_bridge_transaction_search_params,
)

from app.core.routers.api_router import APIRouter

router = APIRouter(prefix="/bridge_transactions", tags=["Bridge Transactions"])


@router.get(
    "",
    response_model=BridgeTransactionListRead,
    name="bridge_transactions:list_bridge_transactions",
)
async def list_bridge_transactions(
    request: Request,
    search_params: BridgeTransactionSearchParams = Depends(
        get_bridge_transaction_search_params
    ),
    service: BridgeTransactionService = Depends(get_bridge_transaction_service),
):
    """
    Retrieve bridge transactions filtered by sender and receiver, newest first.
    """
    return await service.get_list(search_params=search_params)


@router.get(
    "/by_hash",
    response_model=BridgeTransactionRead,
    name="bridge_transactions:get_bridge_transaction",
)
async def get_bridge_transaction(
    tx_hash: str = Query(..., alias="hash", description="Transaction hash."),
    service: BridgeTransactionService = Depends(get_bridge_transaction_service),
):
    """
    Retrieve a bridge transaction by its hash.
    """
    return await service.get_by_hash(tx_hash)
