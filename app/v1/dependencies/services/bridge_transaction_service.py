from fastapi import Depends
from app.v1.services.bridge_transaction_service import BridgeTransactionService
from app.repositories.bridge_transaction_repository import (
    BridgeTransactionRepository,
)
from app.dependencies.repositories.bridge_transaction_repository import (
    get_bridge_transaction_repository,
)


def get_bridge_transaction_service(
    bridge_transaction_repository: BridgeTransactionRepository = Depends(
        get_bridge_transaction_repository
    ),
) -> BridgeTransactionService:
    return BridgeTransactionService(
        bridge_transaction_repository=bridge_transaction_repository,
    )
