from app.repositories.bridge_transaction_repository import (
    BridgeTransactionRepository,
)
from app.db.session import get_async_session
from sqlalchemy.ext.asyncio import AsyncSession
from fastapi import Depends


def get_bridge_transaction_repository(
    session: AsyncSession = Depends(get_async_session),
) -> BridgeTransactionRepository:
    return BridgeTransactionRepository(session)
