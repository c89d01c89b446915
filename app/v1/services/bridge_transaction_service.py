from typing import Optional

from app.lib.exception.query_errors import ValidationError
from app.lib.query.bridge_transaction_query_planner import (
    BridgeTransactionQueryPlanner,
)
from app.repositories.bridge_transaction_repository import (
    BridgeTransactionRepository,
)
from app.v1.schemas.bridge_transaction import (
    BridgeTransactionListRead,
    BridgeTransactionRead,
    BridgeTransactionSearchParams,
)


class BridgeTransactionService:
    def __init__(
        self,
        bridge_transaction_repository: BridgeTransactionRepository,
        query_planner: Optional[BridgeTransactionQueryPlanner] = None,
    ):
        self.bridge_transaction_repository = bridge_transaction_repository
        self.query_planner = query_planner or BridgeTransactionQueryPlanner()

    async def get_list(
        self, search_params: BridgeTransactionSearchParams
    ) -> BridgeTransactionListRead:
        """
        Retrieve a page of bridge transactions, newest first, with the total
        number of matches.
        """
        plan = self.query_planner.plan(search_params)
        return await self.bridge_transaction_repository.execute(plan)

    async def get_by_hash(self, tx_hash: str) -> BridgeTransactionRead:
        """
        Retrieve a single bridge transaction by its hash.

        The hash is opaque and looked up exactly as given.
        """
        if not tx_hash.strip():
            raise ValidationError("hash: must not be blank")
        return await self.bridge_transaction_repository.fetch_one(tx_hash)
