import asyncio
import logging
from typing import Any, Mapping, Optional

from fastapi_repository import BaseRepository
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy import text
from sqlalchemy.engine import Result
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.lib.exception.query_errors import NotFoundError, StorageError
from app.lib.query.bridge_transaction_query_planner import (
    BridgeTransactionQueryPlanner,
    QueryPlan,
    Statement,
)
from app.models.bridge_transaction import BridgeTransaction
from app.v1.schemas.bridge_transaction import (
    BridgeTransactionListRead,
    BridgeTransactionRead,
)

logger = logging.getLogger(__name__)

# column -> response field, shared by the lookup and the listing
ROW_CONTRACT: tuple[tuple[str, str], ...] = (
    ("tx_hash", "tx_hash"),
    ("block_hash", "block_hash"),
    ("sender", "from"),
    ("receiver", "to"),
    ("asset", "asset"),
    ("amount", "amount"),
    ("decimal", "decimal"),
    ("height", "height"),
    ("timestamp", "timestamp"),
    ("value", "value"),
)


def map_row(row: Mapping[str, Any]) -> BridgeTransactionRead:
    """
    Map one result row to the response shape by column name.

    Every column of the contract is required and values are validated
    strictly: a Decimal amount or a string height is a StorageError, not
    something to coerce.
    """
    missing = [column for column, _ in ROW_CONTRACT if column not in row]
    if missing:
        logger.error("Bridge transaction row is missing columns: %s", missing)
        raise StorageError("Malformed bridge transaction row.")
    data = {field: row[column] for column, field in ROW_CONTRACT}
    try:
        return BridgeTransactionRead.model_validate(data, strict=True)
    except PydanticValidationError as e:
        logger.error(
            "Bridge transaction row %r failed to decode: %s",
            data.get("tx_hash"),
            e,
        )
        raise StorageError("Malformed bridge transaction row.") from e


class BridgeTransactionRepository(BaseRepository):
    def __init__(
        self,
        session: AsyncSession,
        planner: Optional[BridgeTransactionQueryPlanner] = None,
    ):
        super().__init__(session, BridgeTransaction)
        self.planner = planner or BridgeTransactionQueryPlanner()

    async def fetch_one(self, tx_hash: str) -> BridgeTransactionRead:
        result = await self._run(self.planner.plan_lookup(tx_hash), typed=True)
        rows = self._rows(result)
        if not rows:
            raise NotFoundError(f"Bridge transaction {tx_hash} not found.")
        return map_row(rows[0])

    async def execute(self, plan: QueryPlan) -> BridgeTransactionListRead:
        """
        Run the count then the page statement in the session's transaction.

        Unless LIST_ISOLATION_LEVEL asks for a snapshot, inserts landing between
        the two statements can make `total` disagree with the pages.
        """
        await self._begin_snapshot()
        count_result = await self._run(plan.count)
        try:
            total = count_result.scalar_one()
        except SQLAlchemyError as e:
            logger.exception("Count query returned no single value")
            raise StorageError() from e
        if isinstance(total, bool) or not isinstance(total, int):
            logger.error("Count query returned %r", total)
            raise StorageError()

        page_result = await self._run(plan.page, typed=True)
        rows = self._rows(page_result)
        return BridgeTransactionListRead(
            total=total,
            page=plan.page_number,
            page_size=plan.page_size,
            data=[map_row(row) for row in rows],
        )

    async def _begin_snapshot(self) -> None:
        if not settings.LIST_ISOLATION_LEVEL:
            return
        try:
            await self.session.connection(
                execution_options={"isolation_level": settings.LIST_ISOLATION_LEVEL}
            )
        except SQLAlchemyError as e:
            logger.exception(
                "Could not open a %s transaction", settings.LIST_ISOLATION_LEVEL
            )
            raise StorageError() from e

    @staticmethod
    def _rows(result: Result) -> list[Mapping[str, Any]]:
        # JSON payloads are decoded here, on row access
        try:
            return list(result.mappings().all())
        except (SQLAlchemyError, ValueError) as e:
            logger.exception("Failed to decode bridge transaction rows")
            raise StorageError("Malformed bridge transaction row.") from e

    async def _run(self, statement: Statement, typed: bool = False) -> Result:
        clause = text(statement.sql)
        if typed:
            # Positional typing: the select list follows planner.columns.
            table = self.model.__table__
            clause = clause.columns(*(table.c[name] for name in self.planner.columns))
        try:
            return await asyncio.wait_for(
                self.session.execute(clause, statement.params),
                timeout=settings.QUERY_TIMEOUT_SECONDS,
            )
        except asyncio.TimeoutError as e:
            logger.error(
                "Query timed out after %ss: %s",
                settings.QUERY_TIMEOUT_SECONDS,
                statement.sql,
            )
            raise StorageError("Storage query timed out.") from e
        except SQLAlchemyError as e:
            logger.exception("Query failed: %s", statement.sql)
            raise StorageError() from e
