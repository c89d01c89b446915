from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Optional

from app.models.bridge_transaction import BridgeTransaction
from app.v1.schemas.bridge_transaction.search_params import (
    BridgeTransactionSearchParams,
)

BRIDGE_TRANSACTION_COLUMNS: tuple[str, ...] = (
    "tx_hash",
    "block_hash",
    "sender",
    "receiver",
    "asset",
    "amount",
    "decimal",
    "height",
    "timestamp",
    "value",
)

# search param attribute -> column
FILTER_COLUMNS: dict[str, str] = {
    "sender": "sender",
    "receiver": "receiver",
}

ORDER_BY = "timestamp DESC, tx_hash ASC"


@dataclass(frozen=True)
class Statement:
    """SQL text with `:name` placeholders and the values bound to them."""

    sql: str
    params: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class QueryPlan:
    count: Statement
    page: Statement
    page_number: int
    page_size: int


class PredicateBuilder:
    """
    Accumulates equality clauses for a WHERE predicate.

    Only column names from `allowed_columns` and placeholders ever reach the
    clause text; values go to `params`.
    """

    def __init__(self, allowed_columns: Iterable[str]):
        self.allowed_columns = frozenset(allowed_columns)
        self._clauses: list[str] = []
        self._params: dict[str, Any] = {}

    def equals(self, column: str, value: Optional[Any]) -> "PredicateBuilder":
        if value is None:
            return self
        if column not in self.allowed_columns:
            raise ValueError(f"column not filterable: {column}")
        self._clauses.append(f"{column} = :{column}")
        self._params[column] = value
        return self

    @property
    def where_sql(self) -> str:
        if not self._clauses:
            return ""
        return " WHERE " + " AND ".join(self._clauses)

    @property
    def params(self) -> dict[str, Any]:
        return dict(self._params)


class BridgeTransactionQueryPlanner:
    """Builds parameterized statements against the bridge transaction table.

    Nothing here touches the database, so plans can be inspected directly.
    """

    def __init__(
        self,
        table_name: str = BridgeTransaction.__tablename__,
        columns: tuple[str, ...] = BRIDGE_TRANSACTION_COLUMNS,
    ):
        self.table_name = table_name
        self.columns = columns
        self._select_list = ", ".join(columns)

    def _predicate(self) -> PredicateBuilder:
        return PredicateBuilder(allowed_columns=self.columns)

    def plan(self, search_params: BridgeTransactionSearchParams) -> QueryPlan:
        predicate = self._predicate()
        for attr, column in FILTER_COLUMNS.items():
            predicate.equals(column, getattr(search_params, attr))

        count = Statement(
            sql=f"SELECT count(*) AS total FROM {self.table_name}{predicate.where_sql}",
            params=predicate.params,
        )
        page = Statement(
            sql=(
                f"SELECT {self._select_list} FROM {self.table_name}"
                f"{predicate.where_sql}"
                f" ORDER BY {ORDER_BY}"
                " LIMIT :limit OFFSET :offset"
            ),
            params={
                **predicate.params,
                "limit": search_params.limit,
                "offset": search_params.offset,
            },
        )
        return QueryPlan(
            count=count,
            page=page,
            page_number=search_params.page,
            page_size=search_params.page_size,
        )

    def plan_lookup(self, tx_hash: str) -> Statement:
        predicate = self._predicate().equals("tx_hash", tx_hash)
        return Statement(
            sql=(
                f"SELECT {self._select_list} FROM {self.table_name}"
                f"{predicate.where_sql}"
                " LIMIT 1"
            ),
            params=predicate.params,
        )
