"""
HTTP tests for /app/v1/bridge_transactions against an in-memory database.
"""

from unittest.mock import AsyncMock

from sqlalchemy.exc import OperationalError

from app.db.session import get_async_session
from app.v1.app import v1_app
from app.v1.dependencies.services.bridge_transaction_service import (
    get_bridge_transaction_service,
)

FIELDS = [
    "tx_hash",
    "block_hash",
    "from",
    "to",
    "asset",
    "amount",
    "decimal",
    "height",
    "timestamp",
    "value",
]


class RecordingService:
    def __init__(self):
        self.calls = []

    async def get_list(self, search_params):
        self.calls.append(search_params)

    async def get_by_hash(self, tx_hash):
        self.calls.append(tx_hash)


class TestGetBridgeTransaction:
    async def test_returns_renamed_fields(
        self, async_client, bridge_transaction_factory
    ):
        created = await bridge_transaction_factory(
            amount="123.450000", decimal=6, value={"route": ["evm", "native"]}
        )

        response = await async_client.get(
            "/bridge_transactions/by_hash", params={"hash": created.tx_hash}
        )

        assert response.status_code == 200
        body = response.json()
        assert list(body) == FIELDS
        assert body["from"] == created.sender
        assert body["to"] == created.receiver
        assert body["amount"] == "123.450000"
        assert body["decimal"] == 6
        assert body["value"] == {"route": ["evm", "native"]}

    async def test_unknown_hash_is_404(self, async_client, fake_tx_hash):
        response = await async_client.get(
            "/bridge_transactions/by_hash", params={"hash": fake_tx_hash}
        )

        assert response.status_code == 404
        assert response.json()["error_code"] == "not_found"

    async def test_padded_hash_is_not_rewritten(
        self, async_client, bridge_transaction_factory
    ):
        await bridge_transaction_factory(tx_hash="abc")

        padded = await async_client.get(
            "/bridge_transactions/by_hash", params={"hash": " abc "}
        )
        exact = await async_client.get(
            "/bridge_transactions/by_hash", params={"hash": "abc"}
        )

        assert padded.status_code == 404
        assert exact.status_code == 200

    async def test_missing_hash_is_422(self, async_client):
        response = await async_client.get("/bridge_transactions/by_hash")

        assert response.status_code == 422
        assert response.json()["error_code"] == "validation_error"

    async def test_blank_hash_is_400(self, async_client):
        response = await async_client.get(
            "/bridge_transactions/by_hash", params={"hash": "  "}
        )

        assert response.status_code == 400

    async def test_storage_failure_is_500_without_leaking_cause(
        self, async_client
    ):
        session = AsyncMock()
        session.execute.side_effect = OperationalError(
            "SELECT", {}, Exception("password authentication failed")
        )

        async def broken_session():
            yield session

        v1_app.dependency_overrides[get_async_session] = broken_session

        response = await async_client.get(
            "/bridge_transactions/by_hash", params={"hash": "0x01"}
        )

        assert response.status_code == 500
        body = response.json()
        assert body["error_code"] == "storage_error"
        assert "password" not in body["detail"]


class TestListBridgeTransactions:
    async def test_filters_and_paginates(
        self, async_client, bridge_transaction_factory
    ):
        await bridge_transaction_factory(sender="A", timestamp=1)
        await bridge_transaction_factory(sender="A", timestamp=2)
        await bridge_transaction_factory(sender="B", timestamp=3)

        response = await async_client.get(
            "/bridge_transactions", params={"from": "A", "page": 1, "pageSize": 1}
        )

        assert response.status_code == 200
        body = response.json()
        assert list(body) == ["total", "page", "pageSize", "data"]
        assert body["total"] == 2
        assert body["page"] == 1
        assert body["pageSize"] == 1
        assert [tx["timestamp"] for tx in body["data"]] == [2]
        assert list(body["data"][0]) == FIELDS

    async def test_defaults_without_params(
        self, async_client, bridge_transaction_factory
    ):
        for i in range(12):
            await bridge_transaction_factory(timestamp=i)

        response = await async_client.get("/bridge_transactions")

        body = response.json()
        assert body["total"] == 12
        assert body["page"] == 1
        assert body["pageSize"] == 10
        timestamps = [tx["timestamp"] for tx in body["data"]]
        assert timestamps == sorted(timestamps, reverse=True)
        assert timestamps[0] == 11

    async def test_blank_filter_is_ignored(
        self, async_client, bridge_transaction_factory
    ):
        await bridge_transaction_factory(sender="A", receiver="X")
        await bridge_transaction_factory(sender="B", receiver="Y")

        response = await async_client.get(
            "/bridge_transactions", params={"from": "", "to": "Y"}
        )

        body = response.json()
        assert body["total"] == 1
        assert body["data"][0]["to"] == "Y"

    async def test_trailing_slash_is_accepted(self, async_client):
        response = await async_client.get("/bridge_transactions/")

        assert response.status_code == 200
        assert response.json()["total"] == 0

    async def test_invalid_pagination_is_400_and_sends_no_query(
        self, async_client
    ):
        service = RecordingService()
        v1_app.dependency_overrides[get_bridge_transaction_service] = lambda: service

        for params in (
            {"pageSize": 0},
            {"page": -1},
            {"page": 0},
            {"pageSize": 101},
        ):
            response = await async_client.get("/bridge_transactions", params=params)

            assert response.status_code == 400, params
            assert response.json()["error_code"] == "validation_error"

        assert service.calls == []

    async def test_non_integer_page_is_422(self, async_client):
        response = await async_client.get(
            "/bridge_transactions", params={"page": "first"}
        )

        assert response.status_code == 422
