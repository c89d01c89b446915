from tests.fixtures.faker import faker, fake_tx_hash
from tests.fixtures.database import async_engine, async_session_maker, async_session
from tests.fixtures.client import async_client
from tests.fixtures.factories.bridge_transaction_factory import (
    bridge_transaction_factory,
)
from tests.fixtures.repositories import bridge_transaction_repository

__all__ = [
    "faker",
    "fake_tx_hash",
    "async_engine",
    "async_session_maker",
    "async_session",
    "async_client",
    "bridge_transaction_factory",
    "bridge_transaction_repository",
]
