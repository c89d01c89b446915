from .bridge_transaction_repository_fixture import bridge_transaction_repository

__all__ = [
    "bridge_transaction_repository",
]
