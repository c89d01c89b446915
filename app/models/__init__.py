from .bridge_transaction import BridgeTransaction

__all__ = [
    "BridgeTransaction",
]
