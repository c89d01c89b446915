from .read import BridgeTransactionRead
from .read_list import BridgeTransactionListRead
from .search_params import BridgeTransactionSearchParams, build_search_params

__all__ = [
    "BridgeTransactionRead",
    "BridgeTransactionListRead",
    "BridgeTransactionSearchParams",
    "build_search_params",
]
