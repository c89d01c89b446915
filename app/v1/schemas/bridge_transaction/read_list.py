from app.v1.schemas.common.list.page_result import PageResult
from app.v1.schemas.bridge_transaction.read import BridgeTransactionRead


class BridgeTransactionListRead(PageResult[BridgeTransactionRead]):
    pass
