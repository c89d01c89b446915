from app.core.routers.api_router import APIRouter
from app.v1.routers.bridge_transactions import router as bridge_transactions_router

router = APIRouter()

router.include_router(bridge_transactions_router)

api_router = router
