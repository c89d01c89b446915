from .crud import router

__all__ = ["router"]
