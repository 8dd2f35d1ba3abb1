"""API routers."""
from .usuarios import router as usuarios_router
from .sensores import router as sensores_router
from .reportes import router as reportes_router
from .tokens import router as tokens_router

__all__ = ["usuarios_router", "sensores_router", "reportes_router", "tokens_router"]
