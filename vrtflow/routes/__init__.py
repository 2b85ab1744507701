# API Routes

from .catalog import router as catalog_router
from .sessions import router as sessions_router
from .organizations import router as organizations_router

__all__ = ["catalog_router", "sessions_router", "organizations_router"]
