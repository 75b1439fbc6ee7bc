# API Routers
from cuecards.routers.public import router as public_router
from cuecards.routers.views import router as views_router

__all__ = ["public_router", "views_router"]
