from batchportal.web.routers.auth import router as auth_router
from batchportal.web.routers.batch import router as batch_router

__all__ = [
    "auth_router",
    "batch_router",
]
