from .docs import docs_router
from .categories import categories_router
from .health import health_router

catalog_routers = [
    ("docs", docs_router),
    ("categories", categories_router),
]

__all__ = ["catalog_routers", "health_router"]
