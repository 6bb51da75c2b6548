# Catalog routers (docs and categories CRUD)
from .routes import catalog_routers

# Health endpoints
from .routes import health_router

__all__ = ["catalog_routers", "health_router"]
