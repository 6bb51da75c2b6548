"""Typed errors raised by the catalog services.

Routes never build error responses themselves; the application factory maps
these to HTTP status codes (see ``doc_catalog.api.web_app``).
"""
from typing import Any, Optional


class CatalogError(Exception):
    """Base class for catalog errors"""

    status_code = 500

    def __init__(self, message: str = "Internal server error", key: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.key = key

    def to_dict(self) -> dict:
        body = {"message": self.message}
        if self.key is not None:
            body["key"] = self.key
        return body


class NotFoundError(CatalogError):
    """A lookup by id, slug or parent id found nothing"""

    status_code = 404


class ConflictError(CatalogError):
    """A unique slug is already taken"""

    status_code = 409


class InvalidVariantError(CatalogError):
    """Variants are leaves: a variant cannot own variants of its own"""

    status_code = 400
