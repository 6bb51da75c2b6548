from doc_catalog.db.repositories.category_repository import CategoryRepository
from doc_catalog.db.repositories.doc_repository import DocRepository

__all__ = ["CategoryRepository", "DocRepository"]
