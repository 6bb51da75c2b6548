# doc_catalog/db/repositories/category_repository.py
from typing import Any, Dict, List, Optional
from sqlalchemy.orm import Session
from doc_catalog.db.models.category import Category


class CategoryRepository:
    """Repository for CRUD operations on Category model"""

    def __init__(self, db_session: Session):
        self.db_session = db_session

    def get_by_id(self, category_id: int) -> Optional[Category]:
        """Get category by ID"""
        return self.db_session.query(Category).filter(Category.id == category_id).first()

    def get_by_slug(self, slug: str) -> Optional[Category]:
        """Get category by slug"""
        return self.db_session.query(Category).filter(Category.slug == slug).first()

    def slug_exists(self, slug: str) -> bool:
        return (
            self.db_session.query(Category.id).filter(Category.slug == slug).first()
            is not None
        )

    def list(self) -> List[Category]:
        """List categories ordered by name"""
        return (
            self.db_session.query(Category)
            .order_by(Category.category_name.asc(), Category.id.asc())
            .all()
        )

    def create(self, category_name: str, slug: str) -> Category:
        """Create a new category"""
        db_category = Category(category_name=category_name.strip(), slug=slug)

        self.db_session.add(db_category)
        self._commit()
        self.db_session.refresh(db_category)

        return db_category

    def update(self, db_category: Category, changes: Dict[str, Any]) -> Category:
        """Apply ``changes`` to an existing category"""
        for key, value in changes.items():
            setattr(db_category, key, value)

        self._commit()
        self.db_session.refresh(db_category)

        return db_category

    def delete(self, db_category: Category) -> None:
        """Delete a category. Its docs stay, with category_id set to NULL."""
        self.db_session.delete(db_category)
        self._commit()

    def _commit(self):
        try:
            self.db_session.commit()
        except Exception:
            self.db_session.rollback()
            raise
