# doc_catalog/services/category_service.py
from typing import List
from doc_catalog.core.exceptions import NotFoundError, ConflictError
from doc_catalog.core.logging import get_logger
from doc_catalog.core.slug_generator import slugify, generate_unique_slug
from doc_catalog.db.repositories.category_repository import CategoryRepository
from doc_catalog.schemas.category import CategoryCreate, CategoryUpdate, CategoryInDB
from doc_catalog.schemas.doc import MessageResponse

logger = get_logger(__name__)


class CategoryService:
    """Service for category-related business logic"""

    def __init__(self, db_session):
        self.category_repo = CategoryRepository(db_session)

    def list_categories(self) -> List[CategoryInDB]:
        """List categories ordered by name"""
        categories = self.category_repo.list()
        return [CategoryInDB.model_validate(category) for category in categories]

    def get_category(self, category_id: int) -> CategoryInDB:
        """Get category by ID"""
        category = self.category_repo.get_by_id(category_id)
        if not category:
            raise NotFoundError("Category not found", key=category_id)
        return CategoryInDB.model_validate(category)

    def get_by_slug(self, slug: str) -> CategoryInDB:
        """Get category by slug"""
        category = self.category_repo.get_by_slug(slug)
        if not category:
            raise NotFoundError("Category not found", key=slug)
        return CategoryInDB.model_validate(category)

    def create_category(self, category_data: CategoryCreate) -> CategoryInDB:
        """Create a new category"""
        slug = slugify(category_data.slug or "")
        if slug:
            # Check if category with same slug already exists
            if self.category_repo.slug_exists(slug):
                raise ConflictError(f"Category with slug '{slug}' already exists", key=slug)
        else:
            slug = generate_unique_slug(
                category_data.category_name, self.category_repo.slug_exists, fallback="category"
            )

        category = self.category_repo.create(category_data.category_name, slug)
        logger.info(f"Created category '{category.category_name}' (ID: {category.id}, slug: {slug})")
        return CategoryInDB.model_validate(category)

    def update_category(self, category_id: int, category_data: CategoryUpdate) -> CategoryInDB:
        """Update an existing category"""
        category = self.category_repo.get_by_id(category_id)
        if not category:
            raise NotFoundError("Category not found", key=category_id)

        changes = category_data.model_dump(exclude_unset=True, exclude_none=True)

        # If slug is being updated, check it doesn't conflict
        if "slug" in changes:
            changes["slug"] = slugify(changes["slug"]) or category.slug
            existing = self.category_repo.get_by_slug(changes["slug"])
            if existing and existing.id != category_id:
                raise ConflictError(
                    f"Category with slug '{changes['slug']}' already exists", key=changes["slug"]
                )
        if "category_name" in changes:
            changes["category_name"] = changes["category_name"].strip()

        category = self.category_repo.update(category, changes)
        logger.info(f"Updated category {category_id}: {sorted(changes)}")
        return CategoryInDB.model_validate(category)

    def delete_category(self, category_id: int) -> MessageResponse:
        """Delete a category; its docs become uncategorized"""
        category = self.category_repo.get_by_id(category_id)
        if not category:
            raise NotFoundError("Category not found", key=category_id)

        self.category_repo.delete(category)
        logger.info(f"Deleted category {category_id}")
        return MessageResponse(message="Category deleted successfully", id=category_id)
