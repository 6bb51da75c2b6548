# doc_catalog/services/doc_service.py
from typing import List, Optional
from doc_catalog.core.config import settings
from doc_catalog.core.exceptions import NotFoundError, ConflictError, InvalidVariantError
from doc_catalog.core.logging import get_logger
from doc_catalog.core.slug_generator import generate_unique_slug
from doc_catalog.db.models.doc import Doc
from doc_catalog.db.repositories.category_repository import CategoryRepository
from doc_catalog.db.repositories.doc_repository import DocRepository
from doc_catalog.schemas.doc import (
    DocCreate,
    DocUpdate,
    DocResponse,
    DocWithCodes,
    DocDetail,
    DocWithCodeSnippets,
    SlugGroup,
    MessageResponse,
)
from doc_catalog.utils.formatters import group_docs_by_category

logger = get_logger(__name__)

DOC_NOT_FOUND = "Doc not found"
PARENT_NOT_FOUND = "Parent doc not found"
CATEGORY_NOT_FOUND = "Category not found"


class DocService:
    """Service for doc catalog business logic"""

    def __init__(self, db_session):
        self.doc_repo = DocRepository(db_session)
        self.category_repo = CategoryRepository(db_session)

    def list_main_docs(self) -> List[DocDetail]:
        """List main docs by id with codes, category and variants"""
        docs = self.doc_repo.list_main()
        return [DocDetail.model_validate(doc) for doc in docs]

    def get_doc(self, doc_id: int) -> DocDetail:
        """Get a doc by ID. Raises NotFoundError."""
        doc = self.doc_repo.get_by_id(doc_id, with_relations=True)
        if not doc:
            raise NotFoundError(DOC_NOT_FOUND, key=doc_id)
        return DocDetail.model_validate(doc)

    def get_doc_by_slug(self, unique_slug: str) -> DocDetail:
        """Get a doc by unique slug. Raises NotFoundError."""
        doc = self.doc_repo.get_by_slug(unique_slug)
        if not doc:
            raise NotFoundError(DOC_NOT_FOUND, key=unique_slug)
        return DocDetail.model_validate(doc)

    def create_doc(self, doc_data: DocCreate) -> DocWithCodes:
        """
        Create a doc with its code snippets.

        A ``parent_id`` makes the new doc a UI variant: the parent must exist
        and must itself be a main doc.
        """
        parent = None
        if doc_data.parent_id is not None:
            parent = self._get_variant_parent(doc_data.parent_id)

        self._ensure_category(doc_data.category_id)
        unique_slug = self._resolve_slug(doc_data, parent)

        doc = self.doc_repo.create(doc_data, unique_slug=unique_slug)
        logger.info(
            f"Created doc '{doc.ui_name}' (ID: {doc.id}, slug: {doc.unique_slug}, "
            f"parent: {doc.parent_id}) with {len(doc_data.codes)} code snippet(s)"
        )

        created = self.doc_repo.get_by_id(doc.id, with_relations=True, with_variants=False)
        return DocWithCodes.model_validate(created)

    def create_variant(self, parent_id: int, doc_data: DocCreate) -> DocWithCodes:
        """Create a UI variant under ``parent_id``, whatever parent the payload names"""
        variant_data = doc_data.model_copy(update={"parent_id": parent_id})
        return self.create_doc(variant_data)

    def update_doc(self, doc_id: int, doc_data: DocUpdate) -> DocResponse:
        """Partially update name, subtitle, body and category of a doc"""
        doc = self.doc_repo.get_by_id(doc_id)
        if not doc:
            raise NotFoundError(DOC_NOT_FOUND, key=doc_id)

        changes = doc_data.model_dump(exclude_unset=True)
        if "category_id" in changes:
            self._ensure_category(changes["category_id"])

        doc = self.doc_repo.update(doc, changes)
        logger.info(f"Updated doc {doc_id}: {sorted(changes)}")
        return DocResponse.model_validate(doc)

    def delete_doc(self, doc_id: int) -> MessageResponse:
        """Delete a doc together with its codes and variants"""
        doc = self.doc_repo.get_by_id(doc_id)
        if not doc:
            raise NotFoundError(DOC_NOT_FOUND, key=doc_id)

        self.doc_repo.delete(doc)
        logger.info(f"Deleted doc {doc_id}")
        return MessageResponse(message="Doc deleted successfully", id=doc_id)

    def list_grouped_slugs(self) -> List[SlugGroup]:
        """Main docs grouped by category, categories in name order"""
        docs = self.doc_repo.list_main_slugs()
        return group_docs_by_category(docs)

    def list_docs_with_code(
        self, language: Optional[str] = None, category_id: Optional[int] = None
    ) -> List[DocWithCodeSnippets]:
        """Main docs with their snippets restricted to one language"""
        language = language or settings.DEFAULT_CODE_LANGUAGE
        docs = self.doc_repo.list_main_with_code(language, category_id)
        return [DocWithCodeSnippets.model_validate(doc) for doc in docs]

    def _get_variant_parent(self, parent_id: int) -> Doc:
        parent = self.doc_repo.get_by_id(parent_id)
        if not parent:
            logger.warning(f"Rejected variant: parent doc {parent_id} does not exist")
            raise NotFoundError(PARENT_NOT_FOUND, key=parent_id)
        if parent.is_variant:
            logger.warning(f"Rejected variant: doc {parent_id} is itself a variant")
            raise InvalidVariantError(
                "Variants cannot have variants of their own", key=parent_id
            )
        return parent

    def _ensure_category(self, category_id: Optional[int]) -> None:
        if category_id is None:
            return
        if not self.category_repo.get_by_id(category_id):
            raise NotFoundError(CATEGORY_NOT_FOUND, key=category_id)

    def _resolve_slug(self, doc_data: DocCreate, parent: Optional[Doc]) -> str:
        if doc_data.unique_slug and doc_data.unique_slug.strip():
            unique_slug = doc_data.unique_slug.strip()
            if self.doc_repo.slug_exists(unique_slug):
                raise ConflictError(
                    f"Doc with uniqueSlug '{unique_slug}' already exists", key=unique_slug
                )
            return unique_slug

        return generate_unique_slug(
            doc_data.ui_name,
            self.doc_repo.slug_exists,
            fallback="doc",
            prefix=parent.unique_slug if parent else None,
        )
