# doc_catalog/services/seed_service.py
from typing import Any, Dict, List, Optional, Tuple
from doc_catalog.core.exceptions import NotFoundError, ConflictError
from doc_catalog.core.logging import get_logger
from doc_catalog.core.slug_generator import slugify
from doc_catalog.schemas.category import CategoryCreate
from doc_catalog.schemas.doc import DocCreate
from doc_catalog.services.category_service import CategoryService
from doc_catalog.services.doc_service import DocService

logger = get_logger(__name__)

# (category slug, doc, its variants)
DocPlan = Tuple[Optional[str], DocCreate, List[DocCreate]]


class SeedService:
    """
    Load a catalog from plain data (usually a parsed YAML file).

    Expected shape::

        categories:
          - categoryName: Buttons
            slug: buttons
        docs:
          - uiName: Button
            category: buttons        # category slug, optional
            codes:
              - {language: jsx, code: "<Button />"}
            variants:
              - uiName: Outline Button
                codes: [...]

    Categories whose slug already exists are reused, not duplicated. The
    whole file is checked before the first write: an unknown category slug,
    a taken ``uniqueSlug`` or a malformed entry stores nothing.
    """

    def __init__(self, db_session):
        self.category_service = CategoryService(db_session)
        self.doc_service = DocService(db_session)

    def seed(self, data: Dict[str, Any]) -> Dict[str, int]:
        categories = [
            CategoryCreate.model_validate(category_data)
            for category_data in data.get("categories") or []
        ]
        plan = self._plan_docs(data.get("docs") or [], categories)

        counts = {"categories": 0, "docs": 0, "variants": 0}
        category_ids: Dict[str, int] = {}

        for category_create in categories:
            category = self._get_or_create_category(category_create, counts)
            category_ids[category.slug] = category.id

        for category_slug, doc_create, variants in plan:
            category_id = None
            if category_slug:
                if category_slug not in category_ids:
                    category_ids[category_slug] = self.category_service.get_by_slug(category_slug).id
                category_id = category_ids[category_slug]

            doc = self.doc_service.create_doc(
                doc_create.model_copy(update={"category_id": category_id})
            )
            counts["docs"] += 1

            for variant_create in variants:
                self.doc_service.create_variant(
                    doc.id, variant_create.model_copy(update={"category_id": category_id})
                )
                counts["variants"] += 1

        logger.info(f"Seeded catalog: {counts}")
        return counts

    def _plan_docs(
        self, docs_data: List[Dict[str, Any]], categories: List[CategoryCreate]
    ) -> List[DocPlan]:
        """Validate every doc entry without writing anything"""
        # Slugs the categories section will provide (generated ones follow the name)
        known_slugs = {slugify(c.slug or "") or slugify(c.category_name) for c in categories}
        category_repo = self.category_service.category_repo
        doc_repo = self.doc_service.doc_repo

        plan: List[DocPlan] = []
        explicit_slugs = set()

        for doc_data in docs_data:
            category_slug = doc_data.get("category")
            if (
                category_slug
                and category_slug not in known_slugs
                and not category_repo.slug_exists(category_slug)
            ):
                logger.warning(f"Seed rejected: doc '{doc_data.get('uiName')}' names unknown category '{category_slug}'")
                raise NotFoundError("Category not found", key=category_slug)

            doc_create = self._doc_create(doc_data)
            variants = [self._doc_create(v) for v in doc_data.get("variants") or []]

            for entry in [doc_create, *variants]:
                unique_slug = (entry.unique_slug or "").strip()
                if not unique_slug:
                    continue
                if unique_slug in explicit_slugs or doc_repo.slug_exists(unique_slug):
                    raise ConflictError(
                        f"Doc with uniqueSlug '{unique_slug}' already exists", key=unique_slug
                    )
                explicit_slugs.add(unique_slug)

            plan.append((category_slug, doc_create, variants))

        return plan

    def _get_or_create_category(self, category_create: CategoryCreate, counts: Dict[str, int]):
        if category_create.slug:
            try:
                return self.category_service.get_by_slug(slugify(category_create.slug))
            except NotFoundError:
                pass
        counts["categories"] += 1
        return self.category_service.create_category(category_create)

    @staticmethod
    def _doc_create(doc_data: Dict[str, Any]) -> DocCreate:
        payload = {key: value for key, value in doc_data.items() if key not in ("category", "variants")}
        return DocCreate.model_validate(payload)

    @staticmethod
    def summarize(counts: Dict[str, int]) -> List[str]:
        return [f"{name}: {count}" for name, count in counts.items()]
