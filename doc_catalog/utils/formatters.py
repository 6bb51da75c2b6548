"""Shaping helpers for catalog listings"""
from typing import Any, Dict, Iterable, List

from doc_catalog.schemas.category import CategoryRef
from doc_catalog.schemas.doc import DocSlugEntry, SlugGroup

UNCATEGORIZED_KEY = "0"


def uncategorized_category() -> CategoryRef:
    """Synthetic category for docs without one"""
    return CategoryRef(id=UNCATEGORIZED_KEY, category_name="Uncategorized", slug="uncategorized")


def group_docs_by_category(docs: Iterable[Any]) -> List[SlugGroup]:
    """
    Group docs into one bucket per category.

    Buckets appear in the order their category is first seen in ``docs``;
    the input order is kept inside each bucket. Docs without a category land
    in the "Uncategorized" bucket (id "0").

    Args:
        docs: Doc-like objects exposing id, ui_name, unique_slug, category_id
            and category (None or an object with id, category_name, slug)

    Returns:
        List of SlugGroup
    """
    groups: Dict[Any, SlugGroup] = {}

    for doc in docs:
        category = doc.category
        if category is None:
            key = UNCATEGORIZED_KEY
            category_ref = uncategorized_category()
        else:
            key = category.id
            category_ref = CategoryRef.model_validate(category)

        if key not in groups:
            groups[key] = SlugGroup(category=category_ref, children=[])

        groups[key].children.append(
            DocSlugEntry(
                id=doc.id,
                ui_name=doc.ui_name,
                unique_slug=doc.unique_slug,
                category_id=doc.category_id,
            )
        )

    # dicts keep insertion order, i.e. first-seen category order
    return list(groups.values())
