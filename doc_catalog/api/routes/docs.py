"""Doc catalog endpoints: main docs, UI variants and navigation listings"""
from fastapi import APIRouter, Query, status
from typing import List, Optional

from doc_catalog.core.dependencies import DocServiceDep
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

NOT_FOUND_EXAMPLE = {
    "description": "Doc not found",
    "content": {"application/json": {"example": {"message": "Doc not found", "key": 42}}},
}

docs_router = APIRouter(
    prefix="/docs",
    responses={
        500: {"description": "Internal server error"},
    },
)

# Static paths first: "/{doc_id}" would otherwise shadow them


@docs_router.get(
    "/",
    response_model=List[DocDetail],
    summary="List main docs",
    description="Main docs (no parent) ordered by id, with codes, category and UI variants.",
)
def list_docs(doc_service: DocServiceDep):
    return doc_service.list_main_docs()


@docs_router.get(
    "/unique-slugs",
    response_model=List[SlugGroup],
    summary="Main docs grouped by category",
    description="Minimal doc entries grouped per category, categories in name order. "
    "Docs without a category are grouped under 'Uncategorized' (id \"0\").",
)
def list_unique_slugs(doc_service: DocServiceDep):
    return doc_service.list_grouped_slugs()


@docs_router.get(
    "/unique-slugs-with-code",
    response_model=List[DocWithCodeSnippets],
    summary="Main docs with code in one language",
    description="Every main doc (optionally of one category) with its snippets restricted "
    "to one language. Docs without a matching snippet have an empty code list.",
)
def list_unique_slugs_with_code(
    doc_service: DocServiceDep,
    category_id: Optional[int] = Query(None, alias="categoryId"),
    language: Optional[str] = Query(None, description="Defaults to DEFAULT_CODE_LANGUAGE"),
):
    return doc_service.list_docs_with_code(language=language, category_id=category_id)


@docs_router.get(
    "/getDocByUniqueSlug/{unique_slug:path}",
    response_model=DocDetail,
    responses={404: NOT_FOUND_EXAMPLE},
    summary="Get doc by unique slug",
)
def get_doc_by_unique_slug(unique_slug: str, doc_service: DocServiceDep):
    return doc_service.get_doc_by_slug(unique_slug)


@docs_router.post(
    "/createDoc",
    response_model=DocWithCodes,
    status_code=status.HTTP_201_CREATED,
    responses={404: {"description": "Parent doc or category not found"}, 409: {"description": "uniqueSlug taken"}},
    summary="Create a doc with its code snippets",
)
def create_doc(doc_data: DocCreate, doc_service: DocServiceDep):
    return doc_service.create_doc(doc_data)


@docs_router.put(
    "/updateDoc/{doc_id}",
    response_model=DocResponse,
    responses={404: NOT_FOUND_EXAMPLE},
    summary="Update a doc",
    description="Only uiName, uiSubtitle, docs and categoryId can change.",
)
def update_doc(doc_id: int, doc_data: DocUpdate, doc_service: DocServiceDep):
    return doc_service.update_doc(doc_id, doc_data)


@docs_router.delete(
    "/deleteDoc/{doc_id}",
    response_model=MessageResponse,
    responses={404: NOT_FOUND_EXAMPLE},
    summary="Delete a doc with its codes and variants",
)
def delete_doc(doc_id: int, doc_service: DocServiceDep):
    return doc_service.delete_doc(doc_id)


@docs_router.post(
    "/createVariant/{doc_id}",
    response_model=DocWithCodes,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"description": "Parent is itself a variant"},
        404: {"description": "Parent doc not found"},
    },
    summary="Create a UI variant of a main doc",
)
def create_variant(doc_id: int, doc_data: DocCreate, doc_service: DocServiceDep):
    return doc_service.create_variant(doc_id, doc_data)


@docs_router.get(
    "/{doc_id}",
    response_model=DocDetail,
    responses={404: NOT_FOUND_EXAMPLE},
    summary="Get doc by ID",
)
def get_doc(doc_id: int, doc_service: DocServiceDep):
    return doc_service.get_doc(doc_id)
