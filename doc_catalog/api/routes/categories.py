"""Category management endpoints"""
from fastapi import APIRouter, status
from typing import List

from doc_catalog.core.dependencies import CategoryServiceDep
from doc_catalog.schemas.category import CategoryCreate, CategoryUpdate, CategoryResponse
from doc_catalog.schemas.doc import MessageResponse

categories_router = APIRouter(
    prefix="/categories",
    responses={
        404: {"description": "Category not found"},
        500: {"description": "Internal server error"},
    },
)


@categories_router.get("/", response_model=List[CategoryResponse])
def list_categories(category_service: CategoryServiceDep):
    return category_service.list_categories()


@categories_router.post(
    "/",
    response_model=CategoryResponse,
    status_code=status.HTTP_201_CREATED,
    responses={409: {"description": "Slug already taken"}},
)
def create_category(category_data: CategoryCreate, category_service: CategoryServiceDep):
    return category_service.create_category(category_data)


@categories_router.get("/{category_id}", response_model=CategoryResponse)
def get_category(category_id: int, category_service: CategoryServiceDep):
    return category_service.get_category(category_id)


@categories_router.put(
    "/{category_id}",
    response_model=CategoryResponse,
    responses={409: {"description": "Slug already taken"}},
)
def update_category(
    category_id: int, category_data: CategoryUpdate, category_service: CategoryServiceDep
):
    return category_service.update_category(category_id, category_data)


@categories_router.delete("/{category_id}", response_model=MessageResponse)
def delete_category(category_id: int, category_service: CategoryServiceDep):
    """Delete a category. Its docs are kept and become uncategorized."""
    return category_service.delete_category(category_id)
