"""
API endpoints for mantra categories.
"""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from dhivyuga.core.database import get_session
from dhivyuga.core.database.entities import Category, Profile
from dhivyuga.core.database.repositories import CategoryRepository
from dhivyuga.core.models.io import (
    CategoryCreate,
    CategoryListResponse,
    CategoryRead,
    CategoryUpdate,
    CategoryWithCount,
)
from dhivyuga.server.services.deps import get_current_admin

router = APIRouter(tags=["categories"])


async def _get_category_or_404(repo: CategoryRepository, category_id: uuid.UUID) -> Category:
    category = await repo.get_by_id(category_id)
    if category is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Category {category_id} not found",
        )
    return category


@router.get(
    "",
    response_model=CategoryListResponse,
    summary="List Categories",
    description="List categories ordered by name, each with its mantra count.",
)
async def list_categories(session: AsyncSession = Depends(get_session)) -> CategoryListResponse:
    rows = await CategoryRepository(session).list_with_mantra_counts()
    return CategoryListResponse(
        categories=[
            CategoryWithCount(**CategoryRead.model_validate(category).model_dump(), mantra_count=count)
            for category, count in rows
        ]
    )


@router.get(
    "/{category_id}",
    response_model=CategoryRead,
    summary="Get Category",
    responses={404: {"description": "Category not found"}},
)
async def get_category(category_id: uuid.UUID, session: AsyncSession = Depends(get_session)) -> CategoryRead:
    category = await _get_category_or_404(CategoryRepository(session), category_id)
    return CategoryRead.model_validate(category)


@router.post(
    "",
    response_model=CategoryRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Category",
    description="Add a category. Admin only.",
    responses={
        201: {"description": "Category created successfully"},
        409: {"description": "A category with this name already exists"},
    },
)
async def create_category(
    payload: CategoryCreate,
    session: AsyncSession = Depends(get_session),
    _: Profile = Depends(get_current_admin),
) -> CategoryRead:
    category = await CategoryRepository(session).create(Category.model_validate(payload))
    return CategoryRead.model_validate(category)


@router.patch(
    "/{category_id}",
    response_model=CategoryRead,
    summary="Update Category",
    description="Partially update a category. Admin only.",
    responses={
        404: {"description": "Category not found"},
        409: {"description": "A category with this name already exists"},
    },
)
async def update_category(
    category_id: uuid.UUID,
    payload: CategoryUpdate,
    session: AsyncSession = Depends(get_session),
    _: Profile = Depends(get_current_admin),
) -> CategoryRead:
    repo = CategoryRepository(session)
    category = await _get_category_or_404(repo, category_id)
    category = await repo.update(category, payload.model_dump(exclude_unset=True))
    return CategoryRead.model_validate(category)


@router.delete(
    "/{category_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Category",
    description="Delete a category. Its mantras stay in the catalog without a category. Admin only.",
    responses={404: {"description": "Category not found"}},
)
async def delete_category(
    category_id: uuid.UUID,
    session: AsyncSession = Depends(get_session),
    _: Profile = Depends(get_current_admin),
) -> None:
    if not await CategoryRepository(session).delete(category_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Category {category_id} not found",
        )
