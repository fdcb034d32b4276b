"""Food catalog endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Query, Request

from tastr.api.auth import require_owner_email
from tastr.api.models import (
    CategoryFilter,
    CountOut,
    FoodOut,
    FoodPayload,
    FoodUpdate,
    InsertOut,
    UpdateOut,
)

if TYPE_CHECKING:
    from tastr.containers import AppContainer

router = APIRouter(prefix="/api", tags=["foods"])


@router.get("/foods", response_model=list[FoodOut])
async def list_foods(
    request: Request,
    search: str | None = None,
    page: int | None = Query(default=None, ge=0),
    size: int | None = Query(default=None, ge=0),
) -> list[FoodOut]:
    """List the catalog, optionally searched by name and paginated."""
    container: AppContainer = request.app.state.container
    foods = container.food_service.list_foods(search=search, page=page, size=size)
    return [FoodOut.from_domain(food) for food in foods]


@router.get("/foodsCount", response_model=CountOut)
async def count_foods(request: Request) -> CountOut:
    """Return the approximate number of foods."""
    container: AppContainer = request.app.state.container
    return CountOut(count=container.food_service.count_foods())


@router.post("/foods/category", response_model=list[FoodOut])
async def list_foods_by_category(
    body: CategoryFilter, request: Request
) -> list[FoodOut]:
    container: AppContainer = request.app.state.container
    foods = container.food_service.list_by_category(body.category)
    return [FoodOut.from_domain(food) for food in foods]


@router.get("/top-foods", response_model=list[FoodOut])
async def top_foods(request: Request) -> list[FoodOut]:
    """Return the most purchased foods."""
    container: AppContainer = request.app.state.container
    return [FoodOut.from_domain(food) for food in container.food_service.top_foods()]


@router.get("/my-foods", response_model=list[FoodOut])
async def my_foods(
    request: Request, email: str = Depends(require_owner_email)
) -> list[FoodOut]:
    """Return foods added by the authenticated caller."""
    container: AppContainer = request.app.state.container
    foods = container.food_service.list_owned(email)
    return [FoodOut.from_domain(food) for food in foods]


@router.get("/foods/{food_id}", response_model=FoodOut)
async def get_food(food_id: UUID, request: Request) -> FoodOut:
    container: AppContainer = request.app.state.container
    return FoodOut.from_domain(container.food_service.get_food(food_id))


@router.post("/foods", response_model=InsertOut)
async def create_food(
    body: FoodPayload,
    request: Request,
    email: str = Depends(require_owner_email),
) -> InsertOut:
    """Add a food owned by the authenticated caller."""
    container: AppContainer = request.app.state.container
    food = container.food_service.create_food(email, body.model_dump())
    return InsertOut(inserted_id=food.id)


@router.patch("/foods/{food_id}", response_model=UpdateOut)
async def update_food(
    food_id: UUID,
    body: FoodUpdate,
    request: Request,
    email: str = Depends(require_owner_email),
) -> UpdateOut:
    """Update the editable fields of one of the caller's foods."""
    container: AppContainer = request.app.state.container
    result = container.food_service.update_food(
        food_id, email, body.model_dump(exclude_unset=True, exclude_none=True)
    )
    return UpdateOut.from_domain(result)
