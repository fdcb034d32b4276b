"""Order endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Request

from tastr.api.auth import require_owner_email
from tastr.api.models import DeleteOut, InsertOut, OrderOut, OrderPayload

if TYPE_CHECKING:
    from tastr.containers import AppContainer

router = APIRouter(prefix="/api/orders", tags=["orders"])


@router.get("", response_model=list[OrderOut])
async def list_orders(
    request: Request, email: str = Depends(require_owner_email)
) -> list[OrderOut]:
    """Return the caller's orders."""
    container: AppContainer = request.app.state.container
    orders = container.order_service.list_orders(email)
    return [OrderOut.from_domain(order) for order in orders]


@router.post("", response_model=InsertOut)
async def place_order(
    body: OrderPayload,
    request: Request,
    email: str = Depends(require_owner_email),
) -> InsertOut:
    """Place an order for the caller and take the quantity out of stock."""
    container: AppContainer = request.app.state.container
    order = container.order_service.place_order(
        buyer_email=email,
        food_id=body.food_id,
        order_quantity=body.order_quantity,
        buyer_name=body.buyer_name,
    )
    return InsertOut(inserted_id=order.id)


@router.delete("/{order_id}", response_model=DeleteOut)
async def delete_order(
    order_id: UUID,
    request: Request,
    email: str = Depends(require_owner_email),
) -> DeleteOut:
    """Delete one of the caller's orders. Stock is not restored."""
    container: AppContainer = request.app.state.container
    deleted = container.order_service.delete_order(order_id, email)
    return DeleteOut(deleted_count=deleted)
