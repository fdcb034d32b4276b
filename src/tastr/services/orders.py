"""Order placement and management."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID

from tastr.domain.errors import (
    FoodNotFoundError,
    InsufficientStockError,
    OrderNotFoundError,
    StockConflictError,
)
from tastr.domain.foods import Food
from tastr.domain.orders import Order
from tastr.services.authorization import ensure_owner
from tastr.services.foods import FoodRepository

_logger = logging.getLogger(__name__)


class OrderRepository(Protocol):
    """Persistence interface for orders."""

    def list_by_buyer(self, buyer_email: str) -> list[Order]:
        """Return a buyer's orders, newest first."""

    def get_order(self, order_id: UUID) -> Order | None:
        """Return an order by id, if present."""

    def create_order(self, payload: dict[str, object]) -> Order:
        """Create an order and return it."""

    def delete_order(self, order_id: UUID) -> int:
        """Delete an order and return the number of deleted rows."""


@dataclass
class OrderService:
    """Service that places orders against the food stock.

    Placing an order is two writes: a conditional stock update on the food
    and an insert into orders. A failed insert is compensated by giving the
    stock back. Deleting an order leaves the stock untouched.
    """

    repository: OrderRepository
    food_repository: FoodRepository
    max_attempts: int = 3

    def list_orders(self, buyer_email: str) -> list[Order]:
        """Return orders placed by a buyer."""
        return self.repository.list_by_buyer(buyer_email)

    def place_order(
        self,
        buyer_email: str,
        food_id: UUID,
        order_quantity: int,
        buyer_name: str | None = None,
    ) -> Order:
        """Reserve stock for the food and record the order."""
        food = self._adjust_stock(food_id, order_quantity)
        try:
            order = self.repository.create_order(
                {
                    "food_id": str(food_id),
                    "buyer_email": buyer_email,
                    "buyer_name": buyer_name,
                    "order_quantity": order_quantity,
                    "food_name": food.name,
                    "food_price": food.price,
                    "food_image": food.image,
                    "food_owner_email": food.owner_email,
                    "buying_date": datetime.now(tz=UTC).isoformat(),
                }
            )
        except Exception:
            _logger.exception(
                "Order insert failed, restoring stock: food_id=%s quantity=%s",
                food_id,
                order_quantity,
            )
            try:
                self._adjust_stock(food_id, -order_quantity)
            except Exception:
                _logger.exception(
                    "Stock not restored, units lost: food_id=%s quantity=%s",
                    food_id,
                    order_quantity,
                )
            raise
        _logger.info(
            "Order placed: order_id=%s food_id=%s quantity=%s",
            order.id,
            food_id,
            order_quantity,
        )
        return order

    def delete_order(self, order_id: UUID, caller_email: str) -> int:
        """Delete one of the caller's orders without restoring stock."""
        order = self.repository.get_order(order_id)
        if order is None:
            raise OrderNotFoundError(order_id)
        ensure_owner(caller_email, order.buyer_email)
        return self.repository.delete_order(order_id)

    def _adjust_stock(self, food_id: UUID, quantity: int) -> Food:
        """Move ``quantity`` units from stock to purchases; return the prior food.

        A negative quantity moves units back into stock.
        """
        for _ in range(self.max_attempts):
            food = self.food_repository.get_food(food_id)
            if food is None:
                raise FoodNotFoundError(food_id)
            if quantity > food.quantity:
                raise InsufficientStockError(food_id, quantity, food.quantity)
            if self.food_repository.update_stock(
                food,
                quantity=food.quantity - quantity,
                purchase_count=food.purchase_count + quantity,
            ):
                return food
            _logger.warning(
                "Stock changed during update, retrying: food_id=%s", food_id
            )
        raise StockConflictError(food_id)
