"""Domain models for orders."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class Order:
    """An order placed by a buyer for a single food item.

    Food metadata is copied at order time so the order still reads correctly
    after the food is edited.
    """

    id: UUID
    food_id: UUID
    buyer_email: str
    order_quantity: int
    food_name: str
    food_price: float
    food_image: str | None
    food_owner_email: str | None
    buyer_name: str | None
    buying_date: datetime | None
