"""Supabase repository for orders."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from tastr.domain.orders import Order
from tastr.services.orders import OrderRepository


@dataclass
class SupabaseOrderRepository(OrderRepository):
    """Supabase implementation for the ``orders`` table."""

    client: Client

    def list_by_buyer(self, buyer_email: str) -> list[Order]:
        """Return a buyer's orders, newest first."""
        response = (
            self.client.table("orders")
            .select("*")
            .eq("buyer_email", buyer_email)
            .order("buying_date", desc=True)
            .execute()
        )
        return [_parse_order(row) for row in response.data or []]

    def get_order(self, order_id: UUID) -> Order | None:
        """Return an order by id, if present."""
        response = (
            self.client.table("orders")
            .select("*")
            .eq("id", str(order_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_order(response.data[0])

    def create_order(self, payload: dict[str, object]) -> Order:
        """Insert an order row and return it."""
        response = self.client.table("orders").insert(payload).execute()
        if not response.data:
            raise RuntimeError("Failed to create order")
        return _parse_order(response.data[0])

    def delete_order(self, order_id: UUID) -> int:
        """Delete an order row and return how many rows were removed."""
        response = (
            self.client.table("orders").delete().eq("id", str(order_id)).execute()
        )
        return len(response.data or [])


def _parse_order(row: dict[str, object]) -> Order:
    """Parse an orders row into a domain model."""
    buying_raw = row.get("buying_date")
    buying_date = (
        datetime.fromisoformat(buying_raw)
        if isinstance(buying_raw, str) and buying_raw
        else None
    )
    return Order(
        id=UUID(str(row["id"])),
        food_id=UUID(str(row["food_id"])),
        buyer_email=str(row.get("buyer_email") or ""),
        order_quantity=int(row.get("order_quantity") or 0),
        food_name=str(row.get("food_name") or ""),
        food_price=float(row.get("food_price") or 0.0),
        food_image=row.get("food_image"),
        food_owner_email=row.get("food_owner_email"),
        buyer_name=row.get("buyer_name"),
        buying_date=buying_date,
    )
