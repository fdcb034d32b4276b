"""Supabase implementation for the food catalog."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from tastr.domain.foods import Food
from tastr.services.foods import FoodRepository


@dataclass
class SupabaseFoodRepository(FoodRepository):
    """Supabase-backed repository for the ``foods`` table."""

    client: Client

    def list_foods(
        self, search: str | None, offset: int, limit: int | None
    ) -> list[Food]:
        """Return foods whose name contains ``search``, one page at a time."""
        query = self.client.table("foods").select("*")
        if search:
            query = query.ilike("name", f"%{_escape_like(search)}%")
        if limit is not None:
            query = query.range(offset, offset + limit - 1)
        response = query.execute()
        return [_parse_food(row) for row in response.data or []]

    def count_foods(self) -> int:
        """Return the planner's row estimate for the catalog."""
        response = (
            self.client.table("foods")
            .select("id", count="estimated")
            .limit(1)
            .execute()
        )
        return int(response.count or 0)

    def list_by_category(self, category: str) -> list[Food]:
        """Return foods in a category."""
        response = (
            self.client.table("foods").select("*").eq("category", category).execute()
        )
        return [_parse_food(row) for row in response.data or []]

    def list_top_foods(self, limit: int) -> list[Food]:
        """Return foods ordered by purchases, most purchased first."""
        response = (
            self.client.table("foods")
            .select("*")
            .order("purchase_count", desc=True)
            .limit(limit)
            .execute()
        )
        return [_parse_food(row) for row in response.data or []]

    def list_by_owner(self, owner_email: str) -> list[Food]:
        """Return foods created by an owner."""
        response = (
            self.client.table("foods")
            .select("*")
            .eq("owner_email", owner_email)
            .execute()
        )
        return [_parse_food(row) for row in response.data or []]

    def get_food(self, food_id: UUID) -> Food | None:
        """Return a food by id, if present."""
        response = (
            self.client.table("foods")
            .select("*")
            .eq("id", str(food_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_food(response.data[0])

    def create_food(self, payload: dict[str, object]) -> Food:
        """Insert a food row and return it."""
        response = self.client.table("foods").insert(payload).execute()
        if not response.data:
            raise RuntimeError("Failed to create food")
        return _parse_food(response.data[0])

    def update_food(self, food_id: UUID, payload: dict[str, object]) -> int:
        """Update a food row and return how many rows matched."""
        response = (
            self.client.table("foods")
            .update(payload)
            .eq("id", str(food_id))
            .execute()
        )
        return len(response.data or [])

    def update_stock(self, food: Food, quantity: int, purchase_count: int) -> bool:
        """Compare-and-set the stock counters against the values in ``food``."""
        response = (
            self.client.table("foods")
            .update({"quantity": quantity, "purchase_count": purchase_count})
            .eq("id", str(food.id))
            .eq("quantity", food.quantity)
            .eq("purchase_count", food.purchase_count)
            .execute()
        )
        return bool(response.data)


def _escape_like(value: str) -> str:
    """Escape LIKE wildcards so the term matches literally.

    PostgREST reads ``*`` as ``%`` and cannot escape it, so a ``*`` in the
    term becomes the single-character wildcard ``_``.
    """
    escaped = value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return escaped.replace("*", "_")


def _parse_food(row: dict[str, object]) -> Food:
    """Parse a foods row into a domain model."""
    return Food(
        id=UUID(str(row["id"])),
        name=str(row.get("name") or ""),
        category=str(row.get("category") or ""),
        image=row.get("image"),
        description=row.get("description"),
        origin=row.get("origin"),
        price=float(row.get("price") or 0.0),
        quantity=int(row.get("quantity") or 0),
        purchase_count=int(row.get("purchase_count") or 0),
        owner_email=str(row.get("owner_email") or ""),
        owner_name=row.get("owner_name"),
    )
