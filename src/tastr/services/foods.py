"""Food catalog services."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from tastr.domain.errors import FoodNotFoundError
from tastr.domain.foods import Food, UpdateResult
from tastr.services.authorization import ensure_owner

TOP_FOODS_LIMIT = 6

MUTABLE_FIELDS = (
    "name",
    "category",
    "image",
    "description",
    "origin",
    "price",
    "quantity",
)


class FoodRepository(Protocol):
    """Persistence interface for the food catalog."""

    def list_foods(
        self, search: str | None, offset: int, limit: int | None
    ) -> list[Food]:
        """Return foods, optionally filtered by name and paginated."""

    def count_foods(self) -> int:
        """Return an estimated number of foods."""

    def list_by_category(self, category: str) -> list[Food]:
        """Return foods in a category."""

    def list_top_foods(self, limit: int) -> list[Food]:
        """Return the most purchased foods."""

    def list_by_owner(self, owner_email: str) -> list[Food]:
        """Return foods created by an owner."""

    def get_food(self, food_id: UUID) -> Food | None:
        """Return a food by id, if present."""

    def create_food(self, payload: dict[str, object]) -> Food:
        """Create a food and return it."""

    def update_food(self, food_id: UUID, payload: dict[str, object]) -> int:
        """Update a food and return the number of matched rows."""

    def update_stock(self, food: Food, quantity: int, purchase_count: int) -> bool:
        """Set stock counters if they still match ``food``; return success."""


@dataclass
class FoodService:
    """Application service for catalog operations."""

    repository: FoodRepository

    def list_foods(
        self,
        search: str | None = None,
        page: int | None = None,
        size: int | None = None,
    ) -> list[Food]:
        """List foods, filtering by name when searching and paging when sized."""
        if size:
            return self.repository.list_foods(search or None, (page or 0) * size, size)
        return self.repository.list_foods(search or None, 0, None)

    def count_foods(self) -> int:
        """Return the approximate catalog size."""
        return self.repository.count_foods()

    def list_by_category(self, category: str) -> list[Food]:
        """Return foods matching a category exactly."""
        return self.repository.list_by_category(category)

    def top_foods(self) -> list[Food]:
        """Return the trending foods."""
        return self.repository.list_top_foods(TOP_FOODS_LIMIT)

    def list_owned(self, owner_email: str) -> list[Food]:
        """Return foods added by an owner."""
        return self.repository.list_by_owner(owner_email)

    def get_food(self, food_id: UUID) -> Food:
        """Return a food or raise FoodNotFoundError."""
        food = self.repository.get_food(food_id)
        if food is None:
            raise FoodNotFoundError(food_id)
        return food

    def create_food(self, owner_email: str, payload: dict[str, object]) -> Food:
        """Add a food owned by ``owner_email`` with no purchases yet."""
        fields = {key: payload[key] for key in MUTABLE_FIELDS if key in payload}
        fields["owner_name"] = payload.get("owner_name")
        fields["owner_email"] = owner_email
        fields["purchase_count"] = 0
        return self.repository.create_food(fields)

    def update_food(
        self, food_id: UUID, caller_email: str, payload: dict[str, object]
    ) -> UpdateResult:
        """Replace the editable fields of a food owned by the caller."""
        food = self.get_food(food_id)
        ensure_owner(caller_email, food.owner_email)
        fields = {key: payload[key] for key in MUTABLE_FIELDS if key in payload}
        if not fields:
            return UpdateResult(matched_count=1, modified_count=0)
        updated = self.repository.update_food(food_id, fields)
        return UpdateResult(matched_count=updated, modified_count=updated)
