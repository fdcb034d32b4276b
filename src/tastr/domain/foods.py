"""Domain models for the food catalog."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class Food:
    """Represents a food item offered in the catalog."""

    id: UUID
    name: str
    category: str
    image: str | None
    description: str | None
    origin: str | None
    price: float
    quantity: int
    purchase_count: int
    owner_email: str
    owner_name: str | None = None


@dataclass(frozen=True)
class UpdateResult:
    """Outcome of a food update."""

    matched_count: int
    modified_count: int
