"""Pydantic models for the HTTP API.

Field aliases keep the camelCase wire names the web client uses, including
the ``_id`` key for record identifiers.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from tastr.domain.foods import Food, UpdateResult
from tastr.domain.orders import Order


class LoginClaims(BaseModel):
    """Identity claims posted by the client after signing in."""

    model_config = ConfigDict(extra="allow")

    email: str = Field(min_length=1)


class FoodPayload(BaseModel):
    """Request body for creating a food."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(min_length=1)
    category: str
    image: str | None = None
    description: str | None = None
    origin: str | None = None
    price: float = Field(ge=0)
    quantity: int = Field(ge=0)
    owner_name: str | None = Field(default=None, alias="addByName")


class FoodUpdate(BaseModel):
    """Request body for updating a food; omitted fields are left as stored."""

    name: str | None = Field(default=None, min_length=1)
    category: str | None = None
    image: str | None = None
    description: str | None = None
    origin: str | None = None
    price: float | None = Field(default=None, ge=0)
    quantity: int | None = Field(default=None, ge=0)


class CategoryFilter(BaseModel):
    """Request body for listing foods by category."""

    category: str


class FoodOut(BaseModel):
    """Food as returned to clients."""

    model_config = ConfigDict(populate_by_name=True)

    id: UUID = Field(alias="_id")
    name: str
    category: str
    image: str | None
    description: str | None
    origin: str | None
    price: float
    quantity: int
    purchase_count: int = Field(alias="purchaseCount")
    owner_email: str = Field(alias="addByEmail")
    owner_name: str | None = Field(default=None, alias="addByName")

    @classmethod
    def from_domain(cls, food: Food) -> "FoodOut":
        return cls(
            id=food.id,
            name=food.name,
            category=food.category,
            image=food.image,
            description=food.description,
            origin=food.origin,
            price=food.price,
            quantity=food.quantity,
            purchase_count=food.purchase_count,
            owner_email=food.owner_email,
            owner_name=food.owner_name,
        )


class OrderPayload(BaseModel):
    """Request body for placing an order."""

    model_config = ConfigDict(populate_by_name=True)

    food_id: UUID = Field(alias="foodId")
    order_quantity: int = Field(ge=1, alias="orderQuantity")
    buyer_name: str | None = Field(default=None, alias="buyerName")


class OrderOut(BaseModel):
    """Order as returned to clients."""

    model_config = ConfigDict(populate_by_name=True)

    id: UUID = Field(alias="_id")
    food_id: UUID = Field(alias="foodId")
    buyer_email: str = Field(alias="buyerEmail")
    buyer_name: str | None = Field(default=None, alias="buyerName")
    order_quantity: int = Field(alias="orderQuantity")
    food_name: str = Field(alias="foodName")
    food_price: float = Field(alias="foodPrice")
    food_image: str | None = Field(default=None, alias="foodImage")
    food_owner_email: str | None = Field(default=None, alias="foodOwnerEmail")
    buying_date: datetime | None = Field(default=None, alias="buyingDate")

    @classmethod
    def from_domain(cls, order: Order) -> "OrderOut":
        return cls(
            id=order.id,
            food_id=order.food_id,
            buyer_email=order.buyer_email,
            buyer_name=order.buyer_name,
            order_quantity=order.order_quantity,
            food_name=order.food_name,
            food_price=order.food_price,
            food_image=order.food_image,
            food_owner_email=order.food_owner_email,
            buying_date=order.buying_date,
        )


class CountOut(BaseModel):
    count: int


class InsertOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    inserted_id: UUID = Field(alias="insertedId")


class UpdateOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    matched_count: int = Field(alias="matchedCount")
    modified_count: int = Field(alias="modifiedCount")

    @classmethod
    def from_domain(cls, result: UpdateResult) -> "UpdateOut":
        return cls(
            matched_count=result.matched_count,
            modified_count=result.modified_count,
        )


class DeleteOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    deleted_count: int = Field(alias="deletedCount")
