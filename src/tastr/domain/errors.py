"""Domain errors raised by services and mapped to HTTP responses by the API."""

from uuid import UUID


class TokenError(Exception):
    """Base class for session token failures."""


class InvalidTokenError(TokenError):
    """Token is malformed, has a bad signature or lacks an identity."""


class ExpiredTokenError(InvalidTokenError):
    """Token signature is valid but its expiry has passed."""


class ForbiddenError(Exception):
    """Caller is authenticated but does not own the resource."""

    def __init__(self, caller_email: str, owner_email: str | None) -> None:
        super().__init__(f"{caller_email} cannot act on behalf of {owner_email}")
        self.caller_email = caller_email
        self.owner_email = owner_email


class NotFoundError(Exception):
    """No stored record matches the requested id."""

    entity = "record"

    def __init__(self, record_id: UUID) -> None:
        super().__init__(f"{self.entity} {record_id} not found")
        self.record_id = record_id


class FoodNotFoundError(NotFoundError):
    entity = "food"


class OrderNotFoundError(NotFoundError):
    entity = "order"


class InsufficientStockError(Exception):
    """Requested order quantity exceeds the food's stock."""

    def __init__(self, food_id: UUID, requested: int, available: int) -> None:
        super().__init__(
            f"food {food_id} has {available} in stock, {requested} requested"
        )
        self.food_id = food_id
        self.requested = requested
        self.available = available


class StockConflictError(Exception):
    """Stock counters kept changing underneath a conditional update."""

    def __init__(self, food_id: UUID) -> None:
        super().__init__(f"concurrent stock update on food {food_id}")
        self.food_id = food_id
