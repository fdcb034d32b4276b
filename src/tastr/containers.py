"""Dependency container wiring for the application."""

from dataclasses import dataclass
from datetime import timedelta

from supabase import create_client

from tastr.adapters.supabase_food_repository import SupabaseFoodRepository
from tastr.adapters.supabase_order_repository import SupabaseOrderRepository
from tastr.config import Settings
from tastr.services.foods import FoodService
from tastr.services.orders import OrderService
from tastr.services.tokens import TokenService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    token_service: TokenService
    food_service: FoodService
    order_service: OrderService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    food_repository = SupabaseFoodRepository(supabase_client)
    order_repository = SupabaseOrderRepository(supabase_client)
    token_service = TokenService(
        secret=resolved_settings.access_key,
        lifetime=timedelta(days=resolved_settings.token_lifetime_days),
    )
    food_service = FoodService(food_repository)
    order_service = OrderService(
        repository=order_repository,
        food_repository=food_repository,
    )

    return AppContainer(
        settings=resolved_settings,
        token_service=token_service,
        food_service=food_service,
        order_service=order_service,
    )
