"""Tests for container wiring."""

from tastr.adapters.supabase_food_repository import SupabaseFoodRepository
from tastr.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)
    assert isinstance(container.food_service.repository, SupabaseFoodRepository)
    assert container.order_service.food_repository is (
        container.food_service.repository
    )
    assert container.token_service.lifetime.days == 30
