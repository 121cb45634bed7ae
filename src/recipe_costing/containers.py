"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from recipe_costing.adapters.supabase_recipe_repository import (
    SupabaseRecipeRepository,
)
from recipe_costing.config import Settings
from recipe_costing.services.cache import InMemoryCache
from recipe_costing.services.pricing import RecipePricingService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    pricing_service: RecipePricingService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    pricing_service = RecipePricingService(
        repository=SupabaseRecipeRepository(supabase_client),
        cache=InMemoryCache(),
        cache_ttl_seconds=resolved_settings.cost_cache_ttl_seconds,
    )

    return AppContainer(
        settings=resolved_settings,
        pricing_service=pricing_service,
    )
