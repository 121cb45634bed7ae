"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import asdict
from uuid import UUID

from fastapi import FastAPI, HTTPException, Query, Request, status

from recipe_costing.api.models import (
    ConversionResponse,
    ConvertRequest,
    RecipeCostsRequest,
)
from recipe_costing.api.serializers import serialize_projection, serialize_quantities
from recipe_costing.api.webhooks import router as webhooks_router
from recipe_costing.app_logging import configure_logging
from recipe_costing.containers import AppContainer
from recipe_costing.services.formatting import capitalize_recipe_name
from recipe_costing.services.unit_conversion import convert_unit
from recipe_costing.services.unit_registry import (
    get_all_units,
    get_ingredient_density,
)


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info("Starting recipe costing API (%s)", container.settings.environment)
        yield
        logger.info("Stopping recipe costing API")

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(webhooks_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/units")
    async def list_units() -> dict[str, list[str]]:
        """Return recognized unit names for pickers."""
        return asdict(get_all_units())

    @app.get("/units/density")
    async def ingredient_density(ingredient: str = "") -> dict[str, object]:
        """Return the density used for an ingredient."""
        return {"ingredient": ingredient, "density": get_ingredient_density(ingredient)}

    @app.post("/units/convert")
    async def convert(body: ConvertRequest) -> ConversionResponse:
        """Convert a quantity between units."""
        result = convert_unit(
            body.value, body.from_unit, body.to_unit, body.ingredient_name
        )
        return ConversionResponse(**asdict(result))

    @app.get("/recipes/{recipe_id}/cost")
    async def recipe_cost(
        recipe_id: UUID,
        request: Request,
        servings: float | None = Query(default=None, gt=0),
    ) -> dict[str, object]:
        """Return the cost projection and display quantities for a recipe."""
        state_container: AppContainer = request.app.state.container
        pricing_service = state_container.pricing_service
        recipe = pricing_service.repository.get_recipe(recipe_id)
        if recipe is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        projection = pricing_service.get_projection(recipe_id)
        return {
            "recipe_id": str(recipe.id),
            "name": capitalize_recipe_name(recipe.name),
            "projection": serialize_projection(projection),
            "quantities": serialize_quantities(
                projection,
                target_yield=servings or recipe.yield_quantity,
                original_yield=recipe.yield_quantity,
            ),
        }

    @app.post("/recipes/costs")
    async def recipe_costs(
        body: RecipeCostsRequest, request: Request
    ) -> dict[str, object]:
        """Return projections for several recipes keyed by id."""
        state_container: AppContainer = request.app.state.container
        prices = state_container.pricing_service.price_recipes(body.recipe_ids)
        return {
            "recipes": {
                str(recipe_id): serialize_projection(projection)
                for recipe_id, projection in prices.items()
            }
        }

    return app
