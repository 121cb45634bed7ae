"""Database webhook endpoints with shared-secret auth."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status

from recipe_costing.api.models import DatabaseWebhookPayload, IngredientRecord
from recipe_costing.api.serializers import serialize_projection
from recipe_costing.domain.recipes import Ingredient, IngredientCostChange

if TYPE_CHECKING:
    from recipe_costing.containers import AppContainer

router = APIRouter(prefix="/webhooks", tags=["webhooks"])
_logger = logging.getLogger(__name__)


def _get_webhook_secret(request: Request) -> str:
    container: AppContainer = request.app.state.container
    return container.settings.webhook_secret


async def require_webhook_secret(
    x_webhook_secret: str | None = Header(default=None),
    webhook_secret: str = Depends(_get_webhook_secret),
) -> None:
    """Ensure requests carry the configured webhook secret."""
    if not x_webhook_secret or x_webhook_secret != webhook_secret:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


@router.post("/ingredients", dependencies=[Depends(require_webhook_secret)])
async def ingredient_changed(
    payload: DatabaseWebhookPayload, request: Request
) -> dict[str, object]:
    """Reprice recipes after an ingredient row update."""
    if payload.table != "ingredients" or payload.type != "UPDATE" or not payload.record:
        return {"status": "ignored", "recipes": {}}

    container: AppContainer = request.app.state.container
    after = _to_ingredient(payload.record)
    before = _to_ingredient(payload.old_record) if payload.old_record else None
    change = IngredientCostChange(ingredient_id=after.id, before=before, after=after)
    prices = container.pricing_service.handle_ingredient_change(change)
    _logger.info("Repriced %s recipes for ingredient %s", len(prices), after.id)
    return {
        "status": "ok",
        "recipes": {
            str(recipe_id): serialize_projection(projection)
            for recipe_id, projection in prices.items()
        },
    }


def _to_ingredient(record: IngredientRecord) -> Ingredient:
    return Ingredient(
        id=record.id,
        name=record.name or "",
        cost_per_unit=record.cost_per_unit or 0.0,
        unit=record.unit,
        waste_percent=record.waste_percent,
        yield_percent=record.yield_percent,
    )
