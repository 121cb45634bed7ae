"""Pydantic models for API requests and webhook payloads."""

from uuid import UUID

from pydantic import BaseModel, Field


class ConvertRequest(BaseModel):
    """Unit conversion request."""

    value: float
    from_unit: str
    to_unit: str
    ingredient_name: str | None = None


class ConversionResponse(BaseModel):
    """Unit conversion result."""

    converted_value: float
    converted_unit: str
    original_value: float
    original_unit: str
    conversion_factor: float


class RecipeCostsRequest(BaseModel):
    """Batch recipe pricing request."""

    recipe_ids: list[UUID] = Field(default_factory=list)


class IngredientRecord(BaseModel):
    """Row of the ingredients table as sent by database webhooks."""

    id: UUID
    name: str | None = Field(default=None, alias="ingredient_name")
    cost_per_unit: float | None = None
    unit: str | None = None
    waste_percent: float | None = Field(
        default=None, alias="trim_peel_waste_percentage"
    )
    yield_percent: float | None = Field(default=None, alias="yield_percentage")


class DatabaseWebhookPayload(BaseModel):
    """Supabase database webhook payload for the ingredients table."""

    type: str
    table: str
    schema_name: str | None = Field(default=None, alias="schema")
    record: IngredientRecord | None = None
    old_record: IngredientRecord | None = None
