from __future__ import annotations

from dataclasses import asdict
from typing import Any

from tokenspan_api.domain.entities.model import Model, Pricing
from tokenspan_api.infrastructure.db.models.model import ModelModel


def pricing_from_json(data: dict[str, Any]) -> Pricing:
    return Pricing(
        price=float(data["price"]),
        tokens=int(data["tokens"]),
        currency=data.get("currency", "USD"),
    )


def model_to_entity(model: ModelModel) -> Model:
    return Model(
        id=model.id,
        name=model.name,
        description=model.description,
        slug=model.slug,
        context=model.context,
        input_pricing=pricing_from_json(model.input_pricing),
        output_pricing=pricing_from_json(model.output_pricing),
        training_at=model.training_at,
        provider_id=model.provider_id,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


def entity_to_model(entity: Model) -> ModelModel:
    return ModelModel(
        id=entity.id,
        name=entity.name,
        description=entity.description,
        slug=entity.slug,
        context=entity.context,
        input_pricing=asdict(entity.input_pricing),
        output_pricing=asdict(entity.output_pricing),
        training_at=entity.training_at,
        provider_id=entity.provider_id,
        created_at=entity.created_at,
        updated_at=entity.updated_at,
    )
