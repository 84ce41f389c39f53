from __future__ import annotations

from tokenspan_api.domain.entities.provider import Provider
from tokenspan_api.infrastructure.db.models.provider import ProviderModel


def model_to_entity(model: ProviderModel) -> Provider:
    return Provider(
        id=model.id,
        name=model.name,
        slug=model.slug,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


def entity_to_model(entity: Provider) -> ProviderModel:
    return ProviderModel(
        id=entity.id,
        name=entity.name,
        slug=entity.slug,
        created_at=entity.created_at,
        updated_at=entity.updated_at,
    )
