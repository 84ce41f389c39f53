from __future__ import annotations

from tokenspan_api.domain.entities.api_key import ApiKey
from tokenspan_api.infrastructure.db.models.api_key import ApiKeyModel


def model_to_entity(model: ApiKeyModel) -> ApiKey:
    return ApiKey(
        id=model.id,
        name=model.name,
        key=model.key,
        owner_id=model.owner_id,
        provider_id=model.provider_id,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


def entity_to_model(entity: ApiKey) -> ApiKeyModel:
    return ApiKeyModel(
        id=entity.id,
        name=entity.name,
        key=entity.key,
        owner_id=entity.owner_id,
        provider_id=entity.provider_id,
        created_at=entity.created_at,
        updated_at=entity.updated_at,
    )
