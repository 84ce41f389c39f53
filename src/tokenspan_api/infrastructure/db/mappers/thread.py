from __future__ import annotations

from tokenspan_api.domain.entities.thread import Thread
from tokenspan_api.infrastructure.db.models.thread import ThreadModel


def model_to_entity(model: ThreadModel) -> Thread:
    return Thread(
        id=model.id,
        name=model.name,
        slug=model.slug,
        owner_id=model.owner_id,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


def entity_to_model(entity: Thread) -> ThreadModel:
    return ThreadModel(
        id=entity.id,
        name=entity.name,
        slug=entity.slug,
        owner_id=entity.owner_id,
        created_at=entity.created_at,
        updated_at=entity.updated_at,
    )
