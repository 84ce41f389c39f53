from __future__ import annotations

from tokenspan_api.domain.entities.parameter import Parameter
from tokenspan_api.infrastructure.db.models.parameter import ParameterModel


def model_to_entity(model: ParameterModel) -> Parameter:
    return Parameter(
        id=model.id,
        name=model.name,
        temperature=model.temperature,
        max_tokens=model.max_tokens,
        top_p=model.top_p,
        frequency_penalty=model.frequency_penalty,
        presence_penalty=model.presence_penalty,
        model_id=model.model_id,
        thread_id=model.thread_id,
        created_at=model.created_at,
        updated_at=model.updated_at,
        stop_sequences=list(model.stop_sequences or []),
        extra=model.extra,
        is_default=model.is_default,
    )


def entity_to_model(entity: Parameter) -> ParameterModel:
    return ParameterModel(
        id=entity.id,
        name=entity.name,
        temperature=entity.temperature,
        max_tokens=entity.max_tokens,
        stop_sequences=list(entity.stop_sequences),
        top_p=entity.top_p,
        frequency_penalty=entity.frequency_penalty,
        presence_penalty=entity.presence_penalty,
        extra=entity.extra,
        is_default=entity.is_default,
        model_id=entity.model_id,
        thread_id=entity.thread_id,
        created_at=entity.created_at,
        updated_at=entity.updated_at,
    )
