"""Import all models so Alembic can discover them via Base.metadata."""
from tokenspan_api.infrastructure.db.models.api_key import ApiKeyModel
from tokenspan_api.infrastructure.db.models.execution import ExecutionModel
from tokenspan_api.infrastructure.db.models.model import ModelModel
from tokenspan_api.infrastructure.db.models.parameter import ParameterModel
from tokenspan_api.infrastructure.db.models.provider import ProviderModel
from tokenspan_api.infrastructure.db.models.thread import ThreadModel
from tokenspan_api.infrastructure.db.models.user import UserModel

__all__ = [
    "ApiKeyModel",
    "ExecutionModel",
    "ModelModel",
    "ParameterModel",
    "ProviderModel",
    "ThreadModel",
    "UserModel",
]
