from __future__ import annotations

import jwt

from tokenspan_api.application.dto.principal import Principal
from tokenspan_api.infrastructure.auth.claims import REQUIRED_CLAIMS, principal_from_claims


class HS256Verifier:
    """Shared-secret verifier for tokens minted by the sign-in service."""

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        *,
        audience: str | None = None,
        leeway: int = 0,
    ) -> None:
        self._secret = secret
        self._algorithms = [algorithm]
        self._audience = audience
        self._leeway = leeway

    async def verify(self, token: str) -> Principal:
        claims = jwt.decode(
            token,
            self._secret,
            algorithms=self._algorithms,
            audience=self._audience,
            leeway=self._leeway,
            options={"require": REQUIRED_CLAIMS, "verify_aud": self._audience is not None},
        )
        return principal_from_claims(claims)
