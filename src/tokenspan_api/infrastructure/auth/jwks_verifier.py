from __future__ import annotations

import asyncio

import jwt

from tokenspan_api.application.dto.principal import Principal
from tokenspan_api.infrastructure.auth.claims import REQUIRED_CLAIMS, principal_from_claims

ASYMMETRIC_ALGORITHMS = ["RS256", "ES256", "EdDSA"]


class JWKSVerifier:
    """Verify tokens against signing keys published at a JWKS URL.

    Keys are cached by ``PyJWKClient``; a lookup that misses the cache goes
    over the network, so it runs in a worker thread.
    """

    def __init__(
        self,
        jwks_url: str,
        *,
        audience: str | None = None,
        leeway: int = 0,
        cache_lifespan: int = 300,
    ) -> None:
        self._keys = jwt.PyJWKClient(jwks_url, cache_keys=True, lifespan=cache_lifespan)
        self._audience = audience
        self._leeway = leeway

    async def verify(self, token: str) -> Principal:
        signing_key = await asyncio.to_thread(self._keys.get_signing_key_from_jwt, token)
        claims = jwt.decode(
            token,
            signing_key.key,
            algorithms=ASYMMETRIC_ALGORITHMS,
            audience=self._audience,
            leeway=self._leeway,
            options={"require": REQUIRED_CLAIMS, "verify_aud": self._audience is not None},
        )
        return principal_from_claims(claims)
