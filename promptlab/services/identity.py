"""
Identity collaborator.

The core only needs three things from whoever manages sign-in: whether it has
finished loading, whether a user is signed in, and a bearer token for write
calls. Tokens are checked for expiry client-side only; signature verification
is the template store's job.
"""

import time
from typing import Any, Optional, Protocol

import jwt
from jwt.exceptions import DecodeError, InvalidTokenError
from loguru import logger as log
from pydantic import BaseModel

from common import global_config


class IdentityProvider(Protocol):
    @property
    def is_loaded(self) -> bool: ...

    @property
    def is_signed_in(self) -> bool: ...

    def get_token(self) -> Optional[str]: ...


class SessionUser(BaseModel):
    """Signed-in user as described by the session token"""

    id: str  # noqa
    email: str | None = None  # noqa

    @classmethod
    def from_claims(cls, claims: dict[str, Any]):
        return cls(id=claims.get("sub", ""), email=claims.get("email"))


class SessionIdentity:
    """Identity backed by a session JWT handed over by the sign-in flow."""

    def __init__(self, token: Optional[str] = None):
        self._token: Optional[str] = None
        self._claims: dict[str, Any] = {}
        self._loaded = False
        if token is not None:
            self.resolve(token)

    @classmethod
    def from_config(cls) -> "SessionIdentity":
        identity = cls()
        identity.resolve(global_config.SESSION_TOKEN)
        return identity

    def resolve(self, token: Optional[str]) -> None:
        """Finish loading with the given token (None means signed out)."""
        self._token = token
        self._claims = self._read_claims(token) if token else {}
        self._loaded = True

    def sign_out(self) -> None:
        self.resolve(None)

    @staticmethod
    def _read_claims(token: str) -> dict[str, Any]:
        try:
            return jwt.decode(
                token,
                options={
                    "verify_signature": False,
                    "verify_exp": False,
                    "verify_iss": False,
                    "verify_aud": False,
                },
            )
        except (DecodeError, InvalidTokenError) as e:
            log.warning(f"Unreadable session token: {e}")
            return {}

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    @property
    def is_signed_in(self) -> bool:
        if not self._loaded or not self._token or not self._claims.get("sub"):
            return False
        exp = self._claims.get("exp")
        if exp is not None and exp <= time.time():
            log.debug("Session token expired")
            return False
        return True

    @property
    def user(self) -> Optional[SessionUser]:
        if not self.is_signed_in:
            return None
        return SessionUser.from_claims(self._claims)

    def get_token(self) -> Optional[str]:
        return self._token if self.is_signed_in else None
