"""Password hashing strategies."""

from __future__ import annotations

from werkzeug.security import check_password_hash, generate_password_hash

from sessionauth.domain.users.repositories import PasswordHasher
from sessionauth.shared.config import HashingConfig
from sessionauth.shared.logging import logger


class WerkzeugPasswordHasher(PasswordHasher):
    """Salted one-way hashing via werkzeug.

    The salt and work factor are embedded in every hash, so ``verify`` keeps
    working for hashes produced under an older cost setting.
    """

    def __init__(
        self,
        *,
        method: str = "pbkdf2:sha256",
        cost: int = 600_000,
        salt_length: int = 16,
    ) -> None:
        self._method = _method_spec(method, cost)
        self._salt_length = salt_length

    @classmethod
    def from_config(cls, config: HashingConfig) -> WerkzeugPasswordHasher:
        return cls(method=config.method, cost=config.cost, salt_length=config.salt_length)

    def hash(self, password: str) -> str:
        return str(generate_password_hash(password, method=self._method, salt_length=self._salt_length))

    def verify(self, password: str, hashed: str) -> bool:
        if not hashed or not isinstance(hashed, str):
            return False
        try:
            return bool(check_password_hash(hashed, password))
        except (ValueError, TypeError):
            logger.warning("password_hasher: stored hash is malformed, treating as mismatch")
            return False


def _method_spec(method: str, cost: int) -> str:
    if method == "scrypt":
        return f"scrypt:{cost}:8:1"
    return f"{method}:{cost}"
