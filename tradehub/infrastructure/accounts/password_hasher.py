"""
Adapter: bcrypt password hashing.

Implements PasswordHasher port.
"""

import logging
from functools import cached_property

import bcrypt

from tradehub.domain.accounts.ports import DUMMY_PASSWORD, PasswordHasher

logger = logging.getLogger(__name__)

# bcrypt only reads the first 72 bytes of its input.
BCRYPT_MAX_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


class BcryptPasswordHasher(PasswordHasher):
    """Salted bcrypt hashes stored as UTF-8 strings."""

    def __init__(self, rounds: int = 12) -> None:
        self._rounds = rounds

    def hash(self, password: str) -> str:
        return bcrypt.hashpw(_encode(password), bcrypt.gensalt(rounds=self._rounds)).decode(
            "utf-8"
        )

    def verify(self, password: str, password_hash: str) -> bool:
        try:
            return bcrypt.checkpw(_encode(password), password_hash.encode("utf-8"))
        except ValueError:
            logger.error("Stored password hash is not a valid bcrypt hash")
            return False

    @cached_property
    def _dummy_hash(self) -> str:
        return self.hash(DUMMY_PASSWORD)

    def verify_dummy(self, password: str) -> None:
        self.verify(password, self._dummy_hash)
