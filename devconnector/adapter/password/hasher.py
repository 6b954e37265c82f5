"""Argon2 credential hashing."""

from argon2 import PasswordHasher as Argon2Hasher
from argon2 import exceptions as argon_exc

from devconnector.domain.service.credentials import PasswordHasher


class Argon2PasswordHasher(PasswordHasher):
    """PasswordHasher backed by argon2-cffi with its default parameters."""

    def __init__(self) -> None:
        self._hasher = Argon2Hasher()

    def hash(self, password: str) -> str:
        return self._hasher.hash(password)

    def verify(self, password: str, password_hash: str) -> bool:
        try:
            return self._hasher.verify(password_hash, password)
        except (
            argon_exc.VerifyMismatchError,
            argon_exc.VerificationError,
            argon_exc.InvalidHashError,
        ):
            return False
