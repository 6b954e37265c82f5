"""Credential hashing contract.

Hashing and salting are delegated to an adapter; the domain only needs to
produce a hash at registration and check a password at login.
"""

from abc import ABC, abstractmethod


class PasswordHasher(ABC):
    """Hashes and verifies user passwords."""

    @abstractmethod
    def hash(self, password: str) -> str:
        """Return a salted hash of password."""
        pass

    @abstractmethod
    def verify(self, password: str, password_hash: str) -> bool:
        """Whether password matches password_hash. Never raises on mismatch."""
        pass
