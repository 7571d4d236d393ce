from abc import ABC, abstractmethod


class PasswordHashError(Exception):
    """Raised when a plaintext secret cannot be hashed"""


class IPasswordHasher(ABC):
    """Credential hasher interface - one-way transform of a plaintext secret"""

    @abstractmethod
    def hash_password(self, plain: str) -> str:
        """Hash a plaintext password. Raises PasswordHashError on failure."""
        pass

    @abstractmethod
    def verify_password(self, plain: str, hashed: str) -> bool:
        """Check a plaintext password against a stored hash"""
        pass
