"""Security – password hashing."""
from credkit.security.passwords.hasher import (
    BcryptPasswordHasher,
    hash_password,
    hash_password_async,
    verify_password,
    verify_password_async,
)

__all__ = [
    "BcryptPasswordHasher",
    "hash_password",
    "hash_password_async",
    "verify_password",
    "verify_password_async",
]
