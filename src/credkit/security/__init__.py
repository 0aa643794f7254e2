"""Security – password hashing, random bytes, secure tokens."""
from credkit.security.passwords import (
    BcryptPasswordHasher,
    hash_password,
    hash_password_async,
    verify_password,
    verify_password_async,
)
from credkit.security.tokens import (
    DEFAULT_TOKEN_BYTES,
    OsEntropySource,
    RandomByteGenerator,
    SecureTokenGenerator,
    generate_random_bytes,
    generate_random_bytes_async,
    generate_secure_token,
    generate_secure_token_async,
)

__all__ = [
    "BcryptPasswordHasher",
    "DEFAULT_TOKEN_BYTES",
    "OsEntropySource",
    "RandomByteGenerator",
    "SecureTokenGenerator",
    "generate_random_bytes",
    "generate_random_bytes_async",
    "generate_secure_token",
    "generate_secure_token_async",
    "hash_password",
    "hash_password_async",
    "verify_password",
    "verify_password_async",
]
