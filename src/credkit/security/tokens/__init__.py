"""Security – random bytes and secure token issuance."""
from credkit.security.tokens.entropy import OsEntropySource
from credkit.security.tokens.generator import (
    DEFAULT_TOKEN_BYTES,
    RandomByteGenerator,
    SecureTokenGenerator,
    generate_random_bytes,
    generate_random_bytes_async,
    generate_secure_token,
    generate_secure_token_async,
)

__all__ = [
    "DEFAULT_TOKEN_BYTES",
    "OsEntropySource",
    "RandomByteGenerator",
    "SecureTokenGenerator",
    "generate_random_bytes",
    "generate_random_bytes_async",
    "generate_secure_token",
    "generate_secure_token_async",
]
