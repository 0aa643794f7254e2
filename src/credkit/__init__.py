"""
credkit – credential hashing and secure token issuance.

Import path convention::

    from credkit import hash_password, verify_password, generate_secure_token
    from credkit.kernel.errors import InternalServerError
    from credkit.config import HashingSettings
"""

from credkit.kernel.errors import InternalServerError, InvalidArgumentError
from credkit.security import (
    generate_random_bytes,
    generate_random_bytes_async,
    generate_secure_token,
    generate_secure_token_async,
    hash_password,
    hash_password_async,
    verify_password,
    verify_password_async,
)

__version__ = "0.1.0"
__all__ = [
    "InternalServerError",
    "InvalidArgumentError",
    "__version__",
    "generate_random_bytes",
    "generate_random_bytes_async",
    "generate_secure_token",
    "generate_secure_token_async",
    "hash_password",
    "hash_password_async",
    "verify_password",
    "verify_password_async",
]
