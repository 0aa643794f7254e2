"""Kernel security – hashing and entropy ports, sensitive field names."""
from credkit.kernel.security.crypto import EntropySource, PasswordHasher
from credkit.kernel.security.pii import DEFAULT_SENSITIVE_FIELDS

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "EntropySource",
    "PasswordHasher",
]
