"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    └── ApplicationError            (application.py)
        ├── InternalServerError
        │   └── InvalidArgumentError
        └── ConfigError             (credkit.config.validation)
"""

from credkit.kernel.errors.application import (
    ApplicationError,
    InternalServerError,
    InvalidArgumentError,
)
from credkit.kernel.errors.base import BaseError
from credkit.kernel.errors.classifier import classify_errors
from credkit.kernel.errors.response import format_error_response

__all__ = [
    "ApplicationError",
    "BaseError",
    "InternalServerError",
    "InvalidArgumentError",
    "classify_errors",
    "format_error_response",
]
