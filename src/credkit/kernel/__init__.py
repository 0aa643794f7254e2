"""Kernel – framework-agnostic building blocks."""

from credkit.kernel.errors import (
    ApplicationError,
    BaseError,
    InternalServerError,
    InvalidArgumentError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "InternalServerError",
    "InvalidArgumentError",
]
