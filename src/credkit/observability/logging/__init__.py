"""Observability – structured logging helpers."""
from credkit.observability.logging.filters import SensitiveFieldsFilter
from credkit.observability.logging.factory import JsonLoggerFactory
from credkit.observability.logging.processors import RedactionProcessor, get_logger

__all__ = [
    "JsonLoggerFactory",
    "RedactionProcessor",
    "SensitiveFieldsFilter",
    "get_logger",
]
