"""Testing fixtures – pytest fixtures for fake doubles.

Register with ``pytest_plugins = ["credkit.testing.fixtures"]``.
"""
try:
    import pytest  # noqa: F401

    from credkit.testing.fixtures.security import fake_entropy_source, fast_hashing_settings

except ImportError:
    pass

__all__ = ["fake_entropy_source", "fast_hashing_settings"]
