"""Shared fixtures for credkit tests."""

pytest_plugins = ["credkit.testing.fixtures"]
