"""Shared pytest configuration."""

pytest_plugins = ["ddfinance_access.testing.fixtures"]
