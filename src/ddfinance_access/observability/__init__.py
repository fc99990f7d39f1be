"""Observability – structured logging for access decisions."""
from ddfinance_access.observability.logging import JsonLoggerFactory, get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
