"""Observability – structlog configuration and logger helper."""
from ddfinance_access.observability.logging.factory import JsonLoggerFactory
from ddfinance_access.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
