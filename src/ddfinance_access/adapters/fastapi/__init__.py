"""FastAPI adapter – permission guard dependency and error mapping."""
from ddfinance_access.adapters.fastapi.exception_mapper import FastAPIExceptionMapper
from ddfinance_access.adapters.fastapi.guard import PermissionGuard, current_principal

__all__ = ["FastAPIExceptionMapper", "PermissionGuard", "current_principal"]
