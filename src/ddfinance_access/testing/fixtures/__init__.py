"""Testing fixtures – pytest fixtures for principals and the security context."""
from ddfinance_access.testing.fixtures.principal import (
    admin_principal,
    client_principal,
    employee_principal,
    guest_principal,
    make_principal,
    security_context,
)

__all__ = [
    "admin_principal",
    "client_principal",
    "employee_principal",
    "guest_principal",
    "make_principal",
    "security_context",
]
