"""Testing generators – hypothesis strategies for principals and resources."""
from ddfinance_access.testing.generators.strategies import (
    permission_kind_strategy,
    principal_strategy,
    resource_strategy,
    role_strategy,
)

__all__ = [
    "permission_kind_strategy",
    "principal_strategy",
    "resource_strategy",
    "role_strategy",
]
