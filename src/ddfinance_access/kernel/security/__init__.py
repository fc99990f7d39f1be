"""Kernel security – catalog, roles, principals, resources and evaluators."""
from ddfinance_access.kernel.security.permissions import (
    ADMIN_ONLY_PERMISSIONS,
    ALL_PERMISSIONS,
    PermissionKind,
)
from ddfinance_access.kernel.security.roles import Role
from ddfinance_access.kernel.security.principal import Principal
from ddfinance_access.kernel.security.resources import (
    ClientRef,
    EmployeeRef,
    InvestmentRef,
    ResourceKind,
    ResourceRef,
    UserAccountRef,
    describe_resource,
)
from ddfinance_access.kernel.security.role_policy import (
    DEFAULT_ROLE_PERMISSIONS,
    RolePolicy,
    default_policy,
)
from ddfinance_access.kernel.security.policy import PermissionEvaluator, general_permissions
from ddfinance_access.kernel.security.entity_evaluator import (
    DEFAULT_PREDICATES,
    EntityPermissionEvaluator,
    OwnershipPredicate,
)
from ddfinance_access.kernel.security.evaluator import (
    UserPermissionEvaluator,
    default_evaluator,
    has_permission,
)
from ddfinance_access.kernel.security.security_context import SecurityContext
from ddfinance_access.kernel.security.guards import check_permission, require_permission

__all__ = [
    "ADMIN_ONLY_PERMISSIONS",
    "ALL_PERMISSIONS",
    "ClientRef",
    "DEFAULT_PREDICATES",
    "DEFAULT_ROLE_PERMISSIONS",
    "EmployeeRef",
    "EntityPermissionEvaluator",
    "InvestmentRef",
    "OwnershipPredicate",
    "PermissionEvaluator",
    "PermissionKind",
    "Principal",
    "ResourceKind",
    "ResourceRef",
    "Role",
    "RolePolicy",
    "SecurityContext",
    "UserAccountRef",
    "UserPermissionEvaluator",
    "check_permission",
    "default_evaluator",
    "default_policy",
    "describe_resource",
    "general_permissions",
    "has_permission",
    "require_permission",
]
