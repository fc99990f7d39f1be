"""Kernel security – EntityPermissionEvaluator.

Answers permission checks that target a specific entity. On top of the
general grant check, each resource type has an *ownership predicate* that
decides whether the principal stands in the required relationship to it:

* :class:`ClientRef`: the principal is the client's assigned employee, or
  the client's own account;
* :class:`InvestmentRef`: the principal is the owning client, or that
  client's assigned employee;
* :class:`UserAccountRef`: the principal is the account itself;
* :class:`EmployeeRef`: the principal is the employee's own account; for
  ``MESSAGE_PARTNER`` the principal must be one of the employee's assigned
  clients.

Anything without a registered predicate is denied.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Any, Callable, Mapping

from ddfinance_access.kernel.security.permissions import PermissionKind
from ddfinance_access.kernel.security.policy import PermissionEvaluator, general_permissions
from ddfinance_access.kernel.security.principal import Principal
from ddfinance_access.kernel.security.resources import (
    ClientRef,
    EmployeeRef,
    InvestmentRef,
    UserAccountRef,
)
from ddfinance_access.kernel.security.role_policy import RolePolicy, default_policy
from ddfinance_access.kernel.security.roles import Role

OwnershipPredicate = Callable[[Principal, PermissionKind, Any], bool]


def _ids_match(left: int | None, right: int | None) -> bool:
    return left is not None and right is not None and left == right


def _is_assigned_employee(principal: Principal, assigned_employee_id: int | None) -> bool:
    return principal.role is Role.EMPLOYEE and _ids_match(assigned_employee_id, principal.employee_id)


def client_is_owned(principal: Principal, kind: PermissionKind, resource: ClientRef) -> bool:
    if _is_assigned_employee(principal, resource.assigned_employee_id):
        return True
    # messaging is between partners, never with yourself
    if kind is PermissionKind.MESSAGE_PARTNER:
        return False
    return _ids_match(resource.owning_user_id, principal.id)


def investment_is_owned(principal: Principal, kind: PermissionKind, resource: InvestmentRef) -> bool:  # noqa: ARG001
    if _ids_match(resource.owning_client_user_id, principal.id):
        return True
    return _is_assigned_employee(principal, resource.assigned_employee_id)


def user_account_is_owned(principal: Principal, kind: PermissionKind, resource: UserAccountRef) -> bool:  # noqa: ARG001
    return _ids_match(resource.id, principal.id)


def employee_is_owned(principal: Principal, kind: PermissionKind, resource: EmployeeRef) -> bool:
    if kind is PermissionKind.MESSAGE_PARTNER:
        if resource.assigned_client_user_ids is None:
            return False
        return principal.id in resource.assigned_client_user_ids
    return _ids_match(resource.owning_user_id, principal.id)


DEFAULT_PREDICATES: Mapping[type, OwnershipPredicate] = MappingProxyType(
    {
        ClientRef: client_is_owned,
        EmployeeRef: employee_is_owned,
        InvestmentRef: investment_is_owned,
        UserAccountRef: user_account_is_owned,
    }
)


class EntityPermissionEvaluator(PermissionEvaluator):
    """Resolve permission checks that carry a target resource.

    Normally reached through
    :class:`~ddfinance_access.kernel.security.evaluator.UserPermissionEvaluator`,
    which has already short-circuited admins; the admin check is repeated here
    so the evaluator is safe to call on its own.

    Parameters
    ----------
    policy:
        Role table; defaults to :func:`default_policy`.
    predicates:
        Extra or replacement ownership predicates keyed by resource type,
        merged over :data:`DEFAULT_PREDICATES`.
    log_denials:
        Emit an ``access.denied`` DEBUG event for every denial.
    """

    def __init__(
        self,
        policy: RolePolicy | None = None,
        *,
        predicates: Mapping[type, OwnershipPredicate] | None = None,
        log_denials: bool = True,
    ) -> None:
        super().__init__(log_denials=log_denials)
        self._policy = policy or default_policy()
        self._predicates: Mapping[type, OwnershipPredicate] = MappingProxyType(
            {**DEFAULT_PREDICATES, **(predicates or {})}
        )

    def supported_resource_types(self) -> frozenset[type]:
        return frozenset(self._predicates)

    def has_permission(
        self,
        principal: Principal | None,
        kind: PermissionKind | None,
        resource: Any = None,
    ) -> bool:
        if principal is None:
            return self._deny(principal, kind, resource, "no_principal")
        if not isinstance(kind, PermissionKind):
            reason = "no_permission" if kind is None else "unknown_permission"
            return self._deny(principal, kind, resource, reason)
        if principal.role is Role.ADMIN:
            return True

        granted = general_permissions(principal, self._policy)
        if resource is None:
            if kind in granted:
                return True
            return self._deny(principal, kind, resource, "missing_grant")

        # Resource-scoped actions are never open to guests, custom grants or not.
        if principal.role is None or principal.role is Role.GUEST:
            return self._deny(principal, kind, resource, "guest")
        if kind not in granted:
            return self._deny(principal, kind, resource, "missing_grant")

        predicate = self._predicates.get(type(resource))
        if predicate is None:
            return self._deny(principal, kind, resource, "unsupported_resource")
        if not predicate(principal, kind, resource):
            return self._deny(principal, kind, resource, "not_owner")
        return True


__all__ = [
    "DEFAULT_PREDICATES",
    "EntityPermissionEvaluator",
    "OwnershipPredicate",
    "client_is_owned",
    "employee_is_owned",
    "investment_is_owned",
    "user_account_is_owned",
]
