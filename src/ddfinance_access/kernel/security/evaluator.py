"""Kernel security – UserPermissionEvaluator, the single integration point.

Callers (HTTP guards, service pre-mutation checks) ask one question::

    evaluator.has_permission(principal, PermissionKind.VIEW_CLIENT, client_ref)

* no principal or no kind → ``False``;
* ADMIN → ``True`` for everything, resources included;
* no resource → membership in role defaults ∪ custom grants;
* otherwise → :class:`EntityPermissionEvaluator` decides alone.
"""
from __future__ import annotations

from typing import Any

from ddfinance_access.kernel.security.entity_evaluator import EntityPermissionEvaluator
from ddfinance_access.kernel.security.permissions import PermissionKind
from ddfinance_access.kernel.security.policy import PermissionEvaluator, general_permissions
from ddfinance_access.kernel.security.principal import Principal
from ddfinance_access.kernel.security.role_policy import RolePolicy, default_policy
from ddfinance_access.kernel.security.roles import Role


class UserPermissionEvaluator(PermissionEvaluator):
    """Resource-free decisions plus delegation for resource-scoped ones.

    Stateless: the only data it reads besides its arguments is the immutable
    :class:`RolePolicy`, so one instance can serve all threads and tasks.
    """

    def __init__(
        self,
        policy: RolePolicy | None = None,
        entity_evaluator: EntityPermissionEvaluator | None = None,
        *,
        log_denials: bool = True,
    ) -> None:
        super().__init__(log_denials=log_denials)
        self._policy = policy or default_policy()
        self._entity = entity_evaluator or EntityPermissionEvaluator(
            self._policy, log_denials=log_denials
        )

    @property
    def policy(self) -> RolePolicy:
        return self._policy

    def general_permissions(self, principal: Principal | None) -> frozenset[PermissionKind]:
        return general_permissions(principal, self._policy)

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
        if resource is not None:
            return self._entity.has_permission(principal, kind, resource)
        if kind in self.general_permissions(principal):
            return True
        return self._deny(principal, kind, resource, "missing_grant")


_DEFAULT_EVALUATOR = UserPermissionEvaluator()


def default_evaluator() -> UserPermissionEvaluator:
    return _DEFAULT_EVALUATOR


def has_permission(
    principal: Principal | None,
    kind: PermissionKind | None,
    resource: Any = None,
) -> bool:
    """Module-level shortcut for ``default_evaluator().has_permission(...)``."""
    return _DEFAULT_EVALUATOR.has_permission(principal, kind, resource)


__all__ = ["UserPermissionEvaluator", "default_evaluator", "has_permission"]
