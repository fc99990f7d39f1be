"""Kernel security – PermissionEvaluator port and shared grant resolution."""
from __future__ import annotations

import abc
from typing import Any

from ddfinance_access.kernel.security.permissions import PermissionKind
from ddfinance_access.kernel.security.principal import Principal
from ddfinance_access.kernel.security.resources import describe_resource
from ddfinance_access.kernel.security.role_policy import RolePolicy
from ddfinance_access.observability.logging import get_logger

_log = get_logger(__name__)


def general_permissions(principal: Principal | None, policy: RolePolicy) -> frozenset[PermissionKind]:
    """Role defaults ∪ custom grants: the principal's resource-free permissions."""
    if principal is None:
        return frozenset()
    return policy.permissions_for(principal.role) | principal.custom_grants


class PermissionEvaluator(abc.ABC):
    """Port: decide whether a principal may perform an action.

    A denial is a plain ``False``; implementations never raise for it.
    """

    def __init__(self, *, log_denials: bool = True) -> None:
        self._log_denials = log_denials

    @abc.abstractmethod
    def has_permission(
        self,
        principal: Principal | None,
        kind: PermissionKind | None,
        resource: Any = None,
    ) -> bool: ...

    def has_any_permission(self, principal: Principal | None, *kinds: PermissionKind) -> bool:
        """True if *principal* holds at least one of *kinds* (no resource)."""
        if principal is None or not kinds:
            return False
        return any(self.has_permission(principal, kind) for kind in kinds)

    def has_all_permissions(self, principal: Principal | None, *kinds: PermissionKind) -> bool:
        """True if *principal* holds every one of *kinds* (no resource)."""
        if principal is None or not kinds:
            return False
        return all(self.has_permission(principal, kind) for kind in kinds)

    def _deny(
        self,
        principal: Principal | None,
        kind: PermissionKind | None,
        resource: Any,
        reason: str,
    ) -> bool:
        if self._log_denials:
            _log.debug(
                "access.denied",
                evaluator=type(self).__name__,
                principal_id=None if principal is None else principal.id,
                role=None if principal is None or principal.role is None else principal.role.value,
                permission=None if kind is None else str(kind),
                resource=describe_resource(resource),
                reason=reason,
            )
        return False


__all__ = ["PermissionEvaluator", "general_permissions"]
