"""Kernel security – RolePolicy.

Maps each :class:`Role` to its default set of :class:`PermissionKind`\\ s.
The table is built once, checked once and read-only afterwards, so a single
instance is shared by every request without locking.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping

from ddfinance_access.kernel.errors import InvariantViolationError
from ddfinance_access.kernel.security.permissions import (
    ADMIN_ONLY_PERMISSIONS,
    ALL_PERMISSIONS,
    PermissionKind,
)
from ddfinance_access.kernel.security.roles import Role

_ACCOUNT_BASICS: frozenset[PermissionKind] = frozenset(
    {
        PermissionKind.VIEW_ACCOUNT,
        PermissionKind.EDIT_MY_DETAILS,
        PermissionKind.UPDATE_MY_PASSWORD,
        PermissionKind.CREATE_USER,
    }
)

DEFAULT_ROLE_PERMISSIONS: Mapping[Role, frozenset[PermissionKind]] = MappingProxyType(
    {
        Role.GUEST: _ACCOUNT_BASICS | {PermissionKind.REQUEST_CLIENT_ACCOUNT},
        Role.CLIENT: _ACCOUNT_BASICS
        | {
            PermissionKind.VIEW_INVESTMENT,
            PermissionKind.MESSAGE_PARTNER,
        },
        Role.EMPLOYEE: _ACCOUNT_BASICS
        | {
            PermissionKind.CREATE_INVESTMENT,
            PermissionKind.EDIT_INVESTMENT,
            PermissionKind.CREATE_CLIENT,
            PermissionKind.EDIT_CLIENT,
            PermissionKind.VIEW_CLIENT,
            PermissionKind.VIEW_CLIENTS,
            PermissionKind.ASSIGN_CLIENT,
            PermissionKind.VIEW_EMPLOYEE,
            PermissionKind.VIEW_EMPLOYEES,
        },
        Role.ADMIN: ALL_PERMISSIONS,
    }
)

_EMPTY: frozenset[PermissionKind] = frozenset()


class RolePolicy:
    """Immutable role → default-permissions table.

    Construction enforces two invariants and raises
    :class:`InvariantViolationError` when either fails:

    * ADMIN's set equals the whole :class:`PermissionKind` catalog;
    * no other role holds an admin-only permission by default.

    Example::

        policy = RolePolicy()
        PermissionKind.VIEW_CLIENT in policy.permissions_for(Role.EMPLOYEE)  # True
    """

    def __init__(
        self,
        table: Mapping[Role, Iterable[PermissionKind]] | None = None,
    ) -> None:
        source = DEFAULT_ROLE_PERMISSIONS if table is None else table
        self._table: Mapping[Role, frozenset[PermissionKind]] = MappingProxyType(
            {role: frozenset(source.get(role, ())) for role in Role}
        )
        self._check_invariants()

    def _check_invariants(self) -> None:
        admin = self._table[Role.ADMIN]
        if admin != ALL_PERMISSIONS:
            missing = sorted(p.value for p in ALL_PERMISSIONS - admin)
            raise InvariantViolationError(
                "ADMIN must hold the full permission catalog",
                detail={"missing": missing},
            )
        for role, perms in self._table.items():
            if role is Role.ADMIN:
                continue
            leaked = perms & ADMIN_ONLY_PERMISSIONS
            if leaked:
                raise InvariantViolationError(
                    f"{role.value} must not hold admin-only permissions by default",
                    detail={"role": role.value, "permissions": sorted(p.value for p in leaked)},
                )

    def permissions_for(self, role: Role | None) -> frozenset[PermissionKind]:
        """Return the default set for *role*; empty for ``None``."""
        if role is None:
            return _EMPTY
        return self._table.get(role, _EMPTY)

    def roles_granting(self, kind: PermissionKind) -> frozenset[Role]:
        """Return every role whose default set contains *kind*."""
        return frozenset(role for role, perms in self._table.items() if kind in perms)

    def as_dict(self) -> dict[str, list[str]]:
        return {role.value: sorted(p.value for p in perms) for role, perms in self._table.items()}


_DEFAULT_POLICY = RolePolicy()


def default_policy() -> RolePolicy:
    """Return the process-wide policy built from :data:`DEFAULT_ROLE_PERMISSIONS`."""
    return _DEFAULT_POLICY


__all__ = ["DEFAULT_ROLE_PERMISSIONS", "RolePolicy", "default_policy"]
