"""Kernel security – Principal."""
from __future__ import annotations

import dataclasses
from typing import Iterable

from ddfinance_access.kernel.security.permissions import PermissionKind
from ddfinance_access.kernel.security.roles import Role


@dataclasses.dataclass(frozen=True)
class Principal:
    """Identity under evaluation for one permission check.

    ``custom_grants`` are additive: they are unioned with the role defaults
    and can never remove one. ``employee_id`` is the Employee profile bound to
    this account, present only for employees.
    """

    id: int
    role: Role | None = None
    custom_grants: frozenset[PermissionKind] = frozenset()
    employee_id: int | None = None

    def __post_init__(self) -> None:
        # role names read from storage become Role members
        if isinstance(self.role, str) and not isinstance(self.role, Role):
            object.__setattr__(self, "role", Role(self.role.strip().upper()))

    @classmethod
    def of(
        cls,
        id: int,  # noqa: A002
        role: Role | str | None = None,
        custom_grants: Iterable[PermissionKind | str] = (),
        employee_id: int | None = None,
    ) -> "Principal":
        """Build a principal from loosely typed values (names from storage)."""
        return cls(
            id=id,
            role=role,
            custom_grants=frozenset(PermissionKind.parse(g) for g in custom_grants),
            employee_id=employee_id,
        )

    @property
    def is_admin(self) -> bool:
        return self.role is Role.ADMIN


__all__ = ["Principal"]
