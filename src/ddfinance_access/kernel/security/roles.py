"""Kernel security – Role."""
from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Closed set of account roles, declared in privilege order.

    The order (GUEST < CLIENT < EMPLOYEE < ADMIN) documents the direction of
    privilege and drives the upgrade helpers. Permission decisions never use
    it; they read the explicit per-role sets in
    :class:`~ddfinance_access.kernel.security.role_policy.RolePolicy`.
    """

    GUEST = "GUEST"
    CLIENT = "CLIENT"
    EMPLOYEE = "EMPLOYEE"
    ADMIN = "ADMIN"

    def __str__(self) -> str:
        return self.value

    @property
    def rank(self) -> int:
        return _ORDER.index(self)

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]

    @property
    def is_admin(self) -> bool:
        return self is Role.ADMIN

    @property
    def can_manage_users(self) -> bool:
        return self in (Role.EMPLOYEE, Role.ADMIN)

    @property
    def can_approve_client_upgrades(self) -> bool:
        return self in (Role.EMPLOYEE, Role.ADMIN)

    def is_higher_than_or_equal_to(self, other: "Role") -> bool:
        return self.rank >= other.rank

    def can_upgrade_to(self, target: "Role") -> bool:
        """An upgrade must move strictly up the order."""
        return self.rank < target.rank

    @classmethod
    def default(cls) -> "Role":
        """Role given to newly registered accounts."""
        return cls.GUEST


_ORDER: tuple[Role, ...] = (Role.GUEST, Role.CLIENT, Role.EMPLOYEE, Role.ADMIN)

_DESCRIPTIONS: dict[Role, str] = {
    Role.GUEST: "Guest user with limited access, can request an account upgrade",
    Role.CLIENT: "Client who can view their investments and account details",
    Role.EMPLOYEE: "Employee who manages clients and creates investments",
    Role.ADMIN: "Administrator with full system access and user management",
}


__all__ = ["Role"]
