"""Kernel security – PermissionKind catalog.

The catalog is closed: every capability the platform checks is a member of
:class:`PermissionKind`. ``ALL_PERMISSIONS`` is derived from the enum itself,
so "ADMIN holds everything" is a structural fact rather than a hand-kept list.
"""
from __future__ import annotations

from enum import Enum


class PermissionKind(str, Enum):
    """Named capability checked by the evaluators."""

    # Account level
    VIEW_ACCOUNT = "VIEW_ACCOUNT"
    VIEW_ACCOUNTS = "VIEW_ACCOUNTS"
    EDIT_MY_DETAILS = "EDIT_MY_DETAILS"
    UPDATE_MY_PASSWORD = "UPDATE_MY_PASSWORD"
    CREATE_USER = "CREATE_USER"

    # Admin level
    EDIT_USER = "EDIT_USER"
    DELETE_USER = "DELETE_USER"
    EDIT_EMPLOYEE = "EDIT_EMPLOYEE"
    CREATE_EMPLOYEE = "CREATE_EMPLOYEE"
    UPDATE_OTHER_PASSWORD = "UPDATE_OTHER_PASSWORD"
    ASSIGN_PERMISSIONS = "ASSIGN_PERMISSIONS"

    # Employee level
    CREATE_CLIENT = "CREATE_CLIENT"
    EDIT_CLIENT = "EDIT_CLIENT"
    VIEW_CLIENT = "VIEW_CLIENT"
    VIEW_CLIENTS = "VIEW_CLIENTS"
    ASSIGN_CLIENT = "ASSIGN_CLIENT"
    CREATE_INVESTMENT = "CREATE_INVESTMENT"
    EDIT_INVESTMENT = "EDIT_INVESTMENT"
    VIEW_EMPLOYEE = "VIEW_EMPLOYEE"
    VIEW_EMPLOYEES = "VIEW_EMPLOYEES"

    # Client level
    VIEW_INVESTMENT = "VIEW_INVESTMENT"
    MESSAGE_PARTNER = "MESSAGE_PARTNER"

    # Guest level
    REQUEST_CLIENT_ACCOUNT = "REQUEST_CLIENT_ACCOUNT"

    def __str__(self) -> str:
        return self.value

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]

    @property
    def is_admin_only(self) -> bool:
        return self in ADMIN_ONLY_PERMISSIONS

    @classmethod
    def parse(cls, name: "PermissionKind | str") -> "PermissionKind":
        """Return the kind named *name* (case-insensitive).

        Raises :class:`~ddfinance_access.kernel.errors.UnknownPermissionError`
        for anything outside the catalog.
        """
        if isinstance(name, cls):
            return name
        if isinstance(name, str):
            try:
                return cls[name.strip().upper()]
            except KeyError:
                pass
        from ddfinance_access.kernel.errors import UnknownPermissionError

        raise UnknownPermissionError(name)


_DESCRIPTIONS: dict[PermissionKind, str] = {
    PermissionKind.VIEW_ACCOUNT: "View the details of your own user account.",
    PermissionKind.VIEW_ACCOUNTS: "View all user accounts and their details.",
    PermissionKind.EDIT_MY_DETAILS: "Edit the details of your own user account.",
    PermissionKind.UPDATE_MY_PASSWORD: "Update the password of your own user account.",
    PermissionKind.CREATE_USER: "Create a new user account.",
    PermissionKind.EDIT_USER: "Edit the details of any user account.",
    PermissionKind.DELETE_USER: "Remove a user account from the system.",
    PermissionKind.EDIT_EMPLOYEE: "Edit the details of an employee profile.",
    PermissionKind.CREATE_EMPLOYEE: "Create a new employee profile.",
    PermissionKind.UPDATE_OTHER_PASSWORD: "Update the password of another user account.",
    PermissionKind.ASSIGN_PERMISSIONS: "Grant or remove custom permissions on a user account.",
    PermissionKind.CREATE_CLIENT: "Create a client profile by upgrading a guest account.",
    PermissionKind.EDIT_CLIENT: "Edit the details of an existing client profile.",
    PermissionKind.VIEW_CLIENT: "View the details of a specific client profile.",
    PermissionKind.VIEW_CLIENTS: "List all client profiles.",
    PermissionKind.ASSIGN_CLIENT: "Assign a client to an employee partner.",
    PermissionKind.CREATE_INVESTMENT: "Create an investment for a client.",
    PermissionKind.EDIT_INVESTMENT: "Edit an existing investment of a client.",
    PermissionKind.VIEW_EMPLOYEE: "View the details of a specific employee profile.",
    PermissionKind.VIEW_EMPLOYEES: "List all employee profiles.",
    PermissionKind.VIEW_INVESTMENT: "View the details of one of your investments.",
    PermissionKind.MESSAGE_PARTNER: "Message your assigned client or employee partner.",
    PermissionKind.REQUEST_CLIENT_ACCOUNT: "Request an upgrade to client status with the firm.",
}

ALL_PERMISSIONS: frozenset[PermissionKind] = frozenset(PermissionKind)

ADMIN_ONLY_PERMISSIONS: frozenset[PermissionKind] = frozenset(
    {
        PermissionKind.EDIT_USER,
        PermissionKind.DELETE_USER,
        PermissionKind.EDIT_EMPLOYEE,
        PermissionKind.CREATE_EMPLOYEE,
        PermissionKind.UPDATE_OTHER_PASSWORD,
        PermissionKind.VIEW_ACCOUNTS,
    }
)


__all__ = ["ADMIN_ONLY_PERMISSIONS", "ALL_PERMISSIONS", "PermissionKind"]
