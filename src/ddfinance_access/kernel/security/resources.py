"""Kernel security – ResourceRef variants.

Each ref is a flat, frozen record carrying just enough denormalised identity
for its ownership predicate. Callers resolve relationships (which employee a
client is assigned to, which clients an employee serves) *before* building a
ref; the evaluators never look anything up.
"""
from __future__ import annotations

import dataclasses
from enum import Enum
from typing import ClassVar, Union


class ResourceKind(str, Enum):
    CLIENT = "client"
    EMPLOYEE = "employee"
    INVESTMENT = "investment"
    USER_ACCOUNT = "user_account"


@dataclasses.dataclass(frozen=True)
class ClientRef:
    """A client profile and the employee it is currently assigned to."""

    kind: ClassVar[ResourceKind] = ResourceKind.CLIENT

    id: int
    owning_user_id: int | None = None
    assigned_employee_id: int | None = None

    def __str__(self) -> str:
        return f"{self.kind.value}:{self.id}"


@dataclasses.dataclass(frozen=True)
class EmployeeRef:
    """An employee profile.

    ``assigned_client_user_ids`` holds the user-account ids of the clients
    currently assigned to this employee. ``None`` means the caller did not
    resolve the relationship.
    """

    kind: ClassVar[ResourceKind] = ResourceKind.EMPLOYEE

    id: int
    owning_user_id: int | None = None
    assigned_client_user_ids: frozenset[int] | None = None

    def __str__(self) -> str:
        return f"{self.kind.value}:{self.id}"


@dataclasses.dataclass(frozen=True)
class InvestmentRef:
    """An investment, its owning client's user id and that client's employee."""

    kind: ClassVar[ResourceKind] = ResourceKind.INVESTMENT

    id: int
    owning_client_user_id: int | None = None
    assigned_employee_id: int | None = None

    def __str__(self) -> str:
        return f"{self.kind.value}:{self.id}"


@dataclasses.dataclass(frozen=True)
class UserAccountRef:
    kind: ClassVar[ResourceKind] = ResourceKind.USER_ACCOUNT

    id: int

    def __str__(self) -> str:
        return f"{self.kind.value}:{self.id}"


ResourceRef = Union[ClientRef, EmployeeRef, InvestmentRef, UserAccountRef]


def describe_resource(resource: object) -> str | None:
    """Return ``"kind:id"`` for a known ref, the type name otherwise."""
    if resource is None:
        return None
    if isinstance(resource, (ClientRef, EmployeeRef, InvestmentRef, UserAccountRef)):
        return str(resource)
    return type(resource).__name__


__all__ = [
    "ClientRef",
    "EmployeeRef",
    "InvestmentRef",
    "ResourceKind",
    "ResourceRef",
    "UserAccountRef",
    "describe_resource",
]
