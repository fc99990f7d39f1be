"""Kernel security – guards that turn a denial into :class:`ForbiddenError`.

The evaluators answer with a boolean. Service-layer code usually wants an
exception instead, so that a denied mutation aborts the use case and the
transport layer can map it to a 403:

* :func:`check_permission`: imperative check;
* :func:`require_permission`: decorator for sync and async handlers.
"""

from __future__ import annotations

import functools
import inspect
from typing import Any, Callable, TypeVar

from ddfinance_access.kernel.errors import ForbiddenError
from ddfinance_access.kernel.security.evaluator import default_evaluator
from ddfinance_access.kernel.security.permissions import PermissionKind
from ddfinance_access.kernel.security.policy import PermissionEvaluator
from ddfinance_access.kernel.security.principal import Principal
from ddfinance_access.kernel.security.resources import describe_resource
from ddfinance_access.kernel.security.security_context import SecurityContext
from ddfinance_access.observability.logging import get_logger

F = TypeVar("F", bound=Callable[..., Any])

_log = get_logger(__name__)

ResourceResolver = Callable[..., Any]


def check_permission(
    kind: PermissionKind,
    resource: Any = None,
    *,
    principal: Principal | None = None,
    evaluator: PermissionEvaluator | None = None,
) -> Principal:
    """Raise unless the principal may perform *kind* on *resource*.

    *principal* defaults to :meth:`SecurityContext.require`, which raises
    :class:`UnauthorizedError` when nobody is authenticated. Returns the
    principal that was checked.
    """
    if principal is None:
        principal = SecurityContext.require()
    evaluator = evaluator or default_evaluator()
    if evaluator.has_permission(principal, kind, resource):
        return principal

    target = describe_resource(resource)
    message = f"Permission {kind} denied"
    if target is not None:
        message = f"Permission {kind} denied on {target}"
    error = ForbiddenError(message, permission=str(kind), resource=target)
    _log.info(
        "access.forbidden",
        principal_id=principal.id,
        role=None if principal.role is None else principal.role.value,
        **error.log_fields(),
    )
    raise error


def require_permission(
    kind: PermissionKind,
    *,
    resource_from: ResourceResolver | None = None,
    evaluator: PermissionEvaluator | None = None,
) -> Callable[[F], F]:
    """Decorator enforcing *kind* against the current :class:`SecurityContext`.

    ``resource_from`` receives the decorated call's arguments and returns the
    :class:`ResourceRef` to check, or ``None`` for a resource-free check.

    Example::

        @require_permission(
            PermissionKind.EDIT_CLIENT,
            resource_from=lambda cmd: ClientRef(cmd.client_id, assigned_employee_id=cmd.employee_id),
        )
        async def edit_client(cmd: EditClientCommand) -> None:
            ...
    """

    def _resolve(args: tuple[Any, ...], kwargs: dict[str, Any]) -> Any:
        if resource_from is None:
            return None
        return resource_from(*args, **kwargs)

    def decorator(fn: F) -> F:
        if inspect.iscoroutinefunction(fn):

            @functools.wraps(fn)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                check_permission(kind, _resolve(args, kwargs), evaluator=evaluator)
                return await fn(*args, **kwargs)

            return async_wrapper  # type: ignore[return-value]

        @functools.wraps(fn)
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            check_permission(kind, _resolve(args, kwargs), evaluator=evaluator)
            return fn(*args, **kwargs)

        return sync_wrapper  # type: ignore[return-value]

    return decorator


__all__ = ["check_permission", "require_permission"]
