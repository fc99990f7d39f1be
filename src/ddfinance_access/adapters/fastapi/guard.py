"""FastAPI adapter – PermissionGuard dependency.

Usage::

    async def load_client(request: Request) -> ClientRef:
        client = await clients.get(int(request.path_params["client_id"]))
        return ClientRef(client.id, client.user_id, client.employee_id)

    @app.get("/clients/{client_id}")
    async def get_client(
        client_id: int,
        principal: Principal = Depends(PermissionGuard(PermissionKind.VIEW_CLIENT, load_client)),
    ): ...

Relationship lookups happen in the resolver, before the evaluator runs.
"""
import inspect
from typing import Any, Callable, Optional

from fastapi import Request

from ddfinance_access.kernel.errors import UnauthorizedError
from ddfinance_access.kernel.security.guards import check_permission
from ddfinance_access.kernel.security.permissions import PermissionKind
from ddfinance_access.kernel.security.policy import PermissionEvaluator
from ddfinance_access.kernel.security.principal import Principal
from ddfinance_access.kernel.security.security_context import SecurityContext

RequestResourceResolver = Callable[[Request], Any]


def current_principal(request: Request) -> Principal:
    """Principal set by the authentication layer on ``request.state``.

    Falls back to the :class:`SecurityContext`; raises
    :class:`UnauthorizedError` (401) when neither holds one.
    """
    principal = getattr(request.state, "principal", None)
    if principal is None:
        principal = SecurityContext.get_current()
    if principal is None:
        raise UnauthorizedError("No authenticated principal in request")
    return principal


class PermissionGuard:
    """FastAPI dependency that allows the request or raises ``ForbiddenError``.

    Parameters
    ----------
    kind:
        Permission required by the route.
    resource_resolver:
        Optional sync or async callable building the target
        :class:`ResourceRef` from the request.
    evaluator:
        Evaluator to ask; defaults to the process-wide one.
    """

    def __init__(
        self,
        kind: PermissionKind,
        resource_resolver: Optional[RequestResourceResolver] = None,
        *,
        evaluator: Optional[PermissionEvaluator] = None,
    ) -> None:
        self._kind = kind
        self._resolver = resource_resolver
        self._evaluator = evaluator

    async def __call__(self, request: Request) -> Principal:
        principal = current_principal(request)
        resource = None
        if self._resolver is not None:
            resource = self._resolver(request)
            if inspect.isawaitable(resource):
                resource = await resource
        return check_permission(
            self._kind,
            resource,
            principal=principal,
            evaluator=self._evaluator,
        )


__all__ = ["PermissionGuard", "RequestResourceResolver", "current_principal"]
