"""
ddfinance_access – access-control core of the Due Diligence Finance platform.

Import path convention::

    from ddfinance_access.kernel.security import PermissionKind, Principal, has_permission
    from ddfinance_access.kernel.security import ClientRef, InvestmentRef
    from ddfinance_access.adapters.fastapi import PermissionGuard

The library never configures logging itself; call
``ddfinance_access.config.configure_logging`` (or your own ``logging`` setup)
to see ``access.denied`` and ``access.forbidden`` events.
"""
import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
__all__ = ["__version__"]
