"""Testing support – principal factories, fixtures and hypothesis strategies.

Register the fixtures in your ``conftest.py``::

    pytest_plugins = ["ddfinance_access.testing.fixtures"]
"""

from ddfinance_access.testing.fixtures.principal import build_principal

__all__ = ["build_principal"]
