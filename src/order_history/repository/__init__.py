"""Order repository factory.

Provides get_order_repository() / set_order_repository() to swap adapters:
- FakeOrderRepository (in-memory sample orders) for development and testing
- ProjectionOrderRepository (Protean read model) otherwise

The adapter is chosen by the ORDER_REPOSITORY environment variable.
"""

import os

from order_history.repository.port import OrderRepository

_current_repository: OrderRepository | None = None


def get_order_repository() -> OrderRepository:
    """Return the configured order repository (singleton). Defaults to the fake."""
    global _current_repository
    if _current_repository is None:
        adapter = os.environ.get("ORDER_REPOSITORY", "fake")
        if adapter == "fake":
            from order_history.repository.fake_adapter import FakeOrderRepository

            _current_repository = FakeOrderRepository()
        elif adapter == "projection":
            from order_history.repository.projection_adapter import ProjectionOrderRepository

            _current_repository = ProjectionOrderRepository()
        else:
            raise ValueError(f"Unknown order repository adapter: {adapter}")
    return _current_repository


def set_order_repository(repository: OrderRepository) -> None:
    """Override the active order repository (useful for tests)."""
    global _current_repository
    _current_repository = repository


def reset_order_repository() -> None:
    """Reset to the configured default."""
    global _current_repository
    _current_repository = None
