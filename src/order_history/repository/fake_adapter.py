"""Fake order repository — in-memory orders for development and testing.

Seeded with the storefront's sample account orders unless given its own.
An optional artificial latency makes the "loading" state observable.
"""

import asyncio

from order_history.order.raw_order import RawOrder
from order_history.repository.port import OrderRepository
from order_history.repository.seed import seed_orders


class FakeOrderRepository(OrderRepository):
    def __init__(self, orders=None):
        self._orders: dict[str, RawOrder] = {}
        for order in seed_orders() if orders is None else orders:
            self.add(order)
        self.latency = 0.0

    def configure(self, latency: float = 0.0):
        """Configure the fake repository behavior for testing."""
        self.latency = latency

    def add(self, order: RawOrder) -> None:
        self._orders[order.order_number] = order

    async def _wait(self):
        if self.latency:
            await asyncio.sleep(self.latency)

    async def get_order(self, order_number: str) -> RawOrder | None:
        await self._wait()
        return self._orders.get(order_number)

    async def customer_orders(self, customer_id: str) -> list[RawOrder]:
        await self._wait()
        return [order for order in self._orders.values() if order.customer_id == customer_id]
