"""Order repository port — the data-fetch boundary of the Order History views.

Adapters only have to supply single orders and a customer's orders; listing,
summaries and recent orders are derived here with the order query engine so
every adapter filters, sorts and pages the same way.

All methods are coroutines: consumers treat an order as "loading" until the
fetch resolves.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from order_history.order.query import OrderFilters, SortKey, list_orders, sort_orders
from order_history.order.raw_order import OrderSummary, RawOrder, summarize


@dataclass(frozen=True)
class ListResult:
    """One page of a customer's orders plus the number of matching orders."""

    items: tuple[RawOrder, ...]
    total: int
    page: int = 1
    page_size: int = 10


class OrderRepository(ABC):
    """Abstract interface for order repositories."""

    @abstractmethod
    async def get_order(self, order_number: str) -> RawOrder | None:
        """Fetch one order. ``None`` means "not found", not an error."""
        ...

    @abstractmethod
    async def customer_orders(self, customer_id: str) -> list[RawOrder]:
        """All orders placed by a customer, in storage order."""
        ...

    async def list_orders(
        self,
        customer_id: str,
        filters: OrderFilters | None = None,
        sort: SortKey = SortKey.DATE_DESC,
        page: int = 1,
        page_size: int = 10,
    ) -> ListResult:
        orders = await self.customer_orders(customer_id)
        result = list_orders(orders, filters, sort, page, page_size)
        return ListResult(items=result.items, total=result.total, page=result.page, page_size=result.page_size)

    async def get_order_summaries(self, customer_id: str) -> list[OrderSummary]:
        orders = await self.customer_orders(customer_id)
        return [summarize(order) for order in sort_orders(orders, SortKey.DATE_DESC)]

    async def get_recent_orders(self, customer_id: str, limit: int = 5) -> list[RawOrder]:
        orders = await self.customer_orders(customer_id)
        return sort_orders(orders, SortKey.DATE_DESC)[:limit]
