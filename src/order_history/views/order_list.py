"""Order History list view — filtered, sorted, paged rows with thumbnails."""

import math
from dataclasses import dataclass

from order_history.order.fulfillment import FulfillmentItem, flatten_items, normalize
from order_history.order.layout import DEFAULT_GAP_PX, DEFAULT_TILE_PX, LayoutResult, layout
from order_history.order.query import OrderFilters, SortKey
from order_history.order.raw_order import RawOrder
from order_history.order.status import StatusBadge, status_badge
from order_history.repository.port import ListResult, OrderRepository


@dataclass(frozen=True)
class OrderHistoryRow:
    order: RawOrder
    badge: StatusBadge
    thumbnails: tuple[FulfillmentItem, ...]
    layout: LayoutResult | None = None

    @property
    def visible_thumbnails(self) -> tuple[FulfillmentItem, ...]:
        if self.layout is None:
            return self.thumbnails
        return self.thumbnails[: self.layout.visible_count]


@dataclass(frozen=True)
class OrderHistoryPage:
    rows: tuple[OrderHistoryRow, ...]
    total: int
    page: int
    page_size: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.page_size)

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.page > 1


def build_history_row(
    order: RawOrder,
    row_width: float | None = None,
    tile: float = DEFAULT_TILE_PX,
    gap: float = DEFAULT_GAP_PX,
) -> OrderHistoryRow:
    """A row without a measured width shows every thumbnail and no layout."""
    thumbnails = flatten_items(normalize(order))
    row_layout = None
    if row_width is not None and thumbnails:
        row_layout = layout(len(thumbnails), row_width, tile, gap)
    return OrderHistoryRow(
        order=order,
        badge=status_badge(order.status),
        thumbnails=thumbnails,
        layout=row_layout,
    )


def build_history_page(
    result: ListResult,
    row_width: float | None = None,
    tile: float = DEFAULT_TILE_PX,
    gap: float = DEFAULT_GAP_PX,
) -> OrderHistoryPage:
    return OrderHistoryPage(
        rows=tuple(build_history_row(order, row_width, tile, gap) for order in result.items),
        total=result.total,
        page=result.page,
        page_size=result.page_size,
    )


async def load_history_page(
    repository: OrderRepository,
    customer_id: str,
    filters: OrderFilters | None = None,
    sort: SortKey = SortKey.DATE_DESC,
    page: int = 1,
    page_size: int = 10,
    row_width: float | None = None,
) -> OrderHistoryPage:
    result = await repository.list_orders(customer_id, filters, sort, page, page_size)
    return build_history_page(result, row_width)
