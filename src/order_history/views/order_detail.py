"""Order Detail view — one order, grouped by how its items are fulfilled.

``build_order_detail`` is a pure composition of the normalizer, eligibility
evaluator and status resolver. ``OrderDetailSession`` wraps it with the
view's lifecycle: it stays LOADING until the repository fetch resolves, and a
fetch that resolves after the view was closed is dropped.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum

import structlog

from order_history.order.eligibility import ReturnWindow, item_eligibility, return_window
from order_history.order.fulfillment import FulfillmentGroup, FulfillmentItem, flatten_items, normalize
from order_history.order.layout import DEFAULT_GAP_PX, DEFAULT_TILE_PX, LayoutResult, ThumbnailStrip
from order_history.order.raw_order import RawOrder
from order_history.order.status import StatusBadge, status_badge
from order_history.repository.port import OrderRepository

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class ItemView:
    item: FulfillmentItem
    can_return: bool
    can_cancel: bool


@dataclass(frozen=True)
class GroupView:
    group: FulfillmentGroup
    badge: StatusBadge
    items: tuple[ItemView, ...]


@dataclass(frozen=True)
class OrderDetailView:
    order: RawOrder
    badge: StatusBadge
    groups: tuple[GroupView, ...]
    return_window: ReturnWindow

    @property
    def items(self) -> tuple[FulfillmentItem, ...]:
        return flatten_items(group_view.group for group_view in self.groups)

    @property
    def item_count(self) -> int:
        return sum(len(group_view.items) for group_view in self.groups)


def build_order_detail(order: RawOrder, today: date) -> OrderDetailView:
    group_views = []
    for group in normalize(order):
        eligibility = item_eligibility(order, group, today)
        group_views.append(
            GroupView(
                group=group,
                badge=status_badge(group.status),
                items=tuple(
                    ItemView(item=item, can_return=eligibility.can_return, can_cancel=eligibility.can_cancel)
                    for item in group.items
                ),
            )
        )
    return OrderDetailView(
        order=order,
        badge=status_badge(order.status),
        groups=tuple(group_views),
        return_window=return_window(order, today),
    )


# ---------------------------------------------------------------------------
# Session
# ---------------------------------------------------------------------------
class DetailState(Enum):
    LOADING = "loading"
    READY = "ready"
    NOT_FOUND = "not_found"
    CLOSED = "closed"


class OrderDetailSession:
    """Lifecycle of one Order Detail view.

    Width events may arrive before or after the order loads; the thumbnail
    strip keeps the last width and lays out once items are known.
    """

    def __init__(
        self,
        repository: OrderRepository,
        order_number: str,
        today: date | None = None,
        tile: float = DEFAULT_TILE_PX,
        gap: float = DEFAULT_GAP_PX,
    ):
        self.repository = repository
        self.order_number = order_number
        self.today = today
        self.state = DetailState.LOADING
        self.view: OrderDetailView | None = None
        self.thumbnails = ThumbnailStrip(0, tile, gap)

    async def load(self) -> OrderDetailView | None:
        order = await self.repository.get_order(self.order_number)

        if self.state is DetailState.CLOSED:
            logger.debug("Discarding order fetched after view closed", order_number=self.order_number)
            return None

        if order is None:
            self.state = DetailState.NOT_FOUND
            logger.info("Order not found", order_number=self.order_number)
            return None

        self.view = build_order_detail(order, self.today or date.today())
        self.thumbnails.set_items(self.view.item_count)
        self.state = DetailState.READY
        return self.view

    def resize(self, width: float) -> LayoutResult | None:
        if self.state is DetailState.CLOSED:
            return None
        return self.thumbnails.resize(width)

    def close(self) -> None:
        self.state = DetailState.CLOSED
        self.view = None
