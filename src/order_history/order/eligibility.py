"""Return and cancel eligibility for the items of a fulfillment group.

Both checks look at the order's feature flags (``can_return`` /
``can_cancel``) and at status on two levels. A group's status may lag the
order's aggregate status, so an item is returnable once either its own group
or the whole order has arrived. Cancellation is blocked as soon as the group
has started physical fulfillment.

The two outcomes are not forced to be exclusive: with today's status
vocabulary an item cannot be both delivered and pre-transit, but callers may
legitimately see both flags false.
"""

from dataclasses import dataclass
from datetime import date

from order_history.order.dates import parse_order_date
from order_history.order.fulfillment import FulfillmentGroup
from order_history.order.raw_order import RawOrder
from order_history.order.status import OrderStatus

# Statuses at which goods are in the customer's hands
_RETURNABLE_STATUSES = {
    OrderStatus.DELIVERED.value,
    OrderStatus.PICKED_UP.value,
}

# Group statuses at which physical fulfillment has begun or completed
_NON_CANCELLABLE_GROUP_STATUSES = {
    OrderStatus.DELIVERED.value,
    OrderStatus.PICKED_UP.value,
    OrderStatus.IN_TRANSIT.value,
}


def can_return_item(order: RawOrder, group: FulfillmentGroup) -> bool:
    if not order.can_return:
        return False
    return group.status in _RETURNABLE_STATUSES or order.status in _RETURNABLE_STATUSES


def can_cancel_item(order: RawOrder, group: FulfillmentGroup) -> bool:
    if not order.can_cancel:
        return False
    if order.status == OrderStatus.CANCELLED.value:
        return False
    return group.status not in _NON_CANCELLABLE_GROUP_STATUSES


# ---------------------------------------------------------------------------
# Return window
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class ReturnWindow:
    """Where today falls relative to the order's return deadline.

    ``deadline`` is None when the order has no (parseable) deadline; such a
    window never closes.
    """

    deadline: date | None
    days_remaining: int | None
    is_open: bool


def return_window(order: RawOrder, today: date) -> ReturnWindow:
    deadline = parse_order_date(order.return_deadline)
    if deadline is None:
        return ReturnWindow(deadline=None, days_remaining=None, is_open=True)
    days_remaining = (deadline - today).days
    return ReturnWindow(
        deadline=deadline,
        days_remaining=max(0, days_remaining),
        is_open=days_remaining >= 0,
    )


@dataclass(frozen=True)
class ItemEligibility:
    can_return: bool
    can_cancel: bool
    return_window: ReturnWindow


def item_eligibility(order: RawOrder, group: FulfillmentGroup, today: date) -> ItemEligibility:
    """Eligibility of an item in ``group`` as of ``today``.

    Unlike ``can_return_item`` this also closes returns once the deadline has
    passed.
    """
    window = return_window(order, today)
    return ItemEligibility(
        can_return=can_return_item(order, group) and window.is_open,
        can_cancel=can_cancel_item(order, group),
        return_window=window,
    )
