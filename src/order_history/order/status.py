"""Order statuses and their badge presentation.

The same mapping applies to an order's aggregate status and to a single
fulfillment group's status: the resolver never needs to know which one it
was given.
"""

from dataclasses import dataclass
from enum import Enum


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------
class OrderStatus(Enum):
    DELIVERED = "Delivered"
    IN_TRANSIT = "In Transit"
    PROCESSING = "Processing"
    CANCELLED = "Cancelled"
    PARTIALLY_DELIVERED = "Partially Delivered"
    READY_FOR_PICKUP = "Ready for Pickup"
    PICKED_UP = "Picked Up"


class BadgeSemantic(Enum):
    SUCCESS = "success"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    NEUTRAL = "neutral"


_BADGE_SEMANTICS = {
    OrderStatus.DELIVERED.value: BadgeSemantic.SUCCESS,
    OrderStatus.PICKED_UP.value: BadgeSemantic.SUCCESS,
    OrderStatus.PARTIALLY_DELIVERED.value: BadgeSemantic.WARNING,
    OrderStatus.IN_TRANSIT.value: BadgeSemantic.INFO,
    OrderStatus.READY_FOR_PICKUP.value: BadgeSemantic.INFO,
    OrderStatus.CANCELLED.value: BadgeSemantic.ERROR,
}

_BADGE_ICONS = {
    BadgeSemantic.SUCCESS: "check",
    BadgeSemantic.ERROR: "x",
}


@dataclass(frozen=True)
class StatusBadge:
    """Everything a view needs to render a status pill."""

    semantic: BadgeSemantic
    label: str
    css_class: str
    icon: str | None = None


def badge_class(status: "str | OrderStatus | None") -> BadgeSemantic:
    """Map a status to its badge semantic. Unknown statuses are neutral."""
    if isinstance(status, OrderStatus):
        status = status.value
    return _BADGE_SEMANTICS.get(status, BadgeSemantic.NEUTRAL)


def status_badge(status: "str | OrderStatus | None") -> StatusBadge:
    semantic = badge_class(status)
    if isinstance(status, OrderStatus):
        status = status.value
    return StatusBadge(
        semantic=semantic,
        label=status or "",
        css_class=f"badge-{semantic.value}",
        icon=_BADGE_ICONS.get(semantic),
    )
