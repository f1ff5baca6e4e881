"""Fulfillment normalizer — raw order → fulfillment groups.

Every order is projected into a non-empty, ordered sequence of fulfillment
groups. Each group is either a shipment or an in-store pickup (BOPIS) and
carries its own status, its subset of the order's line items, and exactly one
type-specific info block.

Rules, first match wins:
    1. The order has shipping groups → one fulfillment group per shipping
       group, items matched on their ``shipping_group`` key.
    2. The order is BOPIS or names a pickup location → one pickup group with
       every item.
    3. Otherwise → one shipping group with every item.

Only groups built from shipping groups are titled "Pickup"; a synthesized
group is always index 0, "Shipment 1".

Group-level fields fall back to the order-level field of the same name (see
``resolve_field``). The function is total: missing data degrades to ``None``.
"""

from dataclasses import dataclass
from enum import Enum

from order_history.order.raw_order import LineItem, RawOrder, ShippingGroup


class FulfillmentType(Enum):
    SHIPPING = "shipping"
    PICKUP = "pickup"


PICKUP_TITLE = "Pickup"
SYNTHESIZED_TITLE = "Shipment 1"
SYNTHESIZED_GROUP_ID = "default"


# ---------------------------------------------------------------------------
# Value Objects
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class ShippingInfo:
    """Carrier delivery details for a shipment."""

    address: str | None = None
    method: str | None = None
    carrier: str | None = None
    tracking_number: str | None = None
    carrier_url: str | None = None
    delivery_date: str | None = None


@dataclass(frozen=True)
class PickupInfo:
    """Store pickup details for a BOPIS group."""

    location_name: str | None = None
    address: str | None = None
    ready_date: str | None = None
    pickup_window: str | None = None


@dataclass(frozen=True)
class FulfillmentItem:
    """A line item as shown inside a fulfillment group."""

    item: LineItem
    variant_info: str | None = None

    @property
    def id(self) -> str:
        return self.item.id

    @property
    def name(self) -> str:
        return self.item.name


@dataclass(frozen=True)
class FulfillmentGroup:
    index: int
    group_id: str
    type: FulfillmentType
    title: str
    status: str | None
    items: tuple[FulfillmentItem, ...] = ()
    shipping_info: ShippingInfo | None = None
    pickup_info: PickupInfo | None = None
    store: str | None = None

    @property
    def is_pickup(self) -> bool:
        return self.type is FulfillmentType.PICKUP


# ---------------------------------------------------------------------------
# Field resolution
# ---------------------------------------------------------------------------
def resolve_field(group: ShippingGroup | None, order: RawOrder, key: str):
    """Return ``group.<key>`` when present, else ``order.<key>``.

    "Present" means not ``None``: an empty string on the group still wins.
    """
    if group is not None:
        value = getattr(group, key, None)
        if value is not None:
            return value
    return getattr(order, key, None)


def variant_info(item: LineItem) -> str | None:
    parts = [part for part in (item.color, item.size) if part]
    return ", ".join(parts) if parts else None


def _fulfillment_items(items) -> tuple[FulfillmentItem, ...]:
    return tuple(FulfillmentItem(item=item, variant_info=variant_info(item)) for item in items)


def _shipping_info(group: ShippingGroup | None, order: RawOrder) -> ShippingInfo:
    return ShippingInfo(
        address=resolve_field(group, order, "shipping_address"),
        method=resolve_field(group, order, "shipping_method"),
        carrier=resolve_field(group, order, "carrier"),
        tracking_number=resolve_field(group, order, "tracking_number"),
        carrier_url=resolve_field(group, order, "carrier_tracking_url"),
        delivery_date=resolve_field(group, order, "delivery_date"),
    )


def _pickup_info(group: ShippingGroup | None, order: RawOrder) -> PickupInfo:
    return PickupInfo(
        location_name=resolve_field(group, order, "pickup_location"),
        address=resolve_field(group, order, "pickup_address"),
        ready_date=resolve_field(group, order, "pickup_ready_date"),
        pickup_window=resolve_field(group, order, "pickup_date"),
    )


def _is_pickup_group(group: ShippingGroup, order: RawOrder) -> bool:
    return bool(group.is_bopis or order.is_bopis or group.pickup_location)


def _from_shipping_group(index: int, group: ShippingGroup, order: RawOrder) -> FulfillmentGroup:
    members = [item for item in order.items if item.shipping_group == group.group_id]
    if _is_pickup_group(group, order):
        return FulfillmentGroup(
            index=index,
            group_id=group.group_id,
            type=FulfillmentType.PICKUP,
            title=PICKUP_TITLE,
            status=group.status,
            items=_fulfillment_items(members),
            pickup_info=_pickup_info(group, order),
            store=group.store,
        )
    return FulfillmentGroup(
        index=index,
        group_id=group.group_id,
        type=FulfillmentType.SHIPPING,
        title=f"Shipment {index + 1}",
        status=group.status,
        items=_fulfillment_items(members),
        shipping_info=_shipping_info(group, order),
        store=group.store,
    )


# ---------------------------------------------------------------------------
# Normalization
# ---------------------------------------------------------------------------
def normalize(order: RawOrder) -> tuple[FulfillmentGroup, ...]:
    """Project a raw order into its fulfillment groups. Never empty."""
    # Groups without an id cannot own items; they are not rendered.
    groups = [group for group in order.shipping_groups if group.group_id]
    if groups:
        return tuple(_from_shipping_group(index, group, order) for index, group in enumerate(groups))

    if order.is_bopis or order.pickup_location:
        return (
            FulfillmentGroup(
                index=0,
                group_id=SYNTHESIZED_GROUP_ID,
                type=FulfillmentType.PICKUP,
                title=SYNTHESIZED_TITLE,
                status=order.status,
                items=_fulfillment_items(order.items),
                pickup_info=_pickup_info(None, order),
            ),
        )

    return (
        FulfillmentGroup(
            index=0,
            group_id=SYNTHESIZED_GROUP_ID,
            type=FulfillmentType.SHIPPING,
            title=SYNTHESIZED_TITLE,
            status=order.status,
            items=_fulfillment_items(order.items),
            shipping_info=_shipping_info(None, order),
        ),
    )


def flatten_items(groups) -> tuple[FulfillmentItem, ...]:
    """All items of the given groups, in group order."""
    return tuple(item for group in groups for item in group.items)
