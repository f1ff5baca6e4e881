"""Raw order records as delivered by the Order Repository.

A RawOrder is an immutable, as-fetched record. It may or may not carry an
explicit shipping-group breakdown, and most of its fulfillment fields are
optional. ``RawOrder.from_dict`` accepts both the storefront's camelCase
payloads and snake_case database rows; anything missing or malformed degrades
to ``None`` (or a neutral default) instead of raising.
"""

from dataclasses import dataclass
from typing import Any, Mapping


# ---------------------------------------------------------------------------
# Coercion helpers
# ---------------------------------------------------------------------------
def _pick(data: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        value = data.get(key)
        if value is not None:
            return value
    return None


def _as_str(value: Any) -> str | None:
    if value is None:
        return None
    return str(value)


def _as_float(value: Any, default: float | None = None) -> float | None:
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, str):
        value = value.replace("$", "").replace(",", "").strip()
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def _as_int(value: Any, default: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return default


def _as_list(value: Any) -> list | tuple:
    return value if isinstance(value, (list, tuple)) else ()


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1", "yes")
    return bool(value)


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class LineItem:
    """One purchased product variant and quantity."""

    id: str
    name: str
    quantity: int = 1
    unit_price: float = 0.0
    product_id: str | None = None
    image: str | None = None
    color: str | None = None
    size: str | None = None
    original_price: float | None = None
    store: str | None = None
    shipping_group: str | None = None

    @property
    def is_discounted(self) -> bool:
        return self.original_price is not None and self.original_price > self.unit_price

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LineItem":
        quantity = _as_int(data.get("quantity"), 1)
        return cls(
            id=_as_str(data.get("id")) or "",
            name=_as_str(_pick(data, "name", "product_name")) or "",
            quantity=quantity if quantity > 0 else 1,
            unit_price=_as_float(_pick(data, "price", "unit_price"), 0.0),
            product_id=_as_str(_pick(data, "productId", "product_id")),
            image=_as_str(_pick(data, "image", "product_image")),
            color=_as_str(data.get("color")),
            size=_as_str(data.get("size")),
            original_price=_as_float(_pick(data, "originalPrice", "original_price")),
            store=_as_str(data.get("store")),
            shipping_group=_as_str(_pick(data, "shippingGroup", "shipping_group")),
        )


@dataclass(frozen=True)
class ShippingGroup:
    """A shipment or pickup leg of an order, as recorded upstream.

    Its status is independent of the order's aggregate status and may lag or
    lead it.
    """

    group_id: str | None
    status: str | None = None
    store: str | None = None
    is_bopis: bool = False
    shipping_address: str | None = None
    shipping_method: str | None = None
    carrier: str | None = None
    tracking_number: str | None = None
    carrier_tracking_url: str | None = None
    delivery_date: str | None = None
    pickup_location: str | None = None
    pickup_address: str | None = None
    pickup_date: str | None = None
    pickup_ready_date: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ShippingGroup":
        return cls(
            group_id=_as_str(_pick(data, "groupId", "group_id")),
            status=_as_str(data.get("status")),
            store=_as_str(data.get("store")),
            is_bopis=_as_bool(_pick(data, "isBOPIS", "is_bopis")),
            shipping_address=_as_str(_pick(data, "shippingAddress", "shipping_address")),
            shipping_method=_as_str(_pick(data, "shippingMethod", "shipping_method")),
            carrier=_as_str(data.get("carrier")),
            tracking_number=_as_str(_pick(data, "trackingNumber", "tracking_number")),
            carrier_tracking_url=_as_str(_pick(data, "carrierTrackingUrl", "carrier_tracking_url")),
            delivery_date=_as_str(_pick(data, "deliveryDate", "delivery_date")),
            pickup_location=_as_str(_pick(data, "pickupLocation", "pickup_location")),
            pickup_address=_as_str(_pick(data, "pickupAddress", "pickup_address")),
            pickup_date=_as_str(_pick(data, "pickupDate", "pickup_date")),
            pickup_ready_date=_as_str(_pick(data, "pickupReadyDate", "pickup_ready_date")),
        )


@dataclass(frozen=True)
class RawOrder:
    """An order as fetched, before normalization into fulfillment groups."""

    order_number: str
    status: str | None = None
    customer_id: str | None = None
    order_date: str | None = None
    method: str | None = None
    amount: str | None = None
    subtotal: float = 0.0
    promotions: float = 0.0
    shipping: float = 0.0
    tax: float = 0.0
    total: float = 0.0
    items: tuple[LineItem, ...] = ()
    shipping_groups: tuple[ShippingGroup, ...] = ()
    payment_info: str | None = None
    shipping_address: str | None = None
    shipping_method: str | None = None
    delivery_date: str | None = None
    carrier: str | None = None
    tracking_number: str | None = None
    carrier_tracking_url: str | None = None
    is_bopis: bool = False
    pickup_location: str | None = None
    pickup_address: str | None = None
    pickup_date: str | None = None
    pickup_ready_date: str | None = None
    can_return: bool = False
    can_cancel: bool = False
    return_deadline: str | None = None
    customer_name: str | None = None
    customer_email: str | None = None

    @property
    def item_count(self) -> int:
        return len(self.items)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "RawOrder":
        """Build a RawOrder from a camelCase payload or a snake_case row.

        ``items`` / ``shippingGroups`` that are not lists are treated as empty,
        and entries in them that are not mappings are skipped.
        """
        raw_items = _as_list(_pick(data, "items", "order_items"))
        raw_groups = _as_list(_pick(data, "shippingGroups", "shipping_groups"))
        promotions = _as_float(data.get("promotions"), 0.0)
        return cls(
            order_number=_as_str(_pick(data, "orderNumber", "order_number")) or "",
            status=_as_str(data.get("status")),
            customer_id=_as_str(_pick(data, "customerId", "customer_id")),
            order_date=_as_str(_pick(data, "orderDate", "order_date")),
            method=_as_str(data.get("method")),
            amount=_as_str(data.get("amount")),
            subtotal=_as_float(data.get("subtotal"), 0.0),
            promotions=-abs(promotions),
            shipping=_as_float(data.get("shipping"), 0.0),
            tax=_as_float(data.get("tax"), 0.0),
            total=_as_float(data.get("total"), 0.0),
            items=tuple(LineItem.from_dict(item) for item in raw_items if isinstance(item, Mapping)),
            shipping_groups=tuple(
                ShippingGroup.from_dict(group) for group in raw_groups if isinstance(group, Mapping)
            ),
            payment_info=_as_str(_pick(data, "paymentInfo", "payment_info")),
            shipping_address=_as_str(_pick(data, "shippingAddress", "shipping_address")),
            shipping_method=_as_str(_pick(data, "shippingMethod", "shipping_method")),
            delivery_date=_as_str(_pick(data, "deliveryDate", "delivery_date")),
            carrier=_as_str(data.get("carrier")),
            tracking_number=_as_str(_pick(data, "trackingNumber", "tracking_number")),
            carrier_tracking_url=_as_str(_pick(data, "carrierTrackingUrl", "carrier_tracking_url")),
            is_bopis=_as_bool(_pick(data, "isBOPIS", "is_bopis")),
            pickup_location=_as_str(_pick(data, "pickupLocation", "pickup_location")),
            pickup_address=_as_str(_pick(data, "pickupAddress", "pickup_address")),
            pickup_date=_as_str(_pick(data, "pickupDate", "pickup_date")),
            pickup_ready_date=_as_str(_pick(data, "pickupReadyDate", "pickup_ready_date")),
            can_return=_as_bool(_pick(data, "canReturn", "can_return")),
            can_cancel=_as_bool(_pick(data, "canCancel", "can_cancel")),
            return_deadline=_as_str(_pick(data, "returnDeadline", "return_deadline")),
            customer_name=_as_str(_pick(data, "customerName", "customer_name")),
            customer_email=_as_str(_pick(data, "customerEmail", "customer_email")),
        )


@dataclass(frozen=True)
class OrderSummary:
    """Lightweight listing row for an order."""

    order_number: str
    status: str | None
    method: str | None
    amount: str | None
    order_date: str | None
    item_count: int = 0


def summarize(order: RawOrder) -> OrderSummary:
    return OrderSummary(
        order_number=order.order_number,
        status=order.status,
        method=order.method,
        amount=order.amount,
        order_date=order.order_date,
        item_count=order.item_count,
    )

