"""Order record — persisted read model backing the projection repository.

Mirrors a RawOrder field for field. Line items and shipping groups are stored
as JSON text, the same way the order detail read model keeps its item list.
"""

import json
from dataclasses import asdict

from protean.fields import Boolean, Float, Identifier, String, Text

from order_history.domain import order_history
from order_history.order.raw_order import RawOrder


@order_history.projection
class OrderRecord:
    order_number = Identifier(identifier=True, required=True)
    customer_id = Identifier()
    status = String(max_length=50)
    order_date = String(max_length=50)
    method = String(max_length=255)
    amount = String(max_length=50)
    subtotal = Float(default=0.0)
    promotions = Float(default=0.0)
    shipping = Float(default=0.0)
    tax = Float(default=0.0)
    total = Float(default=0.0)
    items = Text()  # JSON: list of line item dicts
    shipping_groups = Text()  # JSON: list of shipping group dicts
    payment_info = String(max_length=255)
    shipping_address = String(max_length=500)
    shipping_method = String(max_length=255)
    delivery_date = String(max_length=50)
    carrier = String(max_length=100)
    tracking_number = String(max_length=255)
    carrier_tracking_url = String(max_length=500)
    is_bopis = Boolean(default=False)
    pickup_location = String(max_length=255)
    pickup_address = String(max_length=500)
    pickup_date = String(max_length=100)
    pickup_ready_date = String(max_length=100)
    can_return = Boolean(default=False)
    can_cancel = Boolean(default=False)
    return_deadline = String(max_length=50)
    customer_name = String(max_length=255)
    customer_email = String(max_length=254)


# Scalar columns copied one-to-one between OrderRecord and RawOrder
_SCALAR_FIELDS = (
    "order_number",
    "customer_id",
    "status",
    "order_date",
    "method",
    "amount",
    "subtotal",
    "promotions",
    "shipping",
    "tax",
    "total",
    "payment_info",
    "shipping_address",
    "shipping_method",
    "delivery_date",
    "carrier",
    "tracking_number",
    "carrier_tracking_url",
    "is_bopis",
    "pickup_location",
    "pickup_address",
    "pickup_date",
    "pickup_ready_date",
    "can_return",
    "can_cancel",
    "return_deadline",
    "customer_name",
    "customer_email",
)


def to_raw_order(record: OrderRecord) -> RawOrder:
    data = {name: getattr(record, name) for name in _SCALAR_FIELDS}
    data["items"] = json.loads(record.items) if record.items else []
    data["shipping_groups"] = json.loads(record.shipping_groups) if record.shipping_groups else []
    return RawOrder.from_dict(data)


def to_record(order: RawOrder) -> OrderRecord:
    data = {name: getattr(order, name) for name in _SCALAR_FIELDS}
    return OrderRecord(
        **data,
        items=json.dumps([asdict(item) for item in order.items]),
        shipping_groups=json.dumps([asdict(group) for group in order.shipping_groups]),
    )
