"""Pydantic response schemas for the Order History API.

These are external contracts — separate from the internal dataclasses the
domain functions return. Each response knows how to build itself from the
matching view object.
"""

from pydantic import BaseModel

from order_history.order.fulfillment import FulfillmentGroup, FulfillmentItem, PickupInfo, ShippingInfo
from order_history.order.layout import LayoutResult
from order_history.order.raw_order import OrderSummary
from order_history.order.status import StatusBadge
from order_history.views.order_detail import GroupView, ItemView, OrderDetailView
from order_history.views.order_list import OrderHistoryPage, OrderHistoryRow


# ---------------------------------------------------------------------------
# Shared sub-models
# ---------------------------------------------------------------------------
class StatusBadgeSchema(BaseModel):
    semantic: str
    label: str
    css_class: str
    icon: str | None = None

    @classmethod
    def from_badge(cls, badge: StatusBadge) -> "StatusBadgeSchema":
        return cls(
            semantic=badge.semantic.value,
            label=badge.label,
            css_class=badge.css_class,
            icon=badge.icon,
        )


class LayoutSchema(BaseModel):
    visible_count: int
    show_badge: bool
    remaining_count: int

    @classmethod
    def from_result(cls, result: LayoutResult) -> "LayoutSchema":
        return cls(
            visible_count=result.visible_count,
            show_badge=result.show_badge,
            remaining_count=result.remaining_count,
        )


class ThumbnailSchema(BaseModel):
    id: str
    name: str
    image: str | None = None

    @classmethod
    def from_item(cls, item: FulfillmentItem) -> "ThumbnailSchema":
        return cls(id=item.id, name=item.name, image=item.item.image)


# ---------------------------------------------------------------------------
# Order History
# ---------------------------------------------------------------------------
class OrderRowSchema(BaseModel):
    order_number: str
    status: str | None = None
    badge: StatusBadgeSchema
    order_date: str | None = None
    method: str | None = None
    amount: str | None = None
    total: float
    item_count: int
    thumbnails: list[ThumbnailSchema]
    layout: LayoutSchema | None = None

    @classmethod
    def from_row(cls, row: OrderHistoryRow) -> "OrderRowSchema":
        order = row.order
        return cls(
            order_number=order.order_number,
            status=order.status,
            badge=StatusBadgeSchema.from_badge(row.badge),
            order_date=order.order_date,
            method=order.method,
            amount=order.amount,
            total=order.total,
            item_count=len(row.thumbnails),
            thumbnails=[ThumbnailSchema.from_item(item) for item in row.visible_thumbnails],
            layout=LayoutSchema.from_result(row.layout) if row.layout else None,
        )


class OrderListResponse(BaseModel):
    orders: list[OrderRowSchema]
    total: int
    page: int
    page_size: int
    total_pages: int
    has_next: bool
    has_previous: bool

    @classmethod
    def from_page(cls, page: OrderHistoryPage) -> "OrderListResponse":
        return cls(
            orders=[OrderRowSchema.from_row(row) for row in page.rows],
            total=page.total,
            page=page.page,
            page_size=page.page_size,
            total_pages=page.total_pages,
            has_next=page.has_next,
            has_previous=page.has_previous,
        )


class OrderSummarySchema(BaseModel):
    order_number: str
    status: str | None = None
    method: str | None = None
    amount: str | None = None
    order_date: str | None = None
    item_count: int = 0

    @classmethod
    def from_summary(cls, summary: OrderSummary) -> "OrderSummarySchema":
        return cls(
            order_number=summary.order_number,
            status=summary.status,
            method=summary.method,
            amount=summary.amount,
            order_date=summary.order_date,
            item_count=summary.item_count,
        )


# ---------------------------------------------------------------------------
# Order Detail
# ---------------------------------------------------------------------------
class ShippingInfoSchema(BaseModel):
    address: str | None = None
    method: str | None = None
    carrier: str | None = None
    tracking_number: str | None = None
    carrier_url: str | None = None
    delivery_date: str | None = None

    @classmethod
    def from_info(cls, info: ShippingInfo) -> "ShippingInfoSchema":
        return cls(
            address=info.address,
            method=info.method,
            carrier=info.carrier,
            tracking_number=info.tracking_number,
            carrier_url=info.carrier_url,
            delivery_date=info.delivery_date,
        )


class PickupInfoSchema(BaseModel):
    location_name: str | None = None
    address: str | None = None
    ready_date: str | None = None
    pickup_window: str | None = None

    @classmethod
    def from_info(cls, info: PickupInfo) -> "PickupInfoSchema":
        return cls(
            location_name=info.location_name,
            address=info.address,
            ready_date=info.ready_date,
            pickup_window=info.pickup_window,
        )


class DetailItemSchema(BaseModel):
    id: str
    product_id: str | None = None
    name: str
    image: str | None = None
    quantity: int
    unit_price: float
    original_price: float | None = None
    variant_info: str | None = None
    can_return: bool
    can_cancel: bool

    @classmethod
    def from_view(cls, view: ItemView) -> "DetailItemSchema":
        item = view.item.item
        return cls(
            id=item.id,
            product_id=item.product_id,
            name=item.name,
            image=item.image,
            quantity=item.quantity,
            unit_price=item.unit_price,
            original_price=item.original_price,
            variant_info=view.item.variant_info,
            can_return=view.can_return,
            can_cancel=view.can_cancel,
        )


class FulfillmentGroupSchema(BaseModel):
    index: int
    group_id: str
    type: str
    title: str
    status: str | None = None
    badge: StatusBadgeSchema
    store: str | None = None
    items: list[DetailItemSchema]
    shipping_info: ShippingInfoSchema | None = None
    pickup_info: PickupInfoSchema | None = None

    @classmethod
    def from_view(cls, view: GroupView) -> "FulfillmentGroupSchema":
        group: FulfillmentGroup = view.group
        return cls(
            index=group.index,
            group_id=group.group_id,
            type=group.type.value,
            title=group.title,
            status=group.status,
            badge=StatusBadgeSchema.from_badge(view.badge),
            store=group.store,
            items=[DetailItemSchema.from_view(item) for item in view.items],
            shipping_info=ShippingInfoSchema.from_info(group.shipping_info) if group.shipping_info else None,
            pickup_info=PickupInfoSchema.from_info(group.pickup_info) if group.pickup_info else None,
        )


class ReturnWindowSchema(BaseModel):
    deadline: str | None = None
    days_remaining: int | None = None
    is_open: bool


class OrderDetailResponse(BaseModel):
    order_number: str
    customer_id: str | None = None
    status: str | None = None
    badge: StatusBadgeSchema
    order_date: str | None = None
    method: str | None = None
    amount: str | None = None
    subtotal: float
    promotions: float
    shipping: float
    tax: float
    total: float
    payment_info: str | None = None
    customer_name: str | None = None
    customer_email: str | None = None
    item_count: int
    return_window: ReturnWindowSchema
    groups: list[FulfillmentGroupSchema]

    @classmethod
    def from_view(cls, view: OrderDetailView) -> "OrderDetailResponse":
        order = view.order
        window = view.return_window
        return cls(
            order_number=order.order_number,
            customer_id=order.customer_id,
            status=order.status,
            badge=StatusBadgeSchema.from_badge(view.badge),
            order_date=order.order_date,
            method=order.method,
            amount=order.amount,
            subtotal=order.subtotal,
            promotions=order.promotions,
            shipping=order.shipping,
            tax=order.tax,
            total=order.total,
            payment_info=order.payment_info,
            customer_name=order.customer_name,
            customer_email=order.customer_email,
            item_count=view.item_count,
            return_window=ReturnWindowSchema(
                deadline=window.deadline.isoformat() if window.deadline else None,
                days_remaining=window.days_remaining,
                is_open=window.is_open,
            ),
            groups=[FulfillmentGroupSchema.from_view(group) for group in view.groups],
        )
