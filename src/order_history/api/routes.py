"""FastAPI routes for the Order History and Order Detail views."""

import os
from datetime import date

import structlog
from fastapi import APIRouter, Depends, HTTPException, Query

from order_history.api.schemas import (
    LayoutSchema,
    OrderDetailResponse,
    OrderListResponse,
    OrderRowSchema,
    OrderSummarySchema,
)
from order_history.order.layout import DEFAULT_GAP_PX, DEFAULT_TILE_PX, layout
from order_history.order.query import OrderFilters, SortKey
from order_history.repository import get_order_repository
from order_history.repository.port import OrderRepository
from order_history.utils.logging import bind_request_context
from order_history.views.order_detail import OrderDetailSession
from order_history.views.order_list import build_history_row, load_history_page

logger = structlog.get_logger(__name__)

DEFAULT_PAGE_SIZE = int(os.environ.get("ORDER_HISTORY_PAGE_SIZE", "10"))

router = APIRouter(prefix="/orders", tags=["orders"])


# ---------------------------------------------------------------------------
# Order History
# ---------------------------------------------------------------------------
@router.get("", response_model=OrderListResponse)
async def list_orders(
    customer_id: str,
    year: str | None = None,
    q: str | None = None,
    status: str | None = None,
    sort: SortKey = SortKey.DATE_DESC,
    page: int = Query(1, ge=1),
    page_size: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=100),
    row_width: float | None = Query(None, ge=0, allow_inf_nan=False),
    repository: OrderRepository = Depends(get_order_repository),
) -> OrderListResponse:
    filters = OrderFilters(year=year, search_term=q, status=status)
    history = await load_history_page(repository, customer_id, filters, sort, page, page_size, row_width)
    logger.debug(
        "Order history page served",
        customer_id=customer_id,
        page=page,
        total=history.total,
    )
    return OrderListResponse.from_page(history)


@router.get("/summaries", response_model=list[OrderSummarySchema])
async def order_summaries(
    customer_id: str,
    repository: OrderRepository = Depends(get_order_repository),
) -> list[OrderSummarySchema]:
    summaries = await repository.get_order_summaries(customer_id)
    return [OrderSummarySchema.from_summary(summary) for summary in summaries]


@router.get("/recent", response_model=list[OrderRowSchema])
async def recent_orders(
    customer_id: str,
    limit: int = Query(5, ge=1, le=50),
    row_width: float | None = Query(None, ge=0, allow_inf_nan=False),
    repository: OrderRepository = Depends(get_order_repository),
) -> list[OrderRowSchema]:
    orders = await repository.get_recent_orders(customer_id, limit)
    return [OrderRowSchema.from_row(build_history_row(order, row_width)) for order in orders]


@router.get("/thumbnail-layout", response_model=LayoutSchema)
async def thumbnail_layout(
    item_count: int = Query(ge=0),
    width: float = Query(ge=0, allow_inf_nan=False),
    tile: float = Query(DEFAULT_TILE_PX, gt=0, allow_inf_nan=False),
    gap: float = Query(DEFAULT_GAP_PX, ge=0, allow_inf_nan=False),
) -> LayoutSchema:
    return LayoutSchema.from_result(layout(item_count, width, tile, gap))


# ---------------------------------------------------------------------------
# Order Detail
# ---------------------------------------------------------------------------
@router.get("/{order_number}", response_model=OrderDetailResponse)
async def get_order(
    order_number: str,
    as_of: date | None = None,
    repository: OrderRepository = Depends(get_order_repository),
) -> OrderDetailResponse:
    bind_request_context(order_number=order_number)
    session = OrderDetailSession(repository, order_number, today=as_of)
    view = await session.load()
    if view is None:
        raise HTTPException(status_code=404, detail=f"Order {order_number} not found")
    return OrderDetailResponse.from_view(view)
