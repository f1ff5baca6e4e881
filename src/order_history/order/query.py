"""Order list query engine — filter, then sort, then page.

Filtering is a stable, idempotent subsequence: orders keep their original
relative order and re-applying the same filters changes nothing. Sorting and
pagination always run after filtering.
"""

import math
from dataclasses import dataclass
from datetime import date
from enum import Enum

from order_history.order.dates import extract_year, parse_order_date
from order_history.order.raw_order import RawOrder

ALL_YEARS = "all"


class SortKey(Enum):
    DATE_DESC = "date-desc"
    DATE_ASC = "date-asc"
    AMOUNT_DESC = "amount-desc"
    AMOUNT_ASC = "amount-asc"


@dataclass(frozen=True)
class OrderFilters:
    """Filters composed with logical AND. Unset filters match everything."""

    year: str | None = None
    search_term: str | None = None
    status: str | None = None


@dataclass(frozen=True)
class Page:
    items: tuple[RawOrder, ...]
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


# ---------------------------------------------------------------------------
# Filtering
# ---------------------------------------------------------------------------
def _normalize_term(term: str | None) -> str:
    return (term or "").strip().lstrip("#").strip().lower()


def matches_year(order: RawOrder, year: str | None) -> bool:
    if not year or year == ALL_YEARS:
        return True
    return extract_year(order.order_date) == year


def matches_search(order: RawOrder, term: str | None) -> bool:
    needle = _normalize_term(term)
    if not needle:
        return True
    if needle in order.order_number.lower():
        return True
    if order.status and needle in order.status.lower():
        return True
    return any(needle in item.name.lower() for item in order.items)


def matches_status(order: RawOrder, status: str | None) -> bool:
    return not status or order.status == status


def query(orders, filters: OrderFilters | None = None) -> list[RawOrder]:
    filters = filters or OrderFilters()
    return [
        order
        for order in orders
        if matches_year(order, filters.year)
        and matches_search(order, filters.search_term)
        and matches_status(order, filters.status)
    ]


# ---------------------------------------------------------------------------
# Sorting and pagination
# ---------------------------------------------------------------------------
def _date_key(order: RawOrder) -> date:
    return parse_order_date(order.order_date) or date.min


def _amount_key(order: RawOrder) -> float:
    return order.total


def sort_orders(orders, sort: SortKey = SortKey.DATE_DESC) -> list[RawOrder]:
    """Sort a copy of ``orders``. Ties keep their filtered order."""
    sort = SortKey(sort)
    if sort is SortKey.DATE_ASC:
        return sorted(orders, key=_date_key)
    if sort is SortKey.AMOUNT_DESC:
        return sorted(orders, key=_amount_key, reverse=True)
    if sort is SortKey.AMOUNT_ASC:
        return sorted(orders, key=_amount_key)
    return sorted(orders, key=_date_key, reverse=True)


def paginate(orders, page: int = 1, page_size: int = 10) -> Page:
    if page < 1:
        raise ValueError(f"page must be at least 1, got {page}")
    if page_size < 1:
        raise ValueError(f"page_size must be at least 1, got {page_size}")
    orders = list(orders)
    start = (page - 1) * page_size
    return Page(
        items=tuple(orders[start : start + page_size]),
        total=len(orders),
        page=page,
        page_size=page_size,
    )


def list_orders(
    orders,
    filters: OrderFilters | None = None,
    sort: SortKey = SortKey.DATE_DESC,
    page: int = 1,
    page_size: int = 10,
) -> Page:
    """Filter, sort, then page — always in that order."""
    return paginate(sort_orders(query(orders, filters), sort), page, page_size)
