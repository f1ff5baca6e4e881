"""Projection-backed order repository.

Reads OrderRecord read models through the active Protean domain's repository.
Requires a domain context (pushed per request by the API middleware).
"""

import structlog
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from order_history.order.raw_order import RawOrder
from order_history.order.record import OrderRecord, to_raw_order, to_record
from order_history.repository.port import OrderRepository

logger = structlog.get_logger(__name__)


class ProjectionOrderRepository(OrderRepository):
    async def get_order(self, order_number: str) -> RawOrder | None:
        repo = current_domain.repository_for(OrderRecord)
        try:
            record = repo.get(order_number)
        except ObjectNotFoundError:
            logger.info("Order not found", order_number=order_number)
            return None
        return to_raw_order(record)

    async def customer_orders(self, customer_id: str) -> list[RawOrder]:
        repo = current_domain.repository_for(OrderRecord)
        records = repo._dao.query.filter(customer_id=customer_id).all().items
        return [to_raw_order(record) for record in records]

    def add(self, order: RawOrder) -> None:
        """Store or replace an order's record."""
        current_domain.repository_for(OrderRecord).add(to_record(order))
        logger.info("Order record stored", order_number=order.order_number, customer_id=order.customer_id)
