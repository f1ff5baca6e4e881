"""Tests for the Order Detail view session and view composition."""

import asyncio
from datetime import date

from order_history.order.layout import LayoutResult
from order_history.order.raw_order import RawOrder
from order_history.order.status import BadgeSemantic
from order_history.repository.fake_adapter import FakeOrderRepository
from order_history.views.order_detail import DetailState, OrderDetailSession, build_order_detail

TODAY = date(2024, 9, 30)


class TestBuildOrderDetail:
    def test_groups_and_badges(self, split_order):
        view = build_order_detail(split_order, TODAY)
        assert [group.group.title for group in view.groups] == ["Shipment 1", "Pickup"]
        assert view.badge.semantic is BadgeSemantic.WARNING
        assert [group.badge.semantic for group in view.groups] == [BadgeSemantic.INFO, BadgeSemantic.SUCCESS]

    def test_item_eligibility_per_group(self, split_order):
        shipment, pickup = build_order_detail(split_order, TODAY).groups
        assert all(not item.can_return for item in shipment.items)
        assert all(not item.can_cancel for item in shipment.items)
        assert all(item.can_return for item in pickup.items)
        assert all(not item.can_cancel for item in pickup.items)

    def test_item_count_and_flattened_items(self, split_order):
        view = build_order_detail(split_order, TODAY)
        assert view.item_count == 4
        assert [item.id for item in view.items] == ["li-1", "li-2", "li-3", "li-4"]

    def test_expired_return_window(self):
        order = RawOrder.from_dict(
            {
                "orderNumber": "INV600",
                "status": "Delivered",
                "canReturn": True,
                "returnDeadline": "Apr 7, 2023",
                "items": [{"id": "li-1", "name": "Tent"}],
            }
        )
        view = build_order_detail(order, TODAY)
        assert view.return_window.is_open is False
        assert view.groups[0].items[0].can_return is False


class TestOrderDetailSession:
    def test_starts_loading(self):
        session = OrderDetailSession(FakeOrderRepository(), "INV010", today=TODAY)
        assert session.state is DetailState.LOADING
        assert session.view is None

    def test_load_found(self):
        session = OrderDetailSession(FakeOrderRepository(), "INV010", today=TODAY)
        view = asyncio.run(session.load())
        assert session.state is DetailState.READY
        assert session.view is view
        assert view.order.order_number == "INV010"

    def test_load_not_found(self):
        session = OrderDetailSession(FakeOrderRepository(), "INV999", today=TODAY)
        assert asyncio.run(session.load()) is None
        assert session.state is DetailState.NOT_FOUND

    def test_loading_while_fetch_is_pending(self):
        repository = FakeOrderRepository()
        repository.configure(latency=0.01)
        session = OrderDetailSession(repository, "INV010", today=TODAY)

        async def observe():
            task = asyncio.create_task(session.load())
            await asyncio.sleep(0)
            state = session.state
            await task
            return state

        assert asyncio.run(observe()) is DetailState.LOADING
        assert session.state is DetailState.READY

    def test_result_discarded_after_close(self):
        repository = FakeOrderRepository()
        repository.configure(latency=0.01)
        session = OrderDetailSession(repository, "INV010", today=TODAY)

        async def close_mid_fetch():
            task = asyncio.create_task(session.load())
            await asyncio.sleep(0)
            session.close()
            return await task

        assert asyncio.run(close_mid_fetch()) is None
        assert session.state is DetailState.CLOSED
        assert session.view is None

    def test_resize_before_load_is_a_no_op(self):
        session = OrderDetailSession(FakeOrderRepository(), "INV007", today=TODAY, tile=96, gap=12)
        assert session.resize(420) is None
        assert session.thumbnails.result is None

    def test_width_measured_before_load_is_applied_on_load(self):
        session = OrderDetailSession(FakeOrderRepository(), "INV007", today=TODAY, tile=96, gap=12)
        session.resize(420)
        asyncio.run(session.load())
        assert session.thumbnails.result == LayoutResult(visible_count=3, show_badge=True, remaining_count=4)

    def test_resize_after_load(self):
        session = OrderDetailSession(FakeOrderRepository(), "INV007", today=TODAY, tile=96, gap=12)
        asyncio.run(session.load())
        assert session.resize(852) == LayoutResult(visible_count=7, show_badge=False, remaining_count=0)

    def test_resize_after_close(self):
        session = OrderDetailSession(FakeOrderRepository(), "INV007", today=TODAY)
        asyncio.run(session.load())
        session.close()
        assert session.resize(420) is None
