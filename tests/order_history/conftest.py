import pytest
from order_history.order.raw_order import RawOrder
from protean import current_domain
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def order_history_bed():
    from order_history.domain import order_history

    bed = DomainFixture(order_history)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(order_history_bed):
    with order_history_bed.domain_context():
        yield

        # Clear all databases
        for _, provider in current_domain.providers.items():
            provider._data_reset()


@pytest.fixture
def split_order():
    """Four items split 3/1 between a UPS shipment and a store pickup."""
    return RawOrder.from_dict(
        {
            "orderNumber": "INV100",
            "customerId": "cust-100",
            "status": "Partially Delivered",
            "orderDate": "Sep 15, 2024",
            "shippingAddress": "500 Howard St, San Francisco, CA 94105",
            "carrier": "FedEx",
            "canReturn": True,
            "canCancel": True,
            "items": [
                {"id": "li-1", "name": "Trail Runner", "color": "Slate", "size": "10", "shippingGroup": "sg-1"},
                {"id": "li-2", "name": "Crew Sock", "color": "Charcoal", "shippingGroup": "sg-1"},
                {"id": "li-3", "name": "Running Cap", "shippingGroup": "sg-1"},
                {"id": "li-4", "name": "Rain Shell", "size": "M", "shippingGroup": "sg-2"},
            ],
            "shippingGroups": [
                {"groupId": "sg-1", "status": "In Transit", "carrier": "UPS", "trackingNumber": "1Z999"},
                {"groupId": "sg-2", "status": "Picked Up", "isBOPIS": True, "pickupLocation": "Market Street SF"},
            ],
        }
    )
