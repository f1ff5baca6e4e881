"""Integration tests for the Order History API via TestClient."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from order_history.api import router
from order_history.order.raw_order import RawOrder
from order_history.repository import set_order_repository
from order_history.repository.fake_adapter import FakeOrderRepository
from order_history.repository.seed import SAMPLE_CUSTOMER_ID


@pytest.fixture()
def client():
    set_order_repository(FakeOrderRepository())
    app = FastAPI()
    app.include_router(router)
    return TestClient(app)


class TestListOrders:
    def test_default_page(self, client):
        response = client.get("/orders", params={"customer_id": SAMPLE_CUSTOMER_ID})
        assert response.status_code == 200
        data = response.json()
        assert [order["order_number"] for order in data["orders"]] == ["INV010", "INV009", "INV008", "INV007", "INV006"]
        assert data["total"] == 5
        assert data["page"] == 1
        assert data["has_next"] is False

    def test_row_fields(self, client):
        data = client.get("/orders", params={"customer_id": SAMPLE_CUSTOMER_ID}).json()
        row = data["orders"][0]
        assert row["status"] == "Partially Delivered"
        assert row["badge"] == {
            "semantic": "warning",
            "label": "Partially Delivered",
            "css_class": "badge-warning",
            "icon": None,
        }
        assert row["item_count"] == 4
        assert row["layout"] is None
        assert len(row["thumbnails"]) == 4

    def test_year_filter(self, client):
        data = client.get("/orders", params={"customer_id": SAMPLE_CUSTOMER_ID, "year": "2023"}).json()
        assert [order["order_number"] for order in data["orders"]] == ["INV007", "INV006"]

    def test_search_with_hash(self, client):
        data = client.get("/orders", params={"customer_id": SAMPLE_CUSTOMER_ID, "q": "#INV009"}).json()
        assert [order["order_number"] for order in data["orders"]] == ["INV009"]

    def test_status_filter(self, client):
        data = client.get("/orders", params={"customer_id": SAMPLE_CUSTOMER_ID, "status": "Cancelled"}).json()
        assert [order["order_number"] for order in data["orders"]] == ["INV006"]

    def test_sort_and_paging(self, client):
        data = client.get(
            "/orders",
            params={"customer_id": SAMPLE_CUSTOMER_ID, "sort": "amount-desc", "page": 2, "page_size": 2},
        ).json()
        assert [order["order_number"] for order in data["orders"]] == ["INV008", "INV009"]
        assert data["total_pages"] == 3
        assert data["has_previous"] is True
        assert data["has_next"] is True

    def test_row_width_lays_out_thumbnails(self, client):
        data = client.get(
            "/orders",
            params={"customer_id": SAMPLE_CUSTOMER_ID, "q": "INV007", "row_width": 420},
        ).json()
        (row,) = data["orders"]
        assert row["item_count"] == 7
        assert row["layout"] == {"visible_count": 3, "show_badge": True, "remaining_count": 4}
        assert len(row["thumbnails"]) == 3

    def test_infinite_row_width_is_rejected(self, client):
        response = client.get("/orders", params={"customer_id": SAMPLE_CUSTOMER_ID, "row_width": "inf"})
        assert response.status_code == 422

    def test_invalid_page(self, client):
        response = client.get("/orders", params={"customer_id": SAMPLE_CUSTOMER_ID, "page": 0})
        assert response.status_code == 422

    def test_invalid_sort(self, client):
        response = client.get("/orders", params={"customer_id": SAMPLE_CUSTOMER_ID, "sort": "name"})
        assert response.status_code == 422

    def test_customer_id_is_required(self, client):
        assert client.get("/orders").status_code == 422


class TestSummariesAndRecent:
    def test_summaries(self, client):
        response = client.get("/orders/summaries", params={"customer_id": SAMPLE_CUSTOMER_ID})
        assert response.status_code == 200
        summaries = response.json()
        assert summaries[0] == {
            "order_number": "INV010",
            "status": "Partially Delivered",
            "method": "Visa ending in 4242",
            "amount": "$312.40",
            "order_date": "Sep 15, 2024",
            "item_count": 4,
        }

    def test_recent(self, client):
        response = client.get("/orders/recent", params={"customer_id": SAMPLE_CUSTOMER_ID, "limit": 2})
        assert response.status_code == 200
        assert [order["order_number"] for order in response.json()] == ["INV010", "INV009"]


class TestThumbnailLayout:
    def test_layout(self, client):
        response = client.get("/orders/thumbnail-layout", params={"item_count": 7, "width": 420})
        assert response.status_code == 200
        assert response.json() == {"visible_count": 3, "show_badge": True, "remaining_count": 4}

    def test_custom_geometry(self, client):
        response = client.get(
            "/orders/thumbnail-layout",
            params={"item_count": 10, "width": 400, "tile": 100, "gap": 0},
        )
        assert response.json() == {"visible_count": 3, "show_badge": True, "remaining_count": 7}

    @pytest.mark.parametrize(
        "params",
        [{"tile": 0}, {"gap": -1}, {"width": -5}, {"item_count": -1}, {"width": "inf"}, {"width": "nan"}, {"gap": "inf"}],
    )
    def test_invalid_geometry(self, client, params):
        query = {"item_count": 3, "width": 420, **params}
        assert client.get("/orders/thumbnail-layout", params=query).status_code == 422


class TestOrderDetail:
    def test_split_order(self, client):
        response = client.get("/orders/INV010", params={"as_of": "2024-09-30"})
        assert response.status_code == 200
        data = response.json()
        assert data["order_number"] == "INV010"
        assert data["item_count"] == 4
        assert [group["title"] for group in data["groups"]] == ["Shipment 1", "Pickup"]
        shipment, pickup = data["groups"]
        assert shipment["type"] == "shipping"
        assert shipment["shipping_info"]["carrier"] == "UPS"
        assert shipment["pickup_info"] is None
        assert shipment["badge"]["semantic"] == "info"
        assert pickup["type"] == "pickup"
        assert pickup["pickup_info"]["location_name"] == "Market Street SF"
        assert pickup["badge"]["icon"] == "check"
        assert pickup["items"][0]["can_return"] is True
        assert all(item["can_return"] is False for item in shipment["items"])

    def test_return_window(self, client):
        data = client.get("/orders/INV010", params={"as_of": "2024-09-30"}).json()
        assert data["return_window"] == {"deadline": "2024-10-15", "days_remaining": 15, "is_open": True}

    def test_expired_return_window(self, client):
        data = client.get("/orders/INV010", params={"as_of": "2024-11-01"}).json()
        assert data["return_window"]["is_open"] is False
        assert all(item["can_return"] is False for group in data["groups"] for item in group["items"])

    def test_variant_info(self, client):
        data = client.get("/orders/INV010").json()
        assert data["groups"][0]["items"][0]["variant_info"] == "Slate, 10"

    def test_not_found(self, client):
        response = client.get("/orders/INV999")
        assert response.status_code == 404
        assert response.json()["detail"] == "Order INV999 not found"

    def test_added_order(self, client):
        repository = FakeOrderRepository([])
        repository.add(RawOrder.from_dict({"orderNumber": "INV800", "isBOPIS": True, "pickupLocation": "Union Sq"}))
        set_order_repository(repository)
        data = client.get("/orders/INV800").json()
        (group,) = data["groups"]
        assert group["type"] == "pickup"
        assert group["title"] == "Shipment 1"
        assert group["pickup_info"]["location_name"] == "Union Sq"
