"""Shared BDD fixtures and step definitions for the Order History context."""

import pytest
from order_history.order.eligibility import can_cancel_item, can_return_item
from order_history.order.fulfillment import FulfillmentType, normalize
from order_history.order.raw_order import RawOrder
from pytest_bdd import given, parsers, then, when


@pytest.fixture
def order_data():
    """Raw order payload assembled by Given steps."""
    return {"orderNumber": "INV900", "items": [], "shippingGroups": []}


def _add_items(order_data, count, group_id=None):
    for _ in range(count):
        n = len(order_data["items"]) + 1
        order_data["items"].append({"id": f"li-{n}", "name": f"Item {n}", "shippingGroup": group_id})


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('an order with status "{status}"'))
def _(order_data, status):
    order_data["status"] = status


@given(parsers.cfparse('a pickup order at "{location}"'))
def _(order_data, location):
    order_data.update(status="Ready for Pickup", isBOPIS=True, pickupLocation=location)


@given("the order allows returns")
def _(order_data):
    order_data["canReturn"] = True


@given("the order allows cancellation")
def _(order_data):
    order_data["canCancel"] = True


@given(parsers.cfparse('a shipping group "{group_id}" with status "{status}"'))
def _(order_data, group_id, status):
    order_data["shippingGroups"].append({"groupId": group_id, "status": status})


@given(parsers.cfparse('a pickup group "{group_id}" with status "{status}" at "{location}"'))
def _(order_data, group_id, status, location):
    order_data["shippingGroups"].append(
        {"groupId": group_id, "status": status, "isBOPIS": True, "pickupLocation": location}
    )


@given(parsers.cfparse('{count:d} items in group "{group_id}"'))
@given(parsers.cfparse('{count:d} item in group "{group_id}"'))
def _(order_data, count, group_id):
    _add_items(order_data, count, group_id)


@given(parsers.cfparse("{count:d} items without a group"))
@given(parsers.cfparse("{count:d} item without a group"))
def _(order_data, count):
    _add_items(order_data, count)


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when("the order is normalized", target_fixture="groups")
def _(order_data):
    return normalize(RawOrder.from_dict(order_data))


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse("there are {count:d} fulfillment groups"))
def _(groups, count):
    assert len(groups) == count


@then(parsers.cfparse('group {position:d} is titled "{title}" with {count:d} items'))
@then(parsers.cfparse('group {position:d} is titled "{title}" with {count:d} item'))
def _(groups, position, title, count):
    group = groups[position - 1]
    assert group.title == title
    assert len(group.items) == count


@then(parsers.cfparse('group {position:d} is a pickup at "{location}"'))
def _(groups, position, location):
    group = groups[position - 1]
    assert group.type is FulfillmentType.PICKUP
    assert group.pickup_info.location_name == location


@then(parsers.cfparse("items in group {position:d} can be returned"))
def _(order_data, groups, position):
    assert can_return_item(RawOrder.from_dict(order_data), groups[position - 1]) is True


@then(parsers.cfparse("items in group {position:d} can be cancelled"))
def _(order_data, groups, position):
    assert can_cancel_item(RawOrder.from_dict(order_data), groups[position - 1]) is True


@then(parsers.cfparse("items in group {position:d} cannot be cancelled"))
def _(order_data, groups, position):
    assert can_cancel_item(RawOrder.from_dict(order_data), groups[position - 1]) is False
