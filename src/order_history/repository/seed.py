"""Sample account orders used by the fake repository.

Payloads are kept in the storefront's camelCase shape so they pass through
the same parsing as orders arriving from the API.
"""

from order_history.order.raw_order import RawOrder

SAMPLE_CUSTOMER_ID = "cust-001"

_ORDERS = [
    {
        "orderNumber": "INV010",
        "customerId": SAMPLE_CUSTOMER_ID,
        "status": "Partially Delivered",
        "method": "Visa ending in 4242",
        "amount": "$312.40",
        "orderDate": "Sep 15, 2024",
        "subtotal": 298.0,
        "promotions": -20.0,
        "shipping": 8.0,
        "tax": 26.4,
        "total": 312.4,
        "shippingAddress": "500 Howard St, San Francisco, CA 94105",
        "canReturn": True,
        "canCancel": False,
        "returnDeadline": "Oct 15, 2024",
        "customerName": "Jordan Lee",
        "customerEmail": "jordan.lee@example.com",
        "items": [
            {"id": "li-101", "productId": "p-runner", "name": "Trail Runner", "image": "/img/trail-runner.jpg",
             "quantity": 1, "color": "Slate", "size": "10", "price": 120.0, "originalPrice": 140.0,
             "shippingGroup": "sg-1"},
            {"id": "li-102", "productId": "p-sock", "name": "Merino Crew Sock", "image": "/img/crew-sock.jpg",
             "quantity": 2, "color": "Charcoal", "price": 18.0, "shippingGroup": "sg-1"},
            {"id": "li-103", "productId": "p-cap", "name": "Running Cap", "image": "/img/cap.jpg",
             "quantity": 1, "price": 32.0, "shippingGroup": "sg-1"},
            {"id": "li-104", "productId": "p-shell", "name": "Rain Shell", "image": "/img/rain-shell.jpg",
             "quantity": 1, "color": "Olive", "size": "M", "price": 110.0, "shippingGroup": "sg-2"},
        ],
        "shippingGroups": [
            {"groupId": "sg-1", "store": "Online", "status": "In Transit", "carrier": "UPS",
             "trackingNumber": "1Z999AA10123456784",
             "carrierTrackingUrl": "https://www.ups.com/track?tracknum=1Z999AA10123456784",
             "deliveryDate": "Sep 20, 2024", "shippingMethod": "Standard"},
            {"groupId": "sg-2", "store": "Market Street SF", "status": "Picked Up", "isBOPIS": True,
             "pickupLocation": "Market Street SF", "pickupAddress": "865 Market St, San Francisco, CA 94103",
             "pickupReadyDate": "Sep 16, 2024", "pickupDate": "Sep 17, 2024, 10am - 8pm"},
        ],
    },
    {
        "orderNumber": "INV009",
        "customerId": SAMPLE_CUSTOMER_ID,
        "status": "Ready for Pickup",
        "method": "Mastercard ending in 5454",
        "amount": "$89.00",
        "orderDate": "Aug 28, 2024",
        "subtotal": 82.0,
        "promotions": 0.0,
        "shipping": 0.0,
        "tax": 7.0,
        "total": 89.0,
        "isBOPIS": True,
        "pickupLocation": "Market Street SF",
        "pickupAddress": "865 Market St, San Francisco, CA 94103",
        "pickupReadyDate": "Aug 29, 2024",
        "pickupDate": "Aug 29 - Sep 5, 2024",
        "canReturn": True,
        "canCancel": True,
        "items": [
            {"id": "li-091", "productId": "p-bottle", "name": "Insulated Bottle", "image": "/img/bottle.jpg",
             "quantity": 1, "color": "Sage", "price": 42.0},
            {"id": "li-092", "productId": "p-band", "name": "Resistance Band Set", "image": "/img/bands.jpg",
             "quantity": 1, "price": 40.0},
        ],
    },
    {
        "orderNumber": "INV008",
        "customerId": SAMPLE_CUSTOMER_ID,
        "status": "Processing",
        "method": "PayPal",
        "amount": "$215.50",
        "orderDate": "Jul 4, 2024",
        "subtotal": 198.0,
        "promotions": 0.0,
        "shipping": 0.0,
        "tax": 17.5,
        "total": 215.5,
        "shippingAddress": "12 Elm St, Oakland, CA 94607",
        "shippingMethod": "Express",
        "canReturn": False,
        "canCancel": True,
        "items": [
            {"id": "li-081", "productId": "p-pack", "name": "Day Pack 22L", "image": "/img/day-pack.jpg",
             "quantity": 1, "color": "Black", "price": 98.0},
            {"id": "li-082", "productId": "p-tee", "name": "Performance Tee", "image": "/img/tee.jpg",
             "quantity": 2, "color": "White", "size": "L", "price": 25.0},
            {"id": "li-083", "productId": "p-short", "name": "Trail Short", "image": "/img/short.jpg",
             "quantity": 1, "size": "L", "price": 50.0},
        ],
    },
    {
        "orderNumber": "INV007",
        "customerId": SAMPLE_CUSTOMER_ID,
        "status": "Delivered",
        "method": "Visa ending in 4242",
        "amount": "$1,049.00",
        "orderDate": "Mar 2, 2023",
        "subtotal": 980.0,
        "promotions": -50.0,
        "shipping": 0.0,
        "tax": 119.0,
        "total": 1049.0,
        "shippingAddress": "500 Howard St, San Francisco, CA 94105",
        "shippingMethod": "Standard",
        "carrier": "FedEx",
        "trackingNumber": "7489 2012 3344",
        "deliveryDate": "Mar 8, 2023",
        "canReturn": True,
        "canCancel": False,
        "returnDeadline": "Apr 7, 2023",
        "items": [
            {"id": f"li-07{n}", "productId": f"p-kit-{n}", "name": name, "image": f"/img/kit-{n}.jpg",
             "quantity": 1, "price": price}
            for n, (name, price) in enumerate(
                [
                    ("Ultralight Tent", 420.0),
                    ("Sleeping Bag 20F", 260.0),
                    ("Sleeping Pad", 120.0),
                    ("Camp Stove", 80.0),
                    ("Headlamp", 45.0),
                    ("Trekking Poles", 35.0),
                    ("Camp Mug", 20.0),
                ],
                start=1,
            )
        ],
    },
    {
        "orderNumber": "INV006",
        "customerId": SAMPLE_CUSTOMER_ID,
        "status": "Cancelled",
        "method": "Visa ending in 4242",
        "amount": "$64.00",
        "orderDate": "Jan 19, 2023",
        "subtotal": 60.0,
        "promotions": 0.0,
        "shipping": 0.0,
        "tax": 4.0,
        "total": 64.0,
        "shippingAddress": "500 Howard St, San Francisco, CA 94105",
        "canReturn": False,
        "canCancel": True,
        "items": [
            {"id": "li-061", "productId": "p-glove", "name": "Fleece Glove", "image": "/img/glove.jpg",
             "quantity": 2, "size": "M", "price": 30.0},
        ],
    },
    {
        "orderNumber": "INV005",
        "customerId": "cust-002",
        "status": "In Transit",
        "method": "Amex ending in 0005",
        "amount": "$48.00",
        "orderDate": "Oct 1, 2024",
        "subtotal": 44.0,
        "promotions": 0.0,
        "shipping": 0.0,
        "tax": 4.0,
        "total": 48.0,
        "shippingAddress": "88 Pine St, Seattle, WA 98101",
        "carrier": "USPS",
        "trackingNumber": "9400 1000 0000 0000 0000 00",
        "canReturn": False,
        "canCancel": True,
        "items": [
            {"id": "li-051", "productId": "p-beanie", "name": "Knit Beanie", "image": "/img/beanie.jpg",
             "quantity": 1, "color": "Rust", "price": 44.0},
        ],
    },
]


def seed_orders() -> list[RawOrder]:
    return [RawOrder.from_dict(order) for order in _ORDERS]
