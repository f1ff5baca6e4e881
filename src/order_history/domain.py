"""Order History bounded context — account Order History and Order Detail views.

Normalizes raw order records into fulfillment groups (shipment or in-store
pickup), evaluates per-item return/cancel eligibility, resolves status badges,
and lays out item thumbnails for the order history list. Read-only: orders are
supplied by an Order Repository and never mutated here.
"""

from protean.domain import Domain

from order_history.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging()

# Get logger for this module
logger = get_logger(__name__)

# Domain Composition Root
order_history = Domain(name="order_history")
