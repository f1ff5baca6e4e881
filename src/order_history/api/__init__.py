"""Order History API package."""

from order_history.api.routes import router

__all__ = ["router"]
