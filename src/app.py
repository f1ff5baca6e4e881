"""Order History FastAPI application.

Serves the account Order History and Order Detail views over HTTP. Requests
under ``/orders`` run inside the order_history domain context so the
projection-backed repository can reach its read model.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# The domain is initialized at module level so uvicorn workers share it.
# PROTEAN_ENV selects the config overlay from domain.toml.
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from order_history.domain import order_history  # noqa: E402
from order_history.utils.logging import bind_request_context, clear_request_context  # noqa: E402

order_history.init()

# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Order History API",
    description="Storefront account order history and order detail",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the order_history domain context for order requests."""
    if request.url.path.startswith("/orders"):
        bind_request_context(method=request.method, path=request.url.path)
        try:
            with order_history.domain_context():
                response = await call_next(request)
        finally:
            clear_request_context()
        return response
    # Not an order route — pass through (health check, docs, etc.)
    return await call_next(request)


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from order_history.api import router as order_router  # noqa: E402

app.include_router(order_router)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(
        content={
            "status": "ok",
            "domains": {
                "order_history": {"name": order_history.name},
            },
        }
    )
