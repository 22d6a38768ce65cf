"""Breadboard FastAPI application.

Storefront web server that processes commands synchronously via HTTP.
Every request runs inside the breadboard domain context.

Usage:
    breadboard serve --port 8000
    uvicorn breadboard.app:create_app --factory --port 8000
"""

from uuid import uuid4

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from protean.integrations.fastapi import register_exception_handlers

from breadboard.domain import breadboard
from breadboard.errors import BreadboardError
from breadboard.utils.logging import add_context, clear_context, get_logger

logger = get_logger(__name__)


async def breadboard_error_handler(request: Request, exc: BreadboardError) -> JSONResponse:
    """Map every BreadboardError to its status and ``{message, code, details, transient}``."""
    if exc.status_code >= 500:
        logger.error("request_failed", path=request.url.path, code=exc.code)
    else:
        logger.warning("request_rejected", path=request.url.path, code=exc.code)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


def build_app() -> FastAPI:
    """Assemble the app around an already initialized domain."""
    app = FastAPI(
        title="Breadboard API",
        description="B2B bakery storefront: catalogue, cart, checkout and order tracking",
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
        """Push the breadboard domain context and a fresh log context for each request."""
        clear_context()
        add_context(request_id=uuid4().hex[:12], path=request.url.path)
        with breadboard.domain_context():
            response = await call_next(request)
        return response

    app.add_exception_handler(BreadboardError, breadboard_error_handler)
    register_exception_handlers(app)

    # -----------------------------------------------------------------------
    # Routers
    # -----------------------------------------------------------------------
    from breadboard.catalogue.api import category_router, product_router
    from breadboard.identity.api import address_router, auth_router
    from breadboard.ordering.api import cart_router, order_router
    from breadboard.payments.api import router as payments_router

    app.include_router(auth_router)
    app.include_router(product_router)
    app.include_router(category_router)
    app.include_router(cart_router)
    app.include_router(order_router)
    app.include_router(payments_router)
    app.include_router(address_router)

    # -----------------------------------------------------------------------
    # Health
    # -----------------------------------------------------------------------
    @app.get("/health")
    async def health():
        return JSONResponse(content={"status": "ok", "domain": breadboard.name})

    return app


def create_app(seed: bool = True) -> FastAPI:
    """Initialize the domain, optionally load the seed data and build the app."""
    breadboard.init()

    if seed:
        from breadboard.seed import seed_storefront

        with breadboard.domain_context():
            seed_storefront()

    return build_app()
