"""FastAPI application factory for the caterly domain.

Kept free of ``caterly.init()`` so tests can build an app against a domain
that a fixture has already initialized.
"""

import uuid

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from caterly.domain import caterly
from caterly.exceptions import register_exception_handlers
from caterly.utils.logging import bind_request, clear_request


def create_app() -> FastAPI:
    app = FastAPI(
        title="Caterly API",
        description="Food marketplace: recipes, carts, multi-caterer orders and messaging",
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
        """Push the caterly domain context and tag log lines with a request id."""
        request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex
        bind_request(request_id=request_id, path=request.url.path)
        try:
            with caterly.domain_context():
                response = await call_next(request)
        finally:
            clear_request()
        response.headers["X-Request-ID"] = request_id
        return response

    from caterly.catalogue.api.routes import router as recipe_router
    from caterly.identity.api.routes import accounts_router, auth_router, favorites_router
    from caterly.messaging.api.routes import router as message_router
    from caterly.ordering.api.routes import cart_router, order_router

    app.include_router(auth_router)
    app.include_router(accounts_router)
    app.include_router(favorites_router)
    app.include_router(recipe_router)
    app.include_router(cart_router)
    app.include_router(order_router)
    app.include_router(message_router)

    register_exception_handlers(app)

    @app.get("/health")
    async def health():
        return {"status": "ok", "domain": caterly.name}

    return app
