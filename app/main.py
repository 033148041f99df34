# app/main.py
from collections.abc import Callable
from contextlib import asynccontextmanager
import logging
import time

from fastapi.middleware.cors import CORSMiddleware
from fastapi import FastAPI, Request

from app.core.config import Settings, get_settings
from app.core.errors import register_exception_handlers, unhandled_error_handler
from app.repositories.storage import Storage, build_storage
from app.seed import seed_storage
from app.services.notification_service import NotificationService

# Routers
from app.routers.products import router as products_router
from app.routers.blogs import router as blogs_router
from app.routers.testimonials import router as testimonials_router
from app.routers.inquiries import router as inquiries_router

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("uvicorn")

NO_CACHE_HEADERS = {
    "Cache-Control": "no-store, no-cache, must-revalidate, private",
    "Pragma": "no-cache",
    "Expires": "0",
}


def create_app(
    settings: Settings | None = None,
    storage: Storage | None = None,
    email_sender: Callable[..., object] | None = None,
) -> FastAPI:
    """
    Build the API application.

    Args:
        settings: defaults to the cached env settings.
        storage: explicit store (tests); otherwise chosen from
            DATABASE_URL when the app starts.
        email_sender: replaces SMTP delivery (tests).
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Application lifespan handler.

        Startup:
          - Create the store (database or in-memory) and its tables.
          - Seed empty tables with sample content.

        Shutdown:
          - Dispose the store.
        """
        store = storage or build_storage(settings)
        backend = type(store).__name__
        logger.info("🔄 Startup: initializing %s...", backend)
        try:
            store.init()
            seed_storage(store)
            logger.info("✅ Startup: %s ready.", backend)
        except Exception as e:
            logger.error(f"❌ Startup: storage initialization FAILED: {e}")
            raise
        app.state.storage = store
        try:
            yield
        finally:
            store.close()
            app.state.storage = None

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.storage = None
    if email_sender is not None:
        app.state.notifications = NotificationService(settings, sender=email_sender)
    else:
        app.state.notifications = NotificationService(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def api_no_cache_and_log(request: Request, call_next):
        """Log each /api request and disable caching of its response."""
        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as exc:
            response = await unhandled_error_handler(request, exc)
        path = request.url.path
        if path.startswith(settings.API_PREFIX):
            response.headers.update(NO_CACHE_HEADERS)
            duration_ms = (time.perf_counter() - start) * 1000
            logger.info(
                "%s %s %s in %dms",
                request.method,
                path,
                response.status_code,
                duration_ms,
            )
        return response

    register_exception_handlers(app)

    app.include_router(products_router, prefix=settings.API_PREFIX)
    app.include_router(blogs_router, prefix=settings.API_PREFIX)
    app.include_router(testimonials_router, prefix=settings.API_PREFIX)
    app.include_router(inquiries_router, prefix=settings.API_PREFIX)

    @app.get("/")
    def root():
        """Health check endpoint."""
        return {"status": "ok", "service": "goodwill-exports-backend"}

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the API with uvicorn on PORT."""
    import uvicorn

    settings = get_settings()
    uvicorn.run("app.main:app", host="0.0.0.0", port=settings.PORT)
