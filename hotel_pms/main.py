"""
Hotel PMS application entry point
Back-office API for rooms, guests, bookings, staff, maintenance, payments,
guest communications and hotel settings.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException
from hotel_pms.config import Settings, settings as default_settings
from hotel_pms.database import MemoryStore, init_store
from hotel_pms.exceptions import PMSError
from hotel_pms.routers import (
    rooms, guests, bookings, staff, maintenance, payments,
    communications, settings as settings_router, dashboard, integration, users,
)
from hotel_pms.services.event_bus import event_bus, log_event

logger = logging.getLogger(__name__)


def format_validation_errors(exc: RequestValidationError) -> str:
    """'body.basePrice: Input should be ...; ...' without the request-location noise"""
    parts = []
    for error in exc.errors():
        location = [str(p) for p in error.get("loc", ()) if p not in ("body", "query", "path")]
        message = error.get("msg", "invalid value")
        parts.append(f"{'.'.join(location)}: {message}" if location else message)
    return "; ".join(parts) or "Invalid request"


def register_exception_handlers(app: FastAPI) -> None:
    """Every error leaves the API as {"message": ...}"""

    @app.exception_handler(PMSError)
    async def pms_error_handler(request: Request, exc: PMSError):
        return JSONResponse(status_code=exc.status_code, content={"message": exc.message})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": format_validation_errors(exc)},
        )

    @app.exception_handler(HTTPException)
    async def http_error_handler(request: Request, exc: HTTPException):
        return JSONResponse(status_code=exc.status_code, content={"message": str(exc.detail)})

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "Internal server error"},
        )


def create_app(store: Optional[MemoryStore] = None,
               app_settings: Optional[Settings] = None) -> FastAPI:
    """
    Application factory

    The store is built once here and handed to the routes through the
    get_store dependency; pass one in to run against prepared data.
    """
    app_settings = app_settings or default_settings
    logging.basicConfig(
        level=app_settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        event_bus.subscribe(event_bus.WILDCARD, log_event)
        logger.info(f"{app_settings.APP_NAME} started ({len(app.state.store.rooms)} rooms loaded)")
        yield
        event_bus.unsubscribe(event_bus.WILDCARD, log_event)

    app = FastAPI(
        title=app_settings.APP_NAME,
        description="Hotel property-management back office",
        version=app_settings.APP_VERSION,
        debug=app_settings.DEBUG,
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    app.state.store = store if store is not None else init_store(seed=app_settings.SEED_SAMPLE_DATA)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    prefix = app_settings.API_PREFIX
    for module in (rooms, guests, bookings, staff, maintenance, payments,
                   communications, settings_router, dashboard, integration, users):
        app.include_router(module.router, prefix=prefix)
    app.include_router(payments.intent_router, prefix=prefix)

    @app.get("/")
    def root():
        return {"name": app_settings.APP_NAME, "version": app_settings.APP_VERSION}

    @app.get("/health")
    def health_check():
        return {"status": "healthy"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
