import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from feedback_api.api import health, routes
from feedback_api.config import Settings
from feedback_api.database.connection import close_db, create_db_engine, init_db
from feedback_api.database.store import FeedbackStore
from feedback_api.errors import ServiceError
from feedback_api.models.responses import ErrorResponse

logger = logging.getLogger(__name__)


def open_store(app: FastAPI, settings: Settings) -> None:
    """Tietokannan alustaminen sovelluksen käynnistyessä."""
    engine = None
    try:
        engine = create_db_engine(settings.database_url, echo=settings.db_echo)
        init_db(engine)
    except (SQLAlchemyError, ImportError):
        # ImportError: tietokanta-ajuria ei ole asennettu
        if settings.db_fail_fast:
            logger.critical("Database initialization failed, aborting startup")
            if engine is not None:
                close_db(engine)
            raise
        logger.exception("Database initialization failed, continuing without a working store")

    if engine is not None:
        app.state.engine = engine
        app.state.store = FeedbackStore(engine)


@asynccontextmanager
async def lifespan(app: FastAPI):
    open_store(app, app.state.settings)
    yield
    if app.state.engine is not None:
        close_db(app.state.engine)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Rakentaa FastAPI-sovelluksen annetuilla (tai ympäristön) asetuksilla."""
    settings = settings or Settings()

    app = FastAPI(
        title="Feedback API",
        description="Palautteiden vastaanotto ja listaus.",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.engine = None
    app.state.store = None

    # Salli yhteydet frontendiltä
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def invalid_request_handler(request: Request, exc: RequestValidationError):
        logger.info("Invalid request body on %s %s: %s", request.method, request.url.path, exc.errors())
        return JSONResponse(status_code=400, content=ErrorResponse(message="Invalid request body").model_dump())

    @app.exception_handler(ServiceError)
    async def service_error_handler(request: Request, exc: ServiceError):
        # virheet, joita reitit eivät itse käsitelleet (esim. riippuvuuksissa)
        logger.error("Unhandled service error on %s %s: %r", request.method, request.url.path, exc)
        message = exc.public_message if exc.status_code < 500 else "Internal server error"
        return JSONResponse(status_code=exc.status_code, content=ErrorResponse(message=message).model_dump())

    # --- API-reitit ---
    app.include_router(routes.router, prefix=settings.mount_path)
    app.include_router(health.router)

    return app


app = create_app()
