import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from api.v1.api import api_router
from core.config import settings
from core.database import Database
from core.exception.exception_handlers import register_exception_handlers
from core.middleware import RequestLoggingMiddleware

logger = logging.getLogger("recipes_finder")


@asynccontextmanager
async def lifespan(app: FastAPI):
    database: Database = app.state.database
    if settings.AUTO_CREATE_TABLES:
        await database.create_tables()
    logger.info("%s started", settings.APP_NAME)

    yield

    await database.dispose()
    logger.info("%s stopped", settings.APP_NAME)


def create_app(database: Database | None = None) -> FastAPI:
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)
    app.state.database = database or Database(settings.DATABASE_URL, echo=settings.DB_ECHO)

    app.add_middleware(RequestLoggingMiddleware)
    register_exception_handlers(app)

    app.include_router(api_router, prefix=settings.API_PREFIX)

    @app.get("/")
    async def root():
        return {"message": settings.APP_NAME}

    return app


app = create_app()
