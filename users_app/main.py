from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI

from users_app.api.user_routes import health_router, user_router
from users_app.core.config import settings
from users_app.core.db import init_db
from users_app.core.log import configure_logging

configure_logging(settings)
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("app_starting", environment=settings.environment)
    if settings.create_tables:
        await init_db()
    yield


app = FastAPI(title="Hexagonal FastAPI Users", lifespan=lifespan)

app.include_router(user_router, prefix="/api")
app.include_router(health_router, prefix="/api")


# run the application with: 'uvicorn users_app.main:app --reload' from the project root
# for tests: 'APP_ENV=test uvicorn users_app.main:app --reload'
# APP_ENV picks the matching .env file
