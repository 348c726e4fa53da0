from contextlib import asynccontextmanager
from fastapi import FastAPI
from .api.routes import router
from .core.config import settings
from .core.logging_config import setup_logging
from .db.init_db import init_db
from .db import session


@asynccontextmanager
async def lifespan(application: FastAPI):
    setup_logging(settings.LOG_LEVEL)
    if settings.CREATE_TABLES:
        init_db(session.engine)
    yield


def create_app() -> FastAPI:
    application = FastAPI(title="Todo API", version="0.1.0", lifespan=lifespan)
    application.include_router(router)
    return application


app = create_app()
