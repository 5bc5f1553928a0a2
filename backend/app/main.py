import logging

from fastapi import FastAPI
from contextlib import asynccontextmanager

from backend.app.config import AppConfig
from backend.app.api.routes_workflow import router as workflow_router
from backend.app.dependencies import get_editor


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifecycle hooks.

    Ensures the shared editor exists before the first request.
    """
    get_editor()

    yield


def create_app(config: AppConfig) -> FastAPI:
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    app = FastAPI(
        title=config.app_name,
        lifespan=lifespan,
    )

    app.include_router(
        workflow_router,
        prefix=f"{config.api_prefix}/workflow",
        tags=["workflow"],
    )

    return app


config = AppConfig()
app = create_app(config)
