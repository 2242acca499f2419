from fastapi import FastAPI

from .config import settings
from .logging_config import setup_logging
from .routers.analytics import router as analytics_router

logger = setup_logging()

app = FastAPI(title=settings.APP_NAME, version=settings.APP_VERSION)


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


app.include_router(analytics_router)
logger.info("%s %s ready", settings.APP_NAME, settings.APP_VERSION)
