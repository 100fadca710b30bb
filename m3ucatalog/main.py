# m3ucatalog/main.py

from fastapi import FastAPI, APIRouter

from m3ucatalog.api.routers import catalog
from m3ucatalog.core.config import get_settings
from m3ucatalog.core.logger import setup_logger
from m3ucatalog.version import __version__

settings = get_settings()
app = FastAPI(title=settings.app_title, version=__version__, debug=settings.debug)

# Prime the app logger
logger = setup_logger(__name__)
logger.info("Logger initialized, starting application…")

# API v1 routers
api_v1 = APIRouter(prefix="/api/v1", tags=["API"])
api_v1.include_router(catalog.router, prefix="/catalog")
app.include_router(api_v1)
