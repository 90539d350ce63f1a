import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from careprice import config
from careprice.api.routes import hospitals, procedures, search
from careprice.data.catalog.store import get_catalog

logging.basicConfig(level=config.LOG_LEVEL)
logger = logging.getLogger(__name__)

if config.LOG_LEVEL != config.LOG_LEVEL_SETTING.strip().upper():
    logger.warning(f"Unknown CAREPRICE_LOG_LEVEL '{config.LOG_LEVEL_SETTING}', using {config.LOG_LEVEL}")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # load and validate the catalog before serving, so a bad snapshot fails fast
    get_catalog()
    yield


app = FastAPI(
    title=config.API_TITLE,
    description="Compare hospital procedure prices by insurance provider and plan",
    version=config.API_VERSION,
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register API routes
app.include_router(search.router, prefix="/api", tags=["search"])
app.include_router(procedures.router, prefix="/api", tags=["procedures"])
app.include_router(hospitals.router, prefix="/api", tags=["hospitals"])

@app.get("/")
async def root():
    return {
        "message": config.API_TITLE,
        "version": config.API_VERSION,
        "status": "running",
    }

@app.get("/health")
async def health_check():
    return {"status": "healthy"}
