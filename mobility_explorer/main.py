import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from mobility_explorer.config import settings
from mobility_explorer.routes.eligibility import router as eligibility_router
from mobility_explorer.routes.explorer import router as explorer_router
from mobility_explorer.routes.rules import router as rules_router
from mobility_explorer.services.data_service import data_store
from mobility_explorer.services.explorer_service import explorer_service

# Configure logging
logging.basicConfig(level=settings.log_level.upper())
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup; a failed load leaves every country "unknown" instead of aborting
    if settings.load_on_startup:
        outcome = await data_store.load()
        logger.info(f"Startup data load: {outcome}")
    yield
    # Shutdown
    explorer_service.clear_cache()
    logger.info("Mobility Explorer stopped")


app = FastAPI(
    title=settings.app_name,
    description="Which countries offer a visa pathway for your persona, age and income (demo data, not legal advice)",
    version=settings.app_version,
    lifespan=lifespan
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins_list(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
async def root():
    return {"message": f"{settings.app_name} API is running", "version": settings.app_version}


@app.post("/data/reload")
async def reload_data():
    """Reload visa rules and geometry from the configured sources"""
    try:
        outcome = await explorer_service.reload()
        return {
            "loaded": outcome,
            "revision": data_store.revision,
            "errors": data_store.errors
        }
    except Exception as e:
        logger.error(f"Error reloading data: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")


app.include_router(eligibility_router)
app.include_router(explorer_router)
app.include_router(rules_router)


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "service": "mobility-explorer",
        "data_loaded": data_store.loaded,
        "data_revision": data_store.revision
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("mobility_explorer.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
