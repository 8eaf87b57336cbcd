import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from . import config
from .routes.calculation import router as calculation_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):

    # Startup
    logger.info("Starting Forces Readiness Engine")
    logger.info("   Default weighting strategy: %s", config.DEFAULT_WEIGHTING_STRATEGY)
    logger.info("   Default output format:      %s", config.DEFAULT_OUTPUT_FORMAT)
    logger.info("   Max batch size:             %d", config.MAX_BATCH_SIZE)

    yield

    logger.info("Shutting down Forces Readiness Engine")


app = FastAPI(
    title="Forces Aggregation & Readiness Scoring Engine",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)


app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(calculation_router)


@app.get(
    "/",
    summary="API Root",
    description="Welcome endpoint with API information",
    tags=["General"]
)
async def root():
    """Root endpoint with API information."""
    return {
        "name": "Forces Readiness Engine",
        "version": "0.1.0",
        "description": "Aggregates classified adoption forces into a readiness score",
        "docs": "/docs",
        "endpoints": {
            "calculate": "POST /jtbd/calculate - Calculate readiness from classified items",
            "health": "GET /health - Service health check"
        }
    }


@app.get(
    "/health",
    summary="Global Health Check",
    description="Check if the API server is running",
    tags=["General"]
)
async def health():
    """Global health check endpoint."""
    return {
        "status": "healthy",
        "service": "forces-readiness-engine",
        "version": "0.1.0"
    }


@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    """Global exception handler for unhandled errors."""
    logger.exception("Unhandled error on %s", request.url.path)
    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": "Internal server error",
            "detail": str(exc) if config.DEBUG else "An unexpected error occurred"
        }
    )


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(level=logging.DEBUG if config.DEBUG else logging.INFO)
    uvicorn.run(
        "forces_engine.main:app",
        host=config.HOST,
        port=config.PORT,
        reload=config.DEBUG,
    )
