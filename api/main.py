"""
Geocoding API (FastAPI)
Thin HTTP front end over the Google Maps Geocoding client.
"""
import logging
import os
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import ALLOWED_ORIGINS, API_VERSION, ENVIRONMENT, LOG_LEVEL
from api.routers.v1_geocoding import router as geocoding_router
from api.routers.v1_health import router as health_router

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# Create FastAPI app
app = FastAPI(
    title="Geocoding API",
    description="Forwards address geocoding requests to the Google Maps Geocoding API.",
    version=API_VERSION,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
async def root():
    base_url = os.getenv("BASE_URL", "http://localhost:8000")
    return {
        "message": "Geocoding API",
        "version": API_VERSION,
        "environment": ENVIRONMENT,
        "base_url": base_url,
        "docs": f"{base_url}/docs",
        "health": f"{base_url}/health",
        "routes": {
            "geocode": f"{base_url}/api/v1/geocoding/geocode",
        },
    }


@app.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "service": "geocoding-api",
        "version": API_VERSION,
        "environment": ENVIRONMENT,
    }


# Mount routers
app.include_router(health_router, prefix="/api")
app.include_router(geocoding_router, prefix="/api")


if __name__ == "__main__":
    import uvicorn

    port = int(os.getenv("PORT", 8000))
    uvicorn.run("api.main:app", host="0.0.0.0", port=port, reload=True, log_level="info")
