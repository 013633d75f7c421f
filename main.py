import logging
import os
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.router import api_router
from core.config import settings

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Forwarding client requests to {settings.CLIENTS_API_URL}")
    logger.info("Microloan mobile gateway is running")
    yield
    logger.info("Microloan mobile gateway stopped")


app = FastAPI(
    title="Microloan Mobile Gateway",
    version="1.0.0",
    description="Backend for the microloan mobile app: client dashboard and client registration",
    lifespan=lifespan,
    openapi_tags=[
        {"name": "Dashboard", "description": "Client dashboard routes"},
        {"name": "Registration", "description": "Client registration routes"},
    ],
)

# CORS configuration - restrict in production
CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*").split(",")
if settings.ENVIRONMENT == "production":
    # In production, MUST specify allowed origins explicitly
    logger.warning("CORS_ORIGINS in production: %s", CORS_ORIGINS)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["GET", "POST"],
    allow_headers=["Content-Type", "Authorization"],
)

app.include_router(api_router)


@app.get("/health")
def health_check() -> dict:
    return {"status": "ok"}
