from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from datetime import datetime, timezone
import uuid
from contextlib import asynccontextmanager
from database import database

from briefly import __product__, __version__
from briefly.container import STORAGE_MONGO, build_memory_services, build_mongo_services
from briefly.errors import BrieflyError
from briefly.routes import auth_router, briefs_router, credits_router, user_briefs_router

import os
import logging
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables
ROOT_DIR = Path(__file__).parent
load_dotenv(ROOT_DIR / '.env')

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

STORAGE = os.environ.get("BRIEFLY_STORAGE", "memory").strip().lower()
CORS_ORIGINS = [
    origin.strip()
    for origin in os.environ.get("CORS_ORIGINS", "http://localhost:3000").split(",")
    if origin.strip()
]


# Lifespan context manager for startup/shutdown
@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info(f"Starting {__product__} API (storage={STORAGE})")
    if STORAGE == STORAGE_MONGO:
        await database.connect()
        app.state.briefly = build_mongo_services(database.get_db())
    else:
        app.state.briefly = build_memory_services()

    yield

    # Shutdown
    if STORAGE == STORAGE_MONGO:
        await database.close()
    logger.info(f"{__product__} API stopped")


app = FastAPI(
    title=f"{__product__} API",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth_router)  # Registration / login
app.include_router(briefs_router)  # Brief generation + categories
app.include_router(user_briefs_router)  # Brief history
app.include_router(credits_router)  # Credit balance + history


# Root endpoint
@app.get("/")
async def root():
    return {
        "message": f"{__product__} Backend is running!",
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": os.getenv("ENVIRONMENT", "development"),
    }

# Health check
@app.get("/api/health")
async def health_check(request: Request):
    services = request.app.state.briefly
    return {
        "status": "healthy",
        "storage": services.storage,
        "users": await services.users.count(),
        "briefs": await services.briefs.count(),
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


# Briefly errors carry their own status code and message
@app.exception_handler(BrieflyError)
async def briefly_exception_handler(request: Request, exc: BrieflyError):
    if exc.status_code >= 500:
        logger.error(f"{exc.error_code} on {request.url.path}: {exc.message}")
        message = "Brief generation failed. Please try again."
    else:
        message = exc.message
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": message, "error_code": exc.error_code},
    )


# Validation error handler: log request_id + errors for intake debugging
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    request_id = str(uuid.uuid4())
    errors = exc.errors()
    logger.warning(
        "Request validation failed request_id=%s path=%s errors=%s",
        request_id,
        request.url.path,
        [(e.get("loc"), e.get("msg"), e.get("type")) for e in errors],
    )
    return JSONResponse(
        status_code=422,
        content={"detail": errors, "request_id": request_id},
    )


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error"}
    )

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "server:app",
        host="0.0.0.0",
        port=int(os.getenv("PORT", "5000")),
        reload=os.getenv("ENVIRONMENT") == "development"
    )
