import logging
from contextlib import asynccontextmanager

from dotenv import load_dotenv

# Load environment variables at the very beginning
load_dotenv()

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api import analytics, capture_email, system
from app.config import settings
from app.constants import APP_CONFIG
from app.integrations import firebase

# Set up logging
logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    if settings.testing:
        logger.info("[STARTUP] TESTING set; skipping Firebase initialization")
    else:
        firebase.initialize()
    logger.info(f"[STARTUP] {APP_CONFIG.name} ready at {settings.app_url}")
    yield
    logger.info("[SHUTDOWN] Stopped")


app = FastAPI(
    title=f"{APP_CONFIG.name} API",
    description=APP_CONFIG.description,
    lifespan=lifespan,
)


# ---- Global Exception Handler for CORS ----
# Error responses must carry CORS headers or the browser hides the body.
@app.exception_handler(StarletteHTTPException)
async def custom_http_exception_handler(request: Request, exc: StarletteHTTPException):
    headers = dict(getattr(exc, "headers", None) or {})
    headers["Access-Control-Allow-Origin"] = "*"
    headers["Access-Control-Allow-Credentials"] = "true"
    headers["Access-Control-Allow-Methods"] = "*"
    headers["Access-Control-Allow-Headers"] = "*"

    logger.info(f"[ERROR HANDLER] Returning {exc.status_code} for {request.url.path}: {exc.detail}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail},
        headers=headers,
    )


# ---- CORS ----
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(system.router)
app.include_router(analytics.router)
app.include_router(capture_email.router)
