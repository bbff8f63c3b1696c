from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from jobmail import __version__
from jobmail.config import settings
from jobmail.errors import JobMailError
from jobmail.models.email_models import ApiInfo, ErrorResponse
from jobmail.api import compose_routes, email_routes
from jobmail.services.upload_service import ensure_upload_dir

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    upload_dir = ensure_upload_dir()
    logger.info(f"{settings.app_name} API is ready (uploads in {upload_dir})")
    yield


app = FastAPI(
    title=settings.app_name,
    version=__version__,
    description="Generate job application emails from a job description",
    lifespan=lifespan,
)

# ── CORS ────────────────────────────────────────────────────────────────────

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials="*" not in settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ── Routers ─────────────────────────────────────────────────────────────────

app.include_router(email_routes.router, prefix="/api", tags=["Emails"])
app.include_router(compose_routes.router, prefix="/compose", tags=["Compose"])

app.mount("/uploads", StaticFiles(directory=settings.upload_path, check_dir=False), name="uploads")

# ── Error Handling ──────────────────────────────────────────────────────────


def _error_response(status_code: int, error: str, details: str | None = None) -> JSONResponse:
    body = ErrorResponse(error=error, details=details)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


@app.exception_handler(JobMailError)
async def jobmail_error_handler(request: Request, exc: JobMailError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.error} ({exc.details})")
    else:
        logger.info(f"{request.method} {request.url.path} rejected: {exc.error}")
    return _error_response(exc.status_code, exc.error, exc.details)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    details = errors[0].get("msg") if errors else None
    return _error_response(400, "Invalid request", details)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404:
        return _error_response(404, "Endpoint not found")
    return _error_response(exc.status_code, str(exc.detail))


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return _error_response(500, str(exc) or "Internal server error")


# ── Info & Health Check ─────────────────────────────────────────────────────


@app.get("/", response_model=ApiInfo)
async def root():
    return ApiInfo(
        message=f"{settings.app_name} API is running!",
        endpoints={
            "templates": "/api/templates",
            "generateEmail": "/api/generate-email",
        },
    )


@app.get("/api/health")
async def health_check():
    return {"status": "healthy", "app": settings.app_name, "version": __version__}
