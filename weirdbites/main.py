import logging
from datetime import datetime, timezone

from fastapi import FastAPI, Request, Depends, status
from fastapi.exceptions import RequestValidationError
from fastapi.staticfiles import StaticFiles
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.sessions import SessionMiddleware

from weirdbites.core.config import settings, BASE_DIR
from weirdbites.core.features import get_enabled_features, get_disabled_features
from weirdbites.core.responses import api_success, api_error
from weirdbites.db.session import get_db, engine
from weirdbites.schemas.health import HealthCheckResponse
from weirdbites.api import products, cart
from weirdbites.web import routes as web

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title=settings.SHOP_NAME,
    description="Unusual snacks from around the world",
    version="1.0.0",
    openapi_url="/api/openapi.json",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
)

# Mount static files
app.mount("/static", StaticFiles(directory=str(BASE_DIR / "static")), name="static")

# Session middleware holds the cart snapshot
app.add_middleware(
    SessionMiddleware,
    secret_key=settings.SESSION_SECRET_KEY,
    max_age=settings.SESSION_MAX_AGE
)

# Include routers
app.include_router(products.router)
app.include_router(cart.router)
app.include_router(web.router)


@app.get("/api/health", response_model=HealthCheckResponse)
async def health_check(db: AsyncSession = Depends(get_db)):
    """API and database health."""
    try:
        await db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error(f"Health check database failure: {str(e)}")
        return api_success(HealthCheckResponse(
            status="error",
            message="Database connection failed",
            timestamp=datetime.now(timezone.utc).isoformat(),
            database="disconnected",
            environment=settings.ENVIRONMENT
        ), status_code=status.HTTP_503_SERVICE_UNAVAILABLE)

    return HealthCheckResponse(
        status="ok",
        message="API and database are operational",
        timestamp=datetime.now(timezone.utc).isoformat(),
        database="connected",
        environment=settings.ENVIRONMENT
    )


def is_api_request(request: Request) -> bool:
    accept = request.headers.get("accept", "")
    return request.url.path.startswith("/api/") or "application/json" in accept


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return api_error("Invalid request", status.HTTP_422_UNPROCESSABLE_ENTITY, details=exc.errors())


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    # Pages get an HTML 404, everything else a JSON error body
    if exc.status_code == 404 and not is_api_request(request):
        return web.templates.TemplateResponse(request, "errors/404.html", {
            "request": request,
            "message": "Page not found"
        }, status_code=404)

    return api_error(str(exc.detail), exc.status_code)


@app.on_event("startup")
async def startup_event():
    logger.info(f"Starting {settings.SHOP_NAME} ({settings.ENVIRONMENT})")
    logger.info(f"Enabled features: {', '.join(get_enabled_features())}")
    logger.info(f"Disabled features: {', '.join(get_disabled_features())}")


@app.on_event("shutdown")
async def shutdown_event():
    logger.info("Shutting down shop application")
    await engine.dispose()
