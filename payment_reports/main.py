"""
Payment Reports Service
Generates configurable payment report PDFs
"""

from contextlib import asynccontextmanager
import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import Settings, get_settings
from .exceptions import InvalidConfigurationError, ReportGenerationError
from .routers import health, payment_reports
from .schemas.responses import ErrorResponse, HealthResponse

logger = logging.getLogger(__name__)


def _error_response(status_code: int, error: str, detail: Optional[str] = None) -> JSONResponse:
    body = ErrorResponse(error=error, detail=detail)
    return JSONResponse(status_code=status_code, content=body.model_dump())


def _format_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        parts.append(f"{location}: {err.get('msg')}" if location else str(err.get("msg")))
    return "; ".join(parts)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan - startup and shutdown events"""
    settings = get_settings()
    logger.info(f"Payment Reports Service started (logo: {settings.logo_path})")
    if settings.server_url:
        logger.info(f"API docs server URL: {settings.server_url}")
    yield
    logger.info("Payment Reports Service shutting down")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()

    servers = None
    if settings.server_url:
        servers = [{"url": settings.server_url, "description": "Codespace URL"}]

    app = FastAPI(
        title="Payment Reports API",
        description="API for generating customizable payment reports using the Builder pattern",
        version="1.0",
        servers=servers,
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["Content-Disposition", "X-Report-Filename"],
    )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        detail = _format_validation_errors(exc)
        logger.info(f"Rejected request to {request.url.path}: {detail}")
        return _error_response(400, "Invalid request", detail)

    @app.exception_handler(InvalidConfigurationError)
    async def invalid_configuration_handler(request: Request, exc: InvalidConfigurationError):
        logger.info(f"Rejected report configuration: {exc}")
        return _error_response(400, "Invalid report configuration", str(exc))

    @app.exception_handler(ReportGenerationError)
    async def report_generation_handler(request: Request, exc: ReportGenerationError):
        return _error_response(500, "Report generation failed", exc.message)

    app.include_router(payment_reports.router, prefix="/api")
    app.include_router(health.router, prefix="/api")

    @app.get("/health", response_model=HealthResponse)
    async def health_check():
        return HealthResponse()

    return app


logging.basicConfig(level=getattr(logging, get_settings().log_level, logging.INFO))

app = create_app()


def run():
    import uvicorn
    settings = get_settings()
    uvicorn.run("payment_reports.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
