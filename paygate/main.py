"""
Paygate - Payment Gateway
FastAPI application entry point.
"""

import uuid
from contextlib import asynccontextmanager

import structlog
from fastapi import Depends, FastAPI, Request, status
from fastapi.responses import JSONResponse

from paygate.config import settings
from paygate.gateway import PaymentGateway, get_gateway
from paygate.routes import payments_router
from paygate.schemas import ErrorResponse
from paygate.utils.exceptions import ProviderNotFoundError
from paygate.utils.logging import configure_logging


# Configurar logging estructurado
configure_logging(settings)

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Gestión del ciclo de vida de la aplicación."""
    # Startup
    logger.info(
        "Starting Payment Gateway",
        app_name=settings.APP_NAME,
        version=settings.APP_VERSION,
        environment=settings.ENVIRONMENT,
        payment_providers=settings.PAYMENT_PROVIDERS,
    )

    # Construir el gateway antes del primer request
    get_gateway()

    yield

    # Shutdown
    logger.info("Shutting down Payment Gateway")


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Gateway de pagos que despacha a PayPal y Stripe a través de adapters",
    lifespan=lifespan,
)


@app.middleware("http")
async def add_request_id(request: Request, call_next):
    """Añade request_id a cada petición para trazabilidad."""
    request_id = request.headers.get("X-Request-ID", str(uuid.uuid4()))
    request.state.request_id = request_id

    # Bind request_id al logger
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(request_id=request_id)

    response = await call_next(request)
    response.headers["X-Request-ID"] = request_id
    return response


@app.exception_handler(ProviderNotFoundError)
async def provider_not_found_handler(request: Request, exc: ProviderNotFoundError):
    """Traduce proveedores no registrados a 404."""
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content=ErrorResponse(
            message=exc.message,
            code=exc.code,
            request_id=getattr(request.state, "request_id", None),
        ).model_dump(),
    )


@app.get("/", tags=["Health"])
async def root():
    """Root endpoint."""
    return {
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "status": "running",
    }


@app.get("/health", tags=["Health"])
async def health_check(gateway: PaymentGateway = Depends(get_gateway)):
    """Health check endpoint."""
    return {
        "status": "healthy",
        "environment": settings.ENVIRONMENT,
        "payment_providers": gateway.providers,
    }


# Incluir routers
app.include_router(payments_router, prefix="/api/providers", tags=["Payments"])


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("paygate.main:app", host="0.0.0.0", port=8001, reload=True)
