# Main application file



import logging
import time
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from app.core.config import settings
from app.core.errors import AppError
from app.database import StorageGateway, get_gateway
from app.routers import (
    clients,
    employees,
    products,
    inventory,
    purchases,
    sales,
)


# LOGGING CONFIGURATION

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)s | %(message)s",
)

logger = logging.getLogger("app")


# LIFESPAN (STORAGE GATEWAY)

@asynccontextmanager
async def lifespan(app: FastAPI):
    owns_gateway = getattr(app.state, "gateway", None) is None
    if owns_gateway:
        app.state.gateway = StorageGateway.from_settings(settings)

    if settings.AUTO_CREATE_TABLES:
        app.state.gateway.create_all()

    logger.info(
        f"Retail API starting ENV={settings.ENV} "
        f"pool_size={settings.DB_POOL_SIZE}"
    )

    yield

    if owns_gateway:
        app.state.gateway.dispose()

    logger.info("Retail API shut down")


# ERROR HANDLERS

async def app_error_handler(request: Request, exc: AppError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err["loc"] if part != "body")
        errors.append(f"{location}: {err['msg']}" if location else err["msg"])

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": ", ".join(errors), "kind": "validation", "errors": errors},
    )


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error", "kind": "storage", "error": str(exc)},
    )


# APP INIT

def create_app(gateway: StorageGateway | None = None) -> FastAPI:
    app = FastAPI(
        title="Retail CRUD API",
        description="Clients, employees, products, purchases and sales for a small shop",
        version="1.0.0",
        lifespan=lifespan,
    )

    if gateway is not None:
        app.state.gateway = gateway

    # CORS

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=False,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Authorization", "Content-Type"],
    )

    # REQUEST LOGGING MIDDLEWARE

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start_time = time.time()

        response = await call_next(request)

        duration = round((time.time() - start_time) * 1000, 2)

        logger.info(
            f"{request.method} {request.url.path} "
            f"Status: {response.status_code} "
            f"Time: {duration}ms"
        )

        return response

    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    # ROUTERS

    app.include_router(clients.router)
    app.include_router(employees.router)
    app.include_router(products.router)
    app.include_router(inventory.router)
    app.include_router(purchases.router)
    app.include_router(sales.router)

    # ROOT

    @app.get("/")
    def root():
        logger.info("Root endpoint called")
        return {"message": "Retail CRUD API is running", "docs": "/docs"}

    @app.get("/health")
    def health(gateway: StorageGateway = Depends(get_gateway)):
        try:
            gateway.ping()
        except SQLAlchemyError as exc:
            logger.warning(f"Database unreachable: {exc}")
            return JSONResponse(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                content={"status": "unhealthy", "database": "unreachable"},
            )

        return {"status": "healthy", "database": "reachable"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
    )
