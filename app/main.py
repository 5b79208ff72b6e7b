from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.utils.logger import setup_logging
from app.core.config import get_settings, parse_comma_separated_origins
from app.core.error_handlers import register_exception_handlers
from app.core.telemetry import setup_telemetry
from app.routers import auth


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Perform application startup tasks before the FastAPI app begins serving requests.

    Runs logging setup and initializes telemetry for the provided FastAPI application, then yields control.
    """
    setup_logging()
    setup_telemetry(app)
    yield


app = FastAPI(
    title="ElectroProject Password Recovery",
    description="Password reset and recovery screens for ElectroProject",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        str(origin).rstrip("/")
        for origin in parse_comma_separated_origins(get_settings().BACKEND_CORS_ORIGINS)
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.get("/health", include_in_schema=False)
def health_check():
    """
    Provide the application's liveness state for health checks.

    Returns:
        dict: A mapping with key "status" and value "ok" indicating the service is healthy.
    """
    return {"status": "ok"}


app.include_router(auth.router)
