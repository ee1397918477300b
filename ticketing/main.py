import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ticketing.core import config
from ticketing.core.errors import DomainError
from ticketing.core.logging_config import configure_logging
from ticketing.database.db import Base, engine
from ticketing.routes import event_types, events, organizers, reservations, users
from ticketing.schemas.common import ErrorOut

configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title="Ticketing API")

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Create all tables (in production, use migrations such as Alembic)
Base.metadata.create_all(bind=engine)
logger.info("Database connected")


def _describe_error(error: dict) -> str:
    # custom validators raise ValueError; report their text without pydantic's prefix
    ctx_error = (error.get("ctx") or {}).get("error")
    if error.get("type") == "value_error" and ctx_error is not None:
        return str(ctx_error)
    return error.get("msg", "Invalid value")


def _error_body(error: str, message: str | None = None) -> dict:
    return ErrorOut(error=error, message=message).model_dump(exclude_none=True)


@app.exception_handler(DomainError)
async def domain_error_handler(request: Request, exc: DomainError):
    logger.info("%s %s rejected with %s: %s", request.method, request.url.path, exc.status_code, exc.message)
    return JSONResponse(status_code=exc.status_code, content=_error_body(exc.message))


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    details = [
        f"{'.'.join(str(part) for part in error.get('loc', ()))}: {_describe_error(error)}" for error in errors
    ]
    first = _describe_error(errors[0]) if errors else "Invalid request."
    return JSONResponse(status_code=422, content=_error_body(first, "; ".join(details)))


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content=_error_body("Internal Server Error", str(exc)))


# Include the routers
app.include_router(users.router)
app.include_router(organizers.router)
app.include_router(event_types.router)
app.include_router(events.router)
app.include_router(reservations.router)
