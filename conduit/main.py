import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import schemas
from .config import settings
from .database import init_db
from .routes import users as users_routes

logging.basicConfig(level=settings.log_level.upper())
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.app_name,
    description="Registration, login and profile lookup for Conduit users.",
    version="0.1.0",
)


@app.on_event("startup")
def on_startup() -> None:
    init_db()
    logger.info("Schema ready on %s", settings.database_url.split("://", 1)[0])


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        {"message": exc.detail},
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    # Input values are left out so a submitted password is never echoed.
    errors = [error.model_dump() for error in schemas.format_errors(exc.errors())]
    return JSONResponse(
        {"message": "Invalid request body", "errors": errors},
        status_code=400,
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled application error", exc_info=exc)
    return JSONResponse({"message": "Internal server error"}, status_code=500)


@app.get("/health")
def health():
    return {"status": "ok"}


app.include_router(users_routes.router)
