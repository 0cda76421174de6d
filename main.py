import logging
import os
from contextlib import asynccontextmanager

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from database import check_connection, get_session_context, init_db
from routers import (
    ads_router,
    admin_router,
    auth_router,
    category_router,
    public_router,
    users_router,
)
from schemas import ErrorResponse
from services.category_service import seed_categories
from services.exceptions import ServiceError

# Load .env
load_dotenv()

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

SEED_ON_STARTUP = os.getenv("SEED_ON_STARTUP", "true").lower() == "true"


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    if SEED_ON_STARTUP:
        with get_session_context() as db:
            seed_categories(db)
    yield


# App instance
app = FastAPI(title="SlotShare API", version="1.0.0", lifespan=lifespan)

# CORS
origins = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Error envelopes
def error_response(status_code: int, message: str, errors=None) -> JSONResponse:
    body = ErrorResponse(message=message, errors=errors)
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(by_alias=True, exclude_none=True),
    )


@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, exc: ServiceError):
    return error_response(exc.status_code, exc.message)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = [
        {
            "field": ".".join(str(part) for part in err.get("loc", ()) if part != "body"),
            "message": err.get("msg", "Invalid value"),
        }
        for err in exc.errors()
    ]
    return error_response(400, "Validation failed", errors)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    message = "Route not found" if exc.status_code == 404 else str(exc.detail)
    return error_response(exc.status_code, message)


app.include_router(auth_router)
app.include_router(users_router)
app.include_router(admin_router)
app.include_router(category_router)
app.include_router(public_router)
app.include_router(ads_router)


@app.get("/")
def root():
    return {
        "message": "Account Rental Backend API",
        "version": app.version,
        "endpoints": {
            "auth": "/api/auth",
            "users": "/users",
            "admin": "/admin",
            "category": "/category",
            "public": "/public",
            "ads": "/ads",
        },
    }


@app.get("/health")
def health():
    database_ok = check_connection()
    return JSONResponse(
        status_code=200 if database_ok else 503,
        content={"success": database_ok, "database": "up" if database_ok else "down"},
    )


# Unexpected-error fallback middleware
@app.middleware("http")
async def internal_error_middleware(request: Request, call_next):
    try:
        return await call_next(request)
    except Exception:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return error_response(500, "Internal server error")


if __name__ == "__main__":
    port = int(os.getenv("PORT", 10000))
    uvicorn.run("main:app", host="0.0.0.0", port=port, reload=True)
