# fitflex/main.py
import time
import logging
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from starlette.exceptions import HTTPException as StarletteHTTPException

from fitflex.errors import FitflexError
from fitflex.routers.auth import router as auth_router
from fitflex.routers.exercises import router as exercises_router
from fitflex.routers.templates import router as templates_router
from fitflex.routers.sessions import router as sessions_router
from fitflex.routers.measurements import router as measurements_router
from fitflex.routers.export import router as export_router
from fitflex.routers.settings import router as settings_router
from fitflex.db import SessionLocal  # for healthz DB check and seeding
from fitflex.seed import seed_default_exercises
from fitflex.settings import get_settings

settings = get_settings()
logging.basicConfig(level=settings.LOG_LEVEL)
log = logging.getLogger("uvicorn")

@asynccontextmanager
async def lifespan(_app: FastAPI):
    if settings.SEED_DEFAULT_EXERCISES:
        with SessionLocal() as db:
            seed_default_exercises(db)
    yield

app = FastAPI(
    title="FitFlex API",
    lifespan=lifespan,
    openapi_tags=[
        {"name": "auth", "description": "Registration & login"},
        {"name": "exercises", "description": "Exercise catalog"},
        {"name": "templates", "description": "Workout templates"},
        {"name": "sessions", "description": "Workout sessions & dashboard statistics"},
        {"name": "measurements", "description": "Body measurements"},
        {"name": "export", "description": "CSV export"},
        {"name": "settings", "description": "Display preferences"},
    ],
)

# CORS (relax for local dev; tighten origins in prod via ALLOW_ORIGINS)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.middleware("http")
async def add_request_id_and_log(request: Request, call_next):
    req_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    start = time.perf_counter()
    response = await call_next(request)
    duration_ms = (time.perf_counter() - start) * 1000
    response.headers["X-Request-ID"] = req_id
    log.info("rid=%s %s %s -> %s in %.1fms",
             req_id, request.method, request.url.path, response.status_code, duration_ms)
    return response

# Every error leaves as {"success": false, "error": "..."}
def _error(status_code: int, message: str, headers=None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": message}, headers=headers)

@app.exception_handler(FitflexError)
async def domain_error_handler(_request: Request, exc: FitflexError):
    return _error(exc.status_code, exc.message)

@app.exception_handler(StarletteHTTPException)
async def http_error_handler(_request: Request, exc: StarletteHTTPException):
    return _error(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))

@app.exception_handler(RequestValidationError)
async def request_validation_handler(_request: Request, exc: RequestValidationError):
    first = exc.errors()[0] if exc.errors() else {}
    loc = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
    msg = str(first.get("msg", "Invalid request")).removeprefix("Value error, ")
    return _error(400, f"{loc}: {msg}" if loc else msg)

@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    log.exception("unhandled error on %s %s", request.method, request.url.path)
    return _error(500, "Internal server error")

@app.get("/")
def root():
    return {"ok": True, "name": "FitFlex API"}

@app.get("/ping")
def ping():
    return {"pong": True}

@app.get("/healthz")
def healthz():
    # Quick DB sanity check
    try:
        with SessionLocal() as db:
            db.execute(text("SELECT 1"))
        return {"status": "ok"}
    except Exception as e:
        return {"status": "degraded", "error": str(e)}

@app.get("/version")
def version():
    return {"version": settings.API_VERSION}

# Routers
app.include_router(auth_router)
app.include_router(exercises_router)
app.include_router(templates_router)
app.include_router(sessions_router)
app.include_router(measurements_router)
app.include_router(export_router)
app.include_router(settings_router)
