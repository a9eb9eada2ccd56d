import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from authoring import router as authoring_router
from catalog import router as catalog_router
from core import config, db, schema
from enrollment import router as enrollment_router

config.configure_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    config.validate_runtime_config()
    # Initialize the DB pool once per process.
    await db.init_pool()
    try:
        if config.auto_migrate():
            await schema.ensure_schema()
        logger.info("startup_complete auth_mode=%s app_env=%s", config.auth_mode(), config.app_env())
        yield
    finally:
        await db.close_pool()


app = FastAPI(
    title="Learning Platform API",
    version="1.0.0",
    description="Online learning platform: course catalog, enrollments and course authoring.",
    lifespan=lifespan,
)

if config.cors_origins():
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(_: Request, exc: StarletteHTTPException) -> JSONResponse:
    # Clients read `error`, not FastAPI's default `detail`.
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


app.include_router(catalog_router.router, prefix="/api/student", tags=["student"])
app.include_router(enrollment_router.router, prefix="/api/student", tags=["student"])
app.include_router(authoring_router.router, prefix="/api/teacher", tags=["teacher"])


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.get("/")
def root() -> dict:
    return {"status": "Learning Platform API is running"}
