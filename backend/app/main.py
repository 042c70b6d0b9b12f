import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.middleware.cors import CORSMiddleware

from app.api.v1.api import router
from app.controllers.generation_controller import first_missing_field
from app.core.config import ModeEnum, Settings, settings
from app.core.exceptions import FALLBACK_MESSAGE, DeckError, ValidationError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: warn early when Google credentials are not configured."""
    missing = settings.missing_google_credentials()
    if missing:
        logger.warning(
            "Google credentials missing (%s); deck generation will fail until they are set",
            ", ".join(missing),
        )
    yield


app = FastAPI(
    title=settings.PROJECT_NAME,
    openapi_url=f"{settings.API_V1_STR}/openapi.json",
    lifespan=lifespan,
)


# ── Exception Handlers ────────────────────────────────────────

@app.exception_handler(DeckError)
async def deck_error_handler(request: Request, exc: DeckError):
    if exc.status_code >= 500:
        logger.error("Deck generation error: %s", exc.message)
    else:
        logger.warning("Rejected pitch submission: %s", exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message},
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Keep the ``{"error": ...}`` envelope for bodies FastAPI cannot parse.

    A falsy value of the wrong type (``0``, ``false``, ``[]``) still counts
    as a missing field; anything else is reported as a server error, as is
    malformed JSON.
    """
    if isinstance(exc.body, dict):
        field = first_missing_field(exc.body)
        if field is not None:
            return await deck_error_handler(request, ValidationError(field))

    details = "; ".join(
        f"{' -> '.join(str(loc) for loc in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    )
    return await deck_error_handler(request, DeckError(f"Invalid request body: {details}"))


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error("Unhandled exception: %s", exc, exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"error": FALLBACK_MESSAGE},
    )


# ── Middleware ────────────────────────────────────────────────

DEVELOPMENT_ORIGINS = [
    "http://localhost:5173",
    "http://localhost:3000",
    "http://127.0.0.1:5173",
    "http://127.0.0.1:3000",
]


def allowed_origins(config: Settings) -> list[str]:
    """Configured CORS origins, plus the local dev servers in development mode."""
    origins = list(config.BACKEND_CORS_ORIGINS)
    if config.MODE == ModeEnum.development:
        origins += [o for o in DEVELOPMENT_ORIGINS if o not in origins]
    return origins


app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins(settings),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ── Routers ───────────────────────────────────────────────────

app.include_router(router, prefix=settings.API_V1_STR)


# ── Health / Root ─────────────────────────────────────────────

@app.get("/")
def read_root():
    return {"message": "Welcome to the Pitch Deck Generator API"}


@app.get("/google_check")
def google_check():
    missing = settings.missing_google_credentials()
    if missing:
        return {
            "status": "unhealthy",
            "google": "not configured",
            "missing": missing,
        }
    return {"status": "healthy", "google": "configured"}
