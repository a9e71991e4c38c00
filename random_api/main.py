import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import uvicorn

from .generators import (
    CUSTOM_TYPES,
    INT32_MAX,
    INT32_MIN,
    MAX_DECIMALS,
    MAX_LENGTH,
    MIN_DECIMALS,
    MIN_LENGTH,
    InvalidArgument,
)
from .random_route import router as random_router
from .settings import settings
from .source import SystemRandomSource

logger = logging.getLogger(__name__)


def configure_logging(level: str = settings.LOG_LEVEL) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


# -------------------------------------------------------------------
# FastAPI app
# -------------------------------------------------------------------

app = FastAPI(
    title=settings.APP_NAME,
    version=settings.API_VERSION,
)

# one shared source for all requests, see deps.get_random_source
app.state.random_source = SystemRandomSource(seed=settings.RANDOM_SEED)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# -------------------------------------------------------------------
# Middleware: service headers
# -------------------------------------------------------------------

@app.middleware("http")
async def add_svc_headers(request: Request, call_next):
    resp = await call_next(request)
    resp.headers["X-Random-Api-Version"] = settings.API_VERSION
    return resp


# -------------------------------------------------------------------
# Error mapping: every rejected input is a 400
# -------------------------------------------------------------------

@app.exception_handler(InvalidArgument)
async def invalid_argument_handler(request: Request, exc: InvalidArgument):
    logger.debug("rejected %s %s: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=400, content={"detail": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    message = "; ".join(parts) or "invalid request"
    logger.debug("malformed %s %s: %s", request.method, request.url.path, message)
    return JSONResponse(status_code=400, content={"detail": message})


# -------------------------------------------------------------------
# Routes
# -------------------------------------------------------------------

@app.get("/health")
async def health():
    return {"ok": True}


@app.get("/meta")
async def meta():
    return {
        "app": settings.APP_NAME,
        "version": settings.API_VERSION,
        "limits": {
            "number": {"min": INT32_MIN, "max": INT32_MAX - 1},
            "string_length": {"min": MIN_LENGTH, "max": MAX_LENGTH},
            "decimals": {"min": MIN_DECIMALS, "max": MAX_DECIMALS},
            "custom_types": list(CUSTOM_TYPES),
        },
    }


app.include_router(random_router)


def run() -> None:
    configure_logging()
    logger.info(
        "starting %s %s on %s:%s (seeded=%s)",
        settings.APP_NAME,
        settings.API_VERSION,
        settings.HOST,
        settings.PORT,
        app.state.random_source.seeded,
    )
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())
