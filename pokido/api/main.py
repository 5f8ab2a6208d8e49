import uuid

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from pokido import __version__
from pokido.api.album import router as album_router
from pokido.api.health import router as health_router
from pokido.api.scan import router as scan_router
from pokido.core.constants import SUPPORTED_LOCALES
from pokido.display.locale import t
from pokido.utils.config import settings
from pokido.utils.error_handler import ErrorContext, PokidoError, handle_error, status_for
from pokido.utils.log import bind_request_context, clear_request_context, get_logger

logger = get_logger(__name__)

app = FastAPI(title="Pokido", version=__version__)

app.include_router(scan_router)
app.include_router(album_router)
app.include_router(health_router)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type"],
)


def _request_locale(request: Request) -> str:
    lang = (request.query_params.get("lang") or "").lower()
    return lang if lang in SUPPORTED_LOCALES else settings.DEFAULT_LANGUAGE


@app.middleware("http")
async def request_context(request: Request, call_next):
    bind_request_context(request_id=uuid.uuid4().hex[:12], path=request.url.path)
    try:
        return await call_next(request)
    finally:
        clear_request_context()


@app.exception_handler(PokidoError)
async def pokido_error_handler(request: Request, exc: PokidoError) -> JSONResponse:
    """Localized ``{"error": ...}`` body with the status the error maps to."""
    context = ErrorContext(
        operation=request.method,
        module="api",
        function=request.url.path,
        input_data=dict(request.query_params),
    )
    handle_error(exc, context, logger, reraise=False)

    body = {"error": t(exc.message_key, _request_locale(request))}
    if "detected" in exc.details:
        body["geminiResult"] = exc.details["detected"]
    return JSONResponse(status_code=status_for(exc), content=body)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed requests answer 400 with a localized ``{"error": ...}`` body."""
    errors = exc.errors()
    logger.warning("Request validation failed", path=request.url.path, errors=[e.get("loc") for e in errors])

    key = "errorInvalidInput"
    if any(tuple(e.get("loc", ()))[-1:] == ("file",) for e in errors):
        key = "errorNoFile"
    return JSONResponse(status_code=400, content={"error": t(key, _request_locale(request))})


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    context = ErrorContext(operation=request.method, module="api", function=request.url.path)
    handle_error(exc, context, logger, reraise=False)
    return JSONResponse(status_code=status_for(exc), content={"error": t("errorGeneric", _request_locale(request))})
