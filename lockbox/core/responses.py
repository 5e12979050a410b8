import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from lockbox.core.errors import LockboxError, Unauthorized

logger = logging.getLogger(__name__)


def err(message: str, http_status: int = 400, headers: dict | None = None) -> JSONResponse:
    return JSONResponse(status_code=http_status, content={"error": message}, headers=headers)


def _describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "Invalid request")
    return f"{location}: {message}" if location else message


async def lockbox_error_handler(request: Request, exc: LockboxError) -> JSONResponse:
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, Unauthorized) else None
    return err(exc.message, http_status=exc.status_code, headers=headers)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return err(_describe_validation_error(exc), http_status=400)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return err(str(exc.detail), http_status=exc.status_code, headers=getattr(exc, "headers", None))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return err(str(exc), http_status=500)


async def catch_unhandled_errors(request: Request, call_next):
    """Render unexpected failures as 500 inside the CORS layer.

    Exception handlers for ``Exception`` run in Starlette's outermost
    middleware, past CORS, so their responses would lose the CORS headers.
    """
    try:
        return await call_next(request)
    except Exception as exc:
        return await unhandled_exception_handler(request, exc)


def register_error_handlers(app: FastAPI) -> None:
    """Render every failure as ``{"error": message}`` with its status code.

    Must be called before the CORS middleware is added so that CORS wraps
    the 500 path as well.
    """
    app.add_exception_handler(LockboxError, lockbox_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.middleware("http")(catch_unhandled_errors)
