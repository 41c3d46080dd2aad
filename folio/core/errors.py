import traceback
from datetime import datetime, timezone
from typing import Any, Dict, List, Sequence

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .exceptions import InternalError, PortfolioError, ValidationError
from .logger import logger

_REQUEST_LOCATIONS = ("body", "query", "path", "header", "cookie")

_HTTP_ERROR_CODES = {
    404: "NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
    413: "PAYLOAD_TOO_LARGE",
}


def error_body(exc: PortfolioError) -> Dict[str, Any]:
    body = {
        "success": False,
        "message": exc.message,
        "error_code": exc.error_code,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
    if exc.details is not None:
        body["details"] = exc.details
    return body


def error_response(exc: PortfolioError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=error_body(exc))


def validation_details(errors: Sequence[Dict[str, Any]]) -> List[Dict[str, str]]:
    details = []
    for error in errors:
        loc = list(error.get("loc", ()))
        if loc and loc[0] in _REQUEST_LOCATIONS:
            loc = loc[1:]
        if error.get("type") == "json_invalid":
            loc = []
        field = ".".join(str(part) for part in loc) or "body"

        if error.get("type") == "missing":
            message = "required"
        else:
            message = str(error.get("msg", "invalid value"))
            if message.startswith("Value error, "):
                message = message[len("Value error, "):]
        details.append({"field": field, "message": message})
    return details


def request_validation_error(exc: RequestValidationError) -> ValidationError:
    details = validation_details(exc.errors())
    message = "; ".join(f"{d['field']}: {d['message']}" for d in details)
    return ValidationError(message or None, details=details)


def internal_error(exc: Exception, debug: bool) -> InternalError:
    details = None
    if debug:
        details = {
            "name": type(exc).__name__,
            "message": str(exc),
            "stack": "".join(traceback.format_exception(type(exc), exc, exc.__traceback__)),
        }
    return InternalError(details=details)


def register_exception_handlers(app: FastAPI, debug: bool = False) -> None:
    async def handle_portfolio_error(request: Request, exc: PortfolioError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
        return error_response(exc)

    async def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
        return error_response(request_validation_error(exc))

    async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        error = PortfolioError(
            message=str(exc.detail),
            error_code=_HTTP_ERROR_CODES.get(exc.status_code, "HTTP_ERROR"),
        )
        error.status_code = exc.status_code
        return error_response(error)

    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
        return error_response(internal_error(exc, debug))

    app.add_exception_handler(PortfolioError, handle_portfolio_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(Exception, handle_unexpected)
