"""Exception handlers.

Translates domain errors and request validation failures into the
standard error envelope. Field names are reported the way the caller
spelled them in the query string or body.
"""

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic.alias_generators import to_camel
from starlette.exceptions import HTTPException

from storefront.domain.exceptions import DomainError, StoreUnavailableError, ValidationError

logger = structlog.get_logger()

# Domain field name -> public query parameter name
PUBLIC_FIELD_NAMES = {
    "category_id": "category",
    "price_min": "minPrice",
    "price_max": "maxPrice",
    "rating_min": "minRating",
    "in_stock": "inStock",
    "filter_type": "filterType",
}


def public_field_name(field: str, request: Request) -> str:
    """Name a field the way the caller sent it.

    Query strings use the listing parameter names; JSON bodies use
    camelCase keys.
    """
    if request.method == "GET":
        return PUBLIC_FIELD_NAMES.get(field, field)
    return to_camel(field)


def error_body(
    error_code: str,
    message: str,
    request: Request,
    details: list[dict] | None = None,
) -> dict:
    """Build the standard error envelope."""
    return {
        "error_code": error_code,
        "message": message,
        "details": details or [],
        "request_id": getattr(request.state, "request_id", None),
    }


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Handle domain errors with their own code and status."""
    details: list[dict] = []
    message = exc.message

    if isinstance(exc, ValidationError):
        field = public_field_name(exc.field, request)
        message = f"Invalid {field}: {exc.reason}"
        details = [{"field": field, "message": exc.reason}]

    if isinstance(exc, StoreUnavailableError):
        logger.error(
            "Store unavailable",
            path=request.url.path,
            operation=exc.operation,
        )
    else:
        logger.info(
            "Request rejected",
            path=request.url.path,
            error_code=exc.error_code,
        )

    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.error_code, message, request, details),
    )


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle malformed parameters FastAPI could not parse."""
    details = [
        {"field": str(error["loc"][-1]), "message": error["msg"]}
        for error in exc.errors()
    ]
    first = details[0]["field"] if details else "request"
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body("VALIDATION_ERROR", f"Invalid {first}", request, details),
    )


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Handle HTTP exceptions with consistent format."""
    detail = exc.detail
    if isinstance(detail, dict):
        error_code = detail.get("error_code", "ERROR")
        message = detail.get("message", str(detail))
    else:
        error_code = "NOT_FOUND" if exc.status_code == 404 else "ERROR"
        message = str(detail)

    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(error_code, message, request),
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the application.

    Args:
        app: FastAPI application instance.
    """
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
