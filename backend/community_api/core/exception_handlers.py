import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from community_api.common.schemas.responses import ApiResponse
from community_api.core.exceptions import CommunityAppError

logger = structlog.get_logger()


def _field_name(loc) -> str:
    # ("body", "name") -> "name", ("query", "user_id") -> "user_id"
    parts = [str(p) for p in loc if p not in ("body", "query", "path")]
    return ".".join(parts) or "request"


async def handle_app_error(request: Request, exc: CommunityAppError) -> JSONResponse:
    logger.warning(
        "Request failed",
        path=request.url.path,
        error=type(exc).__name__,
        message=exc.message,
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=ApiResponse.error(exc.message).model_dump(),
    )


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors: dict[str, str] = {}
    for err in exc.errors():
        errors.setdefault(_field_name(err.get("loc", ())), err.get("msg", "invalid value"))

    logger.warning("Validation failed", path=request.url.path, errors=errors)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ApiResponse.error("Validation failed", errors).model_dump(),
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unexpected error occurred", path=request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ApiResponse.error("An unexpected error occurred").model_dump(),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(CommunityAppError, handle_app_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
