import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


def validation_issues(errors) -> list:
    """Reduce pydantic error dicts to JSON safe location/message pairs."""
    return [
        {"field": ".".join(str(part) for part in err.get("loc", ())), "message": err.get("msg")}
        for err in errors
    ]


def setup_exception_handlers(app: FastAPI):

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            content={"message": str(exc.detail)},
            status_code=exc.status_code,
            headers=getattr(exc, "headers", None)
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        issues = validation_issues(exc.errors())
        logger.error("Validation error on %s: %s", request.url.path,
                     [issue["message"] for issue in issues])
        return JSONResponse(
            content={"message": "Validation error", "error": issues},
            status_code=422
        )

    # Catch all unhandled exceptions
    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled exception on %s", request.url.path)
        return JSONResponse(
            content={"message": "Internal Server Error"},
            status_code=500
        )
