import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from house_search.core.logger import logs


class HouseSearchError(Exception):
    """Base error for everything the API reports as `{"error": message}`."""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidArgument(HouseSearchError):
    status_code = 400


class NotFound(HouseSearchError):
    status_code = 404


class ServiceUnavailable(HouseSearchError):
    status_code = 500


async def house_search_error_handler(request: Request, exc: HouseSearchError) -> JSONResponse:
    logs.log(logging.WARNING, f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    if errors:
        first = errors[0]
        field = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
        message = f"Invalid request: {field} {first.get('msg', '')}".strip()
    else:
        message = "Invalid request"
    logs.log(logging.WARNING, f"{request.method} {request.url.path} -> 400: {message}")
    return JSONResponse(status_code=400, content={"error": message})


def register_error_handlers(app: FastAPI):
    app.add_exception_handler(HouseSearchError, house_search_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
