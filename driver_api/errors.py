# driver_api/errors.py
import logging
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

DRIVER_NOT_FOUND = "Driver not found"
INTERNAL_SERVER_ERROR = "Internal server error"
INVALID_PAYLOAD = "Invalid driver payload"

def create_error_response(message: str, fields: Optional[List[str]] = None) -> Dict[str, Any]:
    """Create the error body shared by every endpoint"""
    response: Dict[str, Any] = {"error": message}
    if fields:
        response["fields"] = fields
    return response

async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=create_error_response(str(exc.detail)),
        headers=exc.headers
    )

async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # loc is ("body", <field>) for body errors; a non-object body has no field
    fields = []
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        field = ".".join(loc) or "body"
        if field not in fields:
            fields.append(field)

    logger.debug("Rejected request to %s: %s", request.url.path, fields)
    return JSONResponse(status_code=422, content=create_error_response(INVALID_PAYLOAD, fields))

def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
