import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException

from ingredient_parser.api import health, parse

logger = logging.getLogger(__name__)

app = FastAPI(title="Ingredient Label Parser", version="0.1.0")


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    """Render every HTTP error as {"success": false, "message": ...}."""
    if exc.status_code >= 500:
        logger.warning(
            "Request failed: method=%s, path=%s, status=%d",
            request.method,
            request.url.path,
            exc.status_code,
        )
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Keep the {"success": false, "message": ...} shape for malformed requests.

    An "image" form field that is not a file gets the same 400 as a missing one.
    """
    errors = exc.errors()
    if any(tuple(error.get("loc", ())) == ("body", "image") for error in errors):
        return JSONResponse(
            status_code=400,
            content={"success": False, "message": parse.IMAGE_NOT_A_FILE_MESSAGE},
        )

    logger.info("Invalid request: path=%s, errors=%s", request.url.path, errors)
    return JSONResponse(
        status_code=422,
        content={"success": False, "message": "Invalid request"},
    )


# Include routers
app.include_router(health.router)
app.include_router(parse.router)


@app.get("/", response_class=PlainTextResponse)
async def root():
    return "Welcome to the API!"
