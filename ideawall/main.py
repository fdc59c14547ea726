from __future__ import annotations
import logging
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ideawall.config import settings
from ideawall.db.database import init_db
from ideawall.errors import IdeaWallError, NotFoundError, RoutingError
from ideawall.web.routers import home, ideas

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.APP_TITLE, redirect_slashes=False)

@app.on_event("startup")
def on_startup() -> None:
    init_db()

def _error_response(request: Request, exc: IdeaWallError):
    if isinstance(exc, NotFoundError):
        return PlainTextResponse(exc.message, status_code=exc.status_code)
    headers = ideas.CORS_HEADERS if request.url.path == ideas.API_PATH else None
    return JSONResponse(
        {"success": False, "error": exc.message},
        status_code=exc.status_code,
        headers=headers,
    )

@app.exception_handler(IdeaWallError)
async def handle_idea_wall_error(request: Request, exc: IdeaWallError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return _error_response(request, exc)

@app.exception_handler(StarletteHTTPException)
async def handle_http_exception(request: Request, exc: StarletteHTTPException):
    """Route the framework's own 404/405 through the idea wall error shapes."""
    if exc.status_code == 404:
        return _error_response(request, NotFoundError("Not found"))
    if exc.status_code == 405 and request.url.path == "/":
        return home.home(request)
    if exc.status_code == 405:
        return _error_response(request, RoutingError("Method not allowed."))
    return JSONResponse({"success": False, "error": str(exc.detail)}, status_code=exc.status_code)

app.include_router(home.router)
app.include_router(ideas.router)
