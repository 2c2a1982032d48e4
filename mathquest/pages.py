"""
Math Quest - Presentation Module
Serves the single-page front end
"""

from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from mathquest import __version__

PACKAGE_DIR = Path(__file__).resolve().parent
TEMPLATES_DIR = PACKAGE_DIR / "templates"
STATIC_DIR = PACKAGE_DIR / "static"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

# Router setup
pages_router = APIRouter()


@pages_router.get("/", response_class=HTMLResponse, tags=["Pages"])
async def index(request: Request):
    """Serve the Math Quest page"""
    return templates.TemplateResponse(
        request,
        "index.html",
        {"title": request.app.title, "version": __version__}
    )
