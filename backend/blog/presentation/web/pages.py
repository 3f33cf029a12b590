"""Static site pages."""

from fastapi import APIRouter, Request
from fastapi.responses import Response

from blog.presentation.web.templating import templates

router = APIRouter(tags=["Pages"])


@router.get("/", name="home")
async def home(request: Request) -> Response:
    return templates.TemplateResponse(request, "home.html")


@router.get("/about", name="about")
async def about(request: Request) -> Response:
    return templates.TemplateResponse(request, "about.html")


async def not_found_page(request: Request) -> Response:
    """Body for any unmatched route."""
    return templates.TemplateResponse(request, "404.html", status_code=404)
