"""Jinja2 template environment shared by the HTML routes."""

from pathlib import Path

from fastapi.templating import Jinja2Templates

from blog.config import get_settings

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

templates = Jinja2Templates(directory=TEMPLATES_DIR)
templates.env.globals["site_name"] = get_settings().app_title
