"""HTML fragments swapped into the page by htmx.

Every fragment is a Jinja2 template with auto-escaping, so recipe text that
looks like markup is shown as text.
"""
from datetime import datetime
from pathlib import Path
from typing import Iterable, Optional

from fastapi import Request
from fastapi.templating import Jinja2Templates

templates_dir = Path(__file__).resolve().parents[1] / "templates"
templates = Jinja2Templates(directory=str(templates_dir))

# modal element ids a fragment may close once it is swapped in
RECIPE_MODAL = "recipe-modal"
RECIPE_DETAIL = "recipe-detail"


def split_lines(text: Optional[str]) -> list:
    """Split newline-separated text into trimmed, non-blank lines."""
    if not text:
        return []
    return [line.strip() for line in text.split("\n") if line.strip()]


def long_date(value: Optional[datetime]) -> str:
    # e.g. "January 2, 2006"
    if value is None:
        return ""
    return f"{value:%B} {value.day}, {value.year}"


templates.env.filters["lines"] = split_lines
templates.env.filters["long_date"] = long_date


def render_recipe_grid(request: Request, recipes: Iterable, close: str):
    return templates.TemplateResponse(
        request,
        "fragments/recipe_grid.html",
        {"recipes": list(recipes), "close": close},
    )


def render_recipe_detail(request: Request, recipe):
    return templates.TemplateResponse(
        request,
        "fragments/recipe_detail.html",
        {"recipe": recipe, "modal": RECIPE_DETAIL},
    )


def render_add_form(request: Request):
    return templates.TemplateResponse(
        request,
        "fragments/recipe_form.html",
        {"recipe": None, "modal": RECIPE_MODAL},
    )


def render_edit_form(request: Request, recipe):
    return templates.TemplateResponse(
        request,
        "fragments/recipe_form.html",
        {"recipe": recipe, "modal": RECIPE_DETAIL},
    )
