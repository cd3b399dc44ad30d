import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends, FastAPI, Form, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles
from jinja2 import TemplateError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import crud, fragments, schemas
from .config import Settings
from .db import Database, init_db

logger = logging.getLogger(__name__)

TITLE = "Ice Cream Recipe Book"

static_dir = Path(__file__).resolve().parents[1] / "static"

router = APIRouter()


def get_db(request: Request):
    db = request.app.state.db.session()
    try:
        yield db
    finally:
        db.close()


def parse_recipe_id(value: str) -> int:
    recipe_id = schemas.parse_int(value)
    if recipe_id is None:
        raise HTTPException(status_code=400, detail="Invalid recipe ID")
    return recipe_id


def recipe_from_form(name, ingredients, instructions, prep_time):
    name = name.strip()
    if not name:
        raise HTTPException(status_code=400, detail="name: must not be blank")
    return schemas.RecipeCreate(
        name=name,
        ingredients=ingredients,
        instructions=instructions,
        prep_time=schemas.parse_prep_time(prep_time),
    )


def find_recipe(db: Session, recipe_id: int):
    try:
        return crud.get_recipe(db, recipe_id)
    except crud.RecipeNotFound:
        raise HTTPException(status_code=404, detail="Recipe not found")


@router.get("/", response_class=HTMLResponse)
def home(request: Request, db: Session = Depends(get_db)):
    recipes = crud.get_recipes(db)
    return fragments.templates.TemplateResponse(
        request,
        "home.html",
        {"title": TITLE, "recipes": recipes, "close": None},
    )


@router.get("/recipe/{recipe_id}", response_class=HTMLResponse)
def recipe_detail(request: Request, recipe_id: str, db: Session = Depends(get_db)):
    recipe = find_recipe(db, parse_recipe_id(recipe_id))
    return fragments.render_recipe_detail(request, recipe)


@router.get("/add-recipe", response_class=HTMLResponse)
def add_recipe_form(request: Request):
    return fragments.render_add_form(request)


@router.post("/add-recipe", response_class=HTMLResponse)
def add_recipe(
    request: Request,
    name: str = Form(...),
    ingredients: str = Form(...),
    instructions: str = Form(...),
    prep_time: str = Form(""),
    db: Session = Depends(get_db),
):
    recipe = recipe_from_form(name, ingredients, instructions, prep_time)
    crud.create_recipe(db, recipe)
    logger.info("Added recipe %r", recipe.name)
    return fragments.render_recipe_grid(
        request, crud.get_recipes(db), close=fragments.RECIPE_MODAL
    )


@router.get("/edit-recipe/{recipe_id}", response_class=HTMLResponse)
def edit_recipe_form(request: Request, recipe_id: str, db: Session = Depends(get_db)):
    recipe = find_recipe(db, parse_recipe_id(recipe_id))
    return fragments.render_edit_form(request, recipe)


@router.put("/edit-recipe/{recipe_id}", response_class=HTMLResponse)
def edit_recipe(
    request: Request,
    recipe_id: str,
    name: str = Form(...),
    ingredients: str = Form(...),
    instructions: str = Form(...),
    prep_time: str = Form(""),
    db: Session = Depends(get_db),
):
    rid = parse_recipe_id(recipe_id)
    recipe = recipe_from_form(name, ingredients, instructions, prep_time)
    crud.update_recipe(db, rid, recipe)
    logger.info("Updated recipe %d", rid)
    return fragments.render_recipe_grid(
        request, crud.get_recipes(db), close=fragments.RECIPE_DETAIL
    )


@router.delete("/delete-recipe/{recipe_id}", response_class=HTMLResponse)
def delete_recipe(request: Request, recipe_id: str, db: Session = Depends(get_db)):
    rid = parse_recipe_id(recipe_id)
    crud.delete_recipe(db, rid)
    logger.info("Deleted recipe %d", rid)
    return fragments.render_recipe_grid(
        request, crud.get_recipes(db), close=fragments.RECIPE_DETAIL
    )


# Error bodies are plain text. Storage and template errors expose their raw
# message to the client.

def http_error(request: Request, exc: StarletteHTTPException):
    return PlainTextResponse(
        str(exc.detail), status_code=exc.status_code, headers=exc.headers
    )


def form_error(request: Request, exc: RequestValidationError):
    messages = []
    for err in exc.errors():
        field = err.get("loc", ("",))[-1]
        messages.append(f"{field}: {err.get('msg')}")
    return PlainTextResponse("; ".join(messages), status_code=400)


def server_error(request: Request, exc: Exception):
    logger.error(
        "Request %s %s failed", request.method, request.url.path, exc_info=exc
    )
    return PlainTextResponse(str(exc), status_code=500)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings.from_env()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        init_db(app.state.db, seed=settings.seed_sample_data)
        yield
        app.state.db.dispose()

    app = FastAPI(lifespan=lifespan)
    app.state.settings = settings
    app.state.db = Database(settings.database_url)

    app.mount("/static", StaticFiles(directory=str(static_dir)), name="static")
    app.include_router(router)

    app.add_exception_handler(StarletteHTTPException, http_error)
    app.add_exception_handler(RequestValidationError, form_error)
    app.add_exception_handler(SQLAlchemyError, server_error)
    app.add_exception_handler(TemplateError, server_error)
    return app

