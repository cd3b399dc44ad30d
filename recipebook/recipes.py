import json
from pathlib import Path

from . import schemas


def load_recipes(path):
    """Load recipes from a JSON file and return a list of dicts.

    Args:
        path (str or Path): Path to the JSON file.

    Returns:
        list: list of recipe dictionaries, empty when the file is missing.
    """
    p = Path(path)
    if not p.exists():
        return []
    with p.open("r", encoding="utf-8") as f:
        return json.load(f)


def _as_text(value):
    # lists of lines are stored one per line
    if isinstance(value, (list, tuple)):
        return "\n".join(str(v) for v in value)
    return value or ""


def to_recipe_create(entry: dict) -> schemas.RecipeCreate:
    prep_time = entry.get("prep_time")
    if not isinstance(prep_time, int):
        prep_time = schemas.parse_prep_time(
            None if prep_time is None else str(prep_time)
        )
    return schemas.RecipeCreate(
        name=entry["name"],
        ingredients=_as_text(entry.get("ingredients")),
        instructions=_as_text(entry.get("instructions")),
        prep_time=prep_time,
    )
