from sqlalchemy import delete, select, update
from sqlalchemy.orm import Session

from . import models, schemas


class RecipeNotFound(LookupError):
    def __init__(self, recipe_id: int):
        super().__init__(f"recipe {recipe_id} not found")
        self.recipe_id = recipe_id


def get_recipes(db: Session):
    """Return all recipes, newest first."""
    stmt = select(models.Recipe).order_by(
        models.Recipe.created_at.desc(), models.Recipe.id.desc()
    )
    return list(db.scalars(stmt))


def get_recipe(db: Session, recipe_id: int):
    db_recipe = db.get(models.Recipe, recipe_id)
    if db_recipe is None:
        raise RecipeNotFound(recipe_id)
    return db_recipe


def create_recipe(db: Session, recipe: schemas.RecipeCreate):
    # id and created_at are always assigned by the database
    db_recipe = models.Recipe(
        name=recipe.name,
        ingredients=recipe.ingredients,
        instructions=recipe.instructions,
        prep_time=recipe.prep_time,
    )
    db.add(db_recipe)
    db.commit()


def update_recipe(db: Session, recipe_id: int, recipe: schemas.RecipeCreate):
    """Overwrite the editable fields. An unknown id changes nothing."""
    db.execute(
        update(models.Recipe)
        .where(models.Recipe.id == recipe_id)
        .values(
            name=recipe.name,
            ingredients=recipe.ingredients,
            instructions=recipe.instructions,
            prep_time=recipe.prep_time,
        )
    )
    db.commit()


def delete_recipe(db: Session, recipe_id: int):
    """Hard delete. An unknown id changes nothing."""
    db.execute(delete(models.Recipe).where(models.Recipe.id == recipe_id))
    db.commit()
