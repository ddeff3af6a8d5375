import json
import logging
from pathlib import Path

from sqlalchemy.orm import Session

from . import crud, models, schemas

logger = logging.getLogger(__name__)


def load_seed(path):
    """Load seed data from a JSON file.

    Args:
        path (str or Path): Path to the JSON file.

    Returns:
        dict: with ``chefs``, ``ingredients`` and ``recipes`` lists; empty
        when the file does not exist.
    """
    p = Path(path)
    if not p.exists():
        return {}
    with p.open("r", encoding="utf-8") as f:
        return json.load(f)


def import_seed(db: Session, data: dict) -> dict:
    """Insert seed rows, skipping ones already present.

    Chefs are matched by username, ingredients and recipes by name.
    Recipes name their author by username. Returns counts of added rows.
    """
    added = {"chefs": 0, "ingredients": 0, "recipes": 0}

    for c in data.get("chefs", []):
        if not c.get("username"):
            continue
        if crud.get_chef_by_username(db, c["username"]):
            continue
        crud.create_chef(db, schemas.ChefCreate.model_validate(c))
        added["chefs"] += 1

    for i in data.get("ingredients", []):
        name = i.get("name")
        if not name:
            continue
        exists = (
            db.query(models.Ingredient)
            .filter(models.Ingredient.name == name)
            .first()
        )
        if exists:
            continue
        crud.create_ingredient(db, schemas.IngredientCreate(name=name))
        added["ingredients"] += 1

    for r in data.get("recipes", []):
        name = r.get("name")
        if not name:
            continue
        author = crud.get_chef_by_username(db, r.get("author", ""))
        if author is None:
            logger.warning("skipping recipe %r: unknown author %r",
                           name, r.get("author"))
            continue
        exists = (
            db.query(models.Recipe).filter(models.Recipe.name == name).first()
        )
        if exists:
            continue
        crud.create_recipe(
            db,
            schemas.RecipeCreate(
                name=name,
                instructions=r.get("instructions", ""),
                author=schemas.AuthorRef(id=author.id),
            ),
        )
        added["recipes"] += 1

    return added
