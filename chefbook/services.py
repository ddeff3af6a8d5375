"""
Service layer between the routers and ``crud``.

Adds the checks the data-access functions leave to their callers:
missing ids become ``NotFoundError`` (``crud`` updates are silent no-ops
otherwise) and recipes must point at an existing chef.
"""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from . import crud, schemas
from .exceptions import InvalidDataError, NotFoundError
from .pagination import PageOptions

logger = logging.getLogger(__name__)


def _require(obj, code: str, entity: str, obj_id: int):
    if obj is None:
        logger.debug("%s %s not found", entity, obj_id)
        raise NotFoundError(code, f"{entity} not found", id=obj_id)
    return obj


# Chefs

def find_chef(db: Session, chef_id: int):
    return _require(
        crud.get_chef(db, chef_id), "CHEF_NOT_FOUND", "Chef", chef_id
    )


def list_chefs(
    db: Session,
    term: Optional[str] = None,
    options: Optional[PageOptions] = None,
):
    if term is None:
        return crud.get_chefs(db, options)
    return crud.search_chefs(db, term, options)


def create_chef(db: Session, chef: schemas.ChefCreate):
    return crud.create_chef(db, chef)


def update_chef(db: Session, chef_id: int, chef: schemas.ChefCreate):
    find_chef(db, chef_id)
    return crud.update_chef(db, chef_id, chef)


def delete_chef(db: Session, chef_id: int) -> None:
    crud.delete_chef(db, chef_id)


# Ingredients

def find_ingredient(db: Session, ingredient_id: int):
    return _require(
        crud.get_ingredient(db, ingredient_id),
        "INGREDIENT_NOT_FOUND",
        "Ingredient",
        ingredient_id,
    )


def list_ingredients(
    db: Session,
    term: Optional[str] = None,
    options: Optional[PageOptions] = None,
):
    if term is None:
        return crud.get_ingredients(db, options)
    return crud.search_ingredients(db, term, options)


def create_ingredient(db: Session, ingredient: schemas.IngredientCreate):
    return crud.create_ingredient(db, ingredient)


def update_ingredient(
    db: Session, ingredient_id: int, ingredient: schemas.IngredientCreate
):
    find_ingredient(db, ingredient_id)
    return crud.update_ingredient(db, ingredient_id, ingredient)


def delete_ingredient(db: Session, ingredient_id: int) -> None:
    crud.delete_ingredient(db, ingredient_id)


# Recipes

def _check_author(db: Session, recipe: schemas.RecipeCreate):
    if crud.get_chef(db, recipe.author.id) is None:
        raise InvalidDataError(
            "AUTHOR_NOT_FOUND",
            f"Chef {recipe.author.id} does not exist",
            author_id=recipe.author.id,
        )


def find_recipe(db: Session, recipe_id: int):
    return _require(
        crud.get_recipe(db, recipe_id), "RECIPE_NOT_FOUND", "Recipe",
        recipe_id,
    )


def list_recipes(
    db: Session,
    term: Optional[str] = None,
    options: Optional[PageOptions] = None,
):
    if term is None:
        return crud.get_recipes(db, options)
    return crud.search_recipes(db, term, options)


def create_recipe(db: Session, recipe: schemas.RecipeCreate):
    _check_author(db, recipe)
    return crud.create_recipe(db, recipe)


def update_recipe(
    db: Session, recipe_id: int, recipe: schemas.RecipeCreate
):
    find_recipe(db, recipe_id)
    _check_author(db, recipe)
    return crud.update_recipe(db, recipe_id, recipe)


def delete_recipe(db: Session, recipe_id: int) -> None:
    crud.delete_recipe(db, recipe_id)
