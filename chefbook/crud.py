import logging
from contextlib import contextmanager
from typing import Optional

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from werkzeug.security import generate_password_hash

from . import models, schemas
from .db import fits_sql_int
from .exceptions import InvalidDataError, StorageError
from .pagination import PageOptions, paginate

logger = logging.getLogger(__name__)


@contextmanager
def storage(db: Session, action: str):
    """Roll back and re-raise driver errors as Chefbook errors."""
    try:
        yield
    except IntegrityError as exc:
        db.rollback()
        logger.warning("%s rejected by storage: %s", action, exc.orig)
        raise InvalidDataError(
            "INTEGRITY_VIOLATION", f"{action} violates a constraint"
        ) from exc
    except OverflowError as exc:
        db.rollback()
        logger.warning("%s got an out-of-range integer: %s", action, exc)
        raise InvalidDataError(
            "VALUE_OUT_OF_RANGE", f"{action} got an out-of-range number"
        ) from exc
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("%s failed", action)
        raise StorageError("STORAGE_FAILURE", f"{action} failed") from exc


def _listing(query, model, options: Optional[PageOptions]):
    if options is None:
        return query.order_by(model.id.asc()).all()
    return paginate(query, model, options)


def _insert(db: Session, obj, action: str):
    with storage(db, action):
        db.add(obj)
        db.commit()
        db.refresh(obj)
    if obj.id is None:
        raise StorageError("NO_ROW_INSERTED", f"{action} inserted no row")
    logger.info("%s -> id %s", action, obj.id)
    return obj


def _save(db: Session, obj, action: str):
    with storage(db, action):
        db.add(obj)
        db.commit()
        db.refresh(obj)
    logger.info("%s id %s", action, obj.id)
    return obj


def _remove(db: Session, obj, action: str) -> bool:
    if obj is None:
        return False
    with storage(db, action):
        db.delete(obj)
        db.commit()
    logger.info("%s id %s", action, obj.id)
    return True


# Chefs

def get_chef(db: Session, chef_id: int):
    if not fits_sql_int(chef_id):
        return None
    with storage(db, "get chef"):
        return (
            db.query(models.Chef).filter(models.Chef.id == chef_id).first()
        )


def get_chef_by_username(db: Session, username: str):
    with storage(db, "get chef by username"):
        return (
            db.query(models.Chef)
            .filter(models.Chef.username == username)
            .first()
        )


def get_chefs(db: Session, options: Optional[PageOptions] = None):
    with storage(db, "list chefs"):
        return _listing(db.query(models.Chef), models.Chef, options)


def search_chefs(
    db: Session, term: Optional[str], options: Optional[PageOptions] = None
):
    query = db.query(models.Chef)
    if term is not None:
        query = query.filter(
            models.Chef.username.contains(term, autoescape=True)
        )
    with storage(db, "search chefs"):
        return _listing(query, models.Chef, options)


def create_chef(db: Session, chef: schemas.ChefCreate):
    db_chef = models.Chef(
        username=chef.username,
        email=chef.email,
        password=generate_password_hash(chef.password),
        is_admin=chef.is_admin,
    )
    return _insert(db, db_chef, "create chef")


def update_chef(db: Session, chef_id: int, chef: schemas.ChefCreate):
    db_chef = get_chef(db, chef_id)
    if not db_chef:
        return None
    db_chef.username = chef.username
    db_chef.email = chef.email
    db_chef.password = generate_password_hash(chef.password)
    db_chef.is_admin = chef.is_admin
    return _save(db, db_chef, "update chef")


def delete_chef(db: Session, chef_id: int) -> bool:
    return _remove(db, get_chef(db, chef_id), "delete chef")


# Ingredients

def get_ingredient(db: Session, ingredient_id: int):
    if not fits_sql_int(ingredient_id):
        return None
    with storage(db, "get ingredient"):
        return (
            db.query(models.Ingredient)
            .filter(models.Ingredient.id == ingredient_id)
            .first()
        )


def get_ingredients(db: Session, options: Optional[PageOptions] = None):
    with storage(db, "list ingredients"):
        return _listing(
            db.query(models.Ingredient), models.Ingredient, options
        )


def search_ingredients(
    db: Session, term: Optional[str], options: Optional[PageOptions] = None
):
    query = db.query(models.Ingredient)
    if term is not None:
        query = query.filter(
            models.Ingredient.name.contains(term, autoescape=True)
        )
    with storage(db, "search ingredients"):
        return _listing(query, models.Ingredient, options)


def create_ingredient(db: Session, ingredient: schemas.IngredientCreate):
    db_ingredient = models.Ingredient(name=ingredient.name)
    return _insert(db, db_ingredient, "create ingredient")


def update_ingredient(
    db: Session, ingredient_id: int, ingredient: schemas.IngredientCreate
):
    db_ingredient = get_ingredient(db, ingredient_id)
    if not db_ingredient:
        return None
    db_ingredient.name = ingredient.name
    return _save(db, db_ingredient, "update ingredient")


def delete_ingredient(db: Session, ingredient_id: int) -> bool:
    return _remove(
        db, get_ingredient(db, ingredient_id), "delete ingredient"
    )


# Recipes

def get_recipe(db: Session, recipe_id: int):
    if not fits_sql_int(recipe_id):
        return None
    with storage(db, "get recipe"):
        return (
            db.query(models.Recipe)
            .filter(models.Recipe.id == recipe_id)
            .first()
        )


def get_recipes(db: Session, options: Optional[PageOptions] = None):
    with storage(db, "list recipes"):
        return _listing(db.query(models.Recipe), models.Recipe, options)


def search_recipes(
    db: Session, term: Optional[str], options: Optional[PageOptions] = None
):
    query = db.query(models.Recipe)
    if term is not None:
        query = query.filter(
            or_(
                models.Recipe.name.contains(term, autoescape=True),
                models.Recipe.instructions.contains(term, autoescape=True),
            )
        )
    with storage(db, "search recipes"):
        return _listing(query, models.Recipe, options)


def create_recipe(db: Session, recipe: schemas.RecipeCreate):
    db_recipe = models.Recipe(
        name=recipe.name,
        instructions=recipe.instructions,
        chef_id=recipe.author.id,
    )
    return _insert(db, db_recipe, "create recipe")


def update_recipe(
    db: Session, recipe_id: int, recipe: schemas.RecipeCreate
):
    db_recipe = get_recipe(db, recipe_id)
    if not db_recipe:
        return None
    db_recipe.name = recipe.name
    db_recipe.instructions = recipe.instructions
    db_recipe.chef_id = recipe.author.id
    return _save(db, db_recipe, "update recipe")


def delete_recipe(db: Session, recipe_id: int) -> bool:
    return _remove(db, get_recipe(db, recipe_id), "delete recipe")
