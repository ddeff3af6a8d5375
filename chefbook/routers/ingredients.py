"""
Ingredient routes.

Provides endpoints for:
- Listing and searching ingredients (optionally paged)
- Reading, creating, replacing and deleting one ingredient
"""
from typing import List, Optional, Union

from fastapi import APIRouter, Depends, Query, Request, Response, status
from sqlalchemy.orm import Session

from .. import schemas, services
from ..db import get_db
from ..pagination import IngredientSortField, PageOptions, link_header

router = APIRouter(prefix="/ingredients", tags=["ingredients"])


@router.get(
    "",
    response_model=Union[schemas.IngredientPage, List[schemas.Ingredient]],
)
def get_ingredients(
    request: Request,
    response: Response,
    term: Optional[str] = None,
    sort_by: Optional[str] = Query(None, alias="sortBy"),
    sort_direction: Optional[str] = Query(None, alias="sortDirection"),
    page: Optional[int] = Query(None, ge=1),
    page_size: Optional[int] = Query(None, ge=1, alias="pageSize"),
    db: Session = Depends(get_db),
):
    """
    List ingredients, optionally filtered by a substring of the name.

    Paging kicks in only when both ``page`` and ``pageSize`` are given.
    """
    if page is None or page_size is None:
        return services.list_ingredients(db, term)
    options = PageOptions.parse(
        IngredientSortField, page, page_size, sort_by, sort_direction
    )
    result = services.list_ingredients(db, term, options)
    response.headers["Link"] = link_header(request.url, result)
    return schemas.IngredientPage.model_validate(result)


@router.get(
    "/{ingredient_id}",
    response_model=schemas.Ingredient,
    responses=schemas.NOT_FOUND,
)
def get_ingredient(ingredient_id: int, db: Session = Depends(get_db)):
    return services.find_ingredient(db, ingredient_id)


@router.post(
    "",
    response_model=schemas.Ingredient,
    status_code=status.HTTP_201_CREATED,
    responses=schemas.BAD_REQUEST,
)
def create_ingredient(
    ingredient: schemas.IngredientCreate, db: Session = Depends(get_db)
):
    return services.create_ingredient(db, ingredient)


@router.put(
    "/{ingredient_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={**schemas.NOT_FOUND, **schemas.BAD_REQUEST},
)
def update_ingredient(
    ingredient_id: int,
    ingredient: schemas.IngredientCreate,
    db: Session = Depends(get_db),
):
    services.update_ingredient(db, ingredient_id, ingredient)


@router.delete(
    "/{ingredient_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
def delete_ingredient(ingredient_id: int, db: Session = Depends(get_db)):
    services.delete_ingredient(db, ingredient_id)
