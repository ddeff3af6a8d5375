"""
Recipe routes.

Provides endpoints for:
- Listing and searching recipes (optionally paged)
- Reading, creating, replacing and deleting one recipe
"""
from typing import List, Optional, Union

from fastapi import APIRouter, Depends, Query, Request, Response, status
from sqlalchemy.orm import Session

from .. import schemas, services
from ..db import get_db
from ..pagination import RecipeSortField, PageOptions, link_header

router = APIRouter(prefix="/recipes", tags=["recipes"])


@router.get(
    "",
    response_model=Union[schemas.RecipePage, List[schemas.Recipe]],
)
def get_recipes(
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
    List recipes whose name or instructions contain ``term``.

    Paging kicks in only when both ``page`` and ``pageSize`` are given.
    """
    if page is None or page_size is None:
        return services.list_recipes(db, term)
    options = PageOptions.parse(
        RecipeSortField, page, page_size, sort_by, sort_direction
    )
    result = services.list_recipes(db, term, options)
    response.headers["Link"] = link_header(request.url, result)
    return schemas.RecipePage.model_validate(result)


@router.get(
    "/{recipe_id}",
    response_model=schemas.Recipe,
    responses=schemas.NOT_FOUND,
)
def get_recipe(recipe_id: int, db: Session = Depends(get_db)):
    return services.find_recipe(db, recipe_id)


@router.post(
    "",
    response_model=schemas.Recipe,
    status_code=status.HTTP_201_CREATED,
    responses=schemas.BAD_REQUEST,
)
def create_recipe(
    recipe: schemas.RecipeCreate, db: Session = Depends(get_db)
):
    return services.create_recipe(db, recipe)


@router.put(
    "/{recipe_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={**schemas.NOT_FOUND, **schemas.BAD_REQUEST},
)
def update_recipe(
    recipe_id: int,
    recipe: schemas.RecipeCreate,
    db: Session = Depends(get_db),
):
    services.update_recipe(db, recipe_id, recipe)


@router.delete(
    "/{recipe_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
def delete_recipe(recipe_id: int, db: Session = Depends(get_db)):
    services.delete_recipe(db, recipe_id)
