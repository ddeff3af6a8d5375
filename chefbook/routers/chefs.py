"""
Chef routes.

Provides endpoints for:
- Listing and searching chefs (optionally paged)
- Reading, creating, replacing and deleting one chef
"""
from typing import List, Optional, Union

from fastapi import APIRouter, Depends, Query, Request, Response, status
from sqlalchemy.orm import Session

from .. import schemas, services
from ..db import get_db
from ..pagination import ChefSortField, PageOptions, link_header

router = APIRouter(prefix="/chefs", tags=["chefs"])


@router.get(
    "",
    response_model=Union[schemas.ChefPage, List[schemas.Chef]],
)
def get_chefs(
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
    List chefs, optionally filtered by a substring of the username.

    Paging kicks in only when both ``page`` and ``pageSize`` are given.
    """
    if page is None or page_size is None:
        return services.list_chefs(db, term)
    options = PageOptions.parse(
        ChefSortField, page, page_size, sort_by, sort_direction
    )
    result = services.list_chefs(db, term, options)
    response.headers["Link"] = link_header(request.url, result)
    return schemas.ChefPage.model_validate(result)


@router.get(
    "/{chef_id}",
    response_model=schemas.Chef,
    responses=schemas.NOT_FOUND,
)
def get_chef(chef_id: int, db: Session = Depends(get_db)):
    return services.find_chef(db, chef_id)


@router.post(
    "",
    response_model=schemas.Chef,
    status_code=status.HTTP_201_CREATED,
    responses=schemas.BAD_REQUEST,
)
def create_chef(
    chef: schemas.ChefCreate, db: Session = Depends(get_db)
):
    return services.create_chef(db, chef)


@router.put(
    "/{chef_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={**schemas.NOT_FOUND, **schemas.BAD_REQUEST},
)
def update_chef(
    chef_id: int,
    chef: schemas.ChefCreate,
    db: Session = Depends(get_db),
):
    services.update_chef(db, chef_id, chef)


@router.delete(
    "/{chef_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=schemas.BAD_REQUEST,
)
def delete_chef(chef_id: int, db: Session = Depends(get_db)):
    services.delete_chef(db, chef_id)
