from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    # camelCase on the wire, snake_case accepted on input too
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class IngredientBase(CamelModel):
    name: str = Field(..., json_schema_extra={"example": "flour"})


class IngredientCreate(IngredientBase):
    pass


class Ingredient(IngredientBase):
    id: int


class ChefBase(CamelModel):
    username: str = Field(..., json_schema_extra={"example": "julia"})
    email: str = Field(
        ..., json_schema_extra={"example": "julia@example.com"}
    )
    is_admin: bool = False


class ChefCreate(ChefBase):
    password: str = Field(..., min_length=1)


class Chef(ChefBase):
    id: int


class AuthorRef(CamelModel):
    id: int


class RecipeBase(CamelModel):
    name: str = Field(
        ..., json_schema_extra={"example": "Simple Pancakes"}
    )
    instructions: str = Field(
        "",
        json_schema_extra={
            "example": "Mix dry ingredients. Add milk and egg. Fry."
        },
    )


class RecipeCreate(RecipeBase):
    author: AuthorRef


class Recipe(RecipeBase):
    id: int
    author: Chef


class Page(CamelModel, Generic[T]):
    page_number: int
    page_size: int
    total_pages: int
    total_elements: int
    items: List[T]


class ErrorDetail(BaseModel):
    # code-specific context (id, author_id, ...) rides along as extras
    model_config = ConfigDict(extra="allow")

    detail: str
    code: Optional[str] = None


ChefPage = Page[Chef]
IngredientPage = Page[Ingredient]
RecipePage = Page[Recipe]

NOT_FOUND = {404: {"model": ErrorDetail}}
BAD_REQUEST = {400: {"model": ErrorDetail}}
