import pytest

from chefbook import schemas, services
from chefbook.exceptions import InvalidDataError, NotFoundError, StorageError
from chefbook.pagination import IngredientSortField, PageOptions


def test_find_missing_raises_not_found(db):
    with pytest.raises(NotFoundError) as excinfo:
        services.find_ingredient(db, 999)
    assert excinfo.value.code == "INGREDIENT_NOT_FOUND"
    assert excinfo.value.as_dict() == {
        "code": "INGREDIENT_NOT_FOUND", "id": 999
    }
    assert not isinstance(excinfo.value, StorageError)


def test_update_missing_raises_not_found(db):
    with pytest.raises(NotFoundError):
        services.update_ingredient(
            db, 1, schemas.IngredientCreate(name="x")
        )
    assert services.list_ingredients(db) == []


def test_delete_missing_is_idempotent(db):
    services.delete_recipe(db, 123)
    services.delete_chef(db, 123)


def test_list_dispatches_on_term_and_options(db):
    for n in ("mint", "thyme", "marjoram"):
        services.create_ingredient(db, schemas.IngredientCreate(name=n))
    assert [i.name for i in services.list_ingredients(db)] == [
        "mint", "thyme", "marjoram"
    ]
    assert [i.name for i in services.list_ingredients(db, "m")] == [
        "mint", "thyme", "marjoram"
    ]
    page = services.list_ingredients(
        db, "m", PageOptions.parse(IngredientSortField, 1, 2, "name", None)
    )
    assert [i.name for i in page.items] == ["marjoram", "mint"]
    assert page.total_pages == 2


def test_create_then_find_roundtrip(db, chef_in):
    chef = services.create_chef(db, chef_in)
    found = services.find_chef(db, chef.id)
    out = schemas.Chef.model_validate(found)
    assert out.model_dump(exclude={"id"}) == chef_in.model_dump(
        exclude={"password"}
    )


def test_recipe_requires_existing_author(db):
    recipe = schemas.RecipeCreate(
        name="Orphan", instructions="", author=schemas.AuthorRef(id=77)
    )
    with pytest.raises(InvalidDataError) as excinfo:
        services.create_recipe(db, recipe)
    assert excinfo.value.code == "AUTHOR_NOT_FOUND"
    assert services.list_recipes(db) == []


def test_update_recipe_switches_author(db, chef_in):
    julia = services.create_chef(db, chef_in)
    marco = services.create_chef(
        db,
        schemas.ChefCreate(username="marco", email="m@x.io", password="p"),
    )
    recipe = services.create_recipe(
        db,
        schemas.RecipeCreate(
            name="Risotto", instructions="Stir",
            author=schemas.AuthorRef(id=julia.id),
        ),
    )
    services.update_recipe(
        db,
        recipe.id,
        schemas.RecipeCreate(
            name="Risotto", instructions="Stir more",
            author=schemas.AuthorRef(id=marco.id),
        ),
    )
    updated = services.find_recipe(db, recipe.id)
    assert updated.author.username == "marco"
    assert updated.instructions == "Stir more"
