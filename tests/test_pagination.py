import pytest
from starlette.datastructures import URL

from chefbook.exceptions import InvalidDataError
from chefbook.pagination import (
    ChefSortField,
    IngredientSortField,
    Page,
    PageOptions,
    RecipeSortField,
    SortDirection,
    link_header,
)


def test_sort_direction_is_case_insensitive():
    assert SortDirection.parse("DESC") is SortDirection.DESC
    assert SortDirection.parse("Asc") is SortDirection.ASC


@pytest.mark.parametrize("value", [None, "", "sideways", "name; DROP TABLE"])
def test_unknown_direction_falls_back_to_asc(value):
    assert SortDirection.parse(value) is SortDirection.ASC


def test_sort_fields_allow_lists():
    assert IngredientSortField.parse("NAME") is IngredientSortField.NAME
    assert RecipeSortField.parse("name") is RecipeSortField.NAME
    assert ChefSortField.parse("username") is ChefSortField.USERNAME
    # not on the chef allow-list
    assert ChefSortField.parse("password") is ChefSortField.ID
    assert IngredientSortField.parse("id desc") is IngredientSortField.ID
    assert RecipeSortField.parse(None) is RecipeSortField.ID


def test_page_options_offset_and_limit():
    opts = PageOptions.parse(IngredientSortField, 3, 4, "name", "desc")
    assert opts.offset == 8
    assert opts.limit == 4
    assert opts.sort_by is IngredientSortField.NAME
    assert opts.sort_direction is SortDirection.DESC


@pytest.mark.parametrize("page,size", [(0, 10), (1, 0), (-1, 5)])
def test_page_options_reject_non_positive_values(page, size):
    with pytest.raises(InvalidDataError) as excinfo:
        PageOptions(page_number=page, page_size=size)
    assert excinfo.value.code == "INVALID_PAGE_OPTIONS"


@pytest.mark.parametrize(
    "total,size,pages",
    [(0, 5, 0), (1, 5, 1), (5, 5, 1), (6, 5, 2), (3, 2, 2), (10, 1, 10)],
)
def test_total_pages_is_ceiling_division(total, size, pages):
    page = Page(page_number=1, page_size=size, total_elements=total)
    assert page.total_pages == pages
    assert (page.total_pages == 0) == (total == 0)


def test_link_header_middle_page():
    url = URL("http://testserver/ingredients?page=2&pageSize=5")
    page = Page(page_number=2, page_size=5, total_elements=11)
    link = link_header(url, page)
    assert 'rel="prev"' in link and 'rel="next"' in link
    assert 'page=3>; rel="next"' in link
    assert 'page=3>; rel="last"' in link
    assert 'page=1>; rel="prev"' in link


def test_link_header_first_and_only_page():
    url = URL("http://testserver/ingredients?page=1&pageSize=5")
    link = link_header(url, Page(page_number=1, page_size=5,
                                 total_elements=2))
    assert 'rel="prev"' not in link
    assert 'rel="next"' not in link
    assert 'rel="first"' in link and 'rel="last"' in link
