import pytest

from admin_resource_core import FindOptions, SortOptions


def test_defaults() -> None:
    options = FindOptions()

    assert options.limit == 20
    assert options.offset == 0
    assert options.sort == SortOptions(sort_by=None, direction="asc")


def test_from_params_page_and_sort() -> None:
    options = FindOptions.from_params(
        {"page": "3", "perPage": "10", "sortBy": "email", "direction": "DESC"}
    )

    assert options.limit == 10
    assert options.offset == 20
    assert options.sort == SortOptions(sort_by="email", direction="desc")


def test_from_params_explicit_offset_wins_over_page() -> None:
    options = FindOptions.from_params({"limit": "5", "offset": "7", "page": "9"})

    assert options.limit == 5
    assert options.offset == 7


@pytest.mark.parametrize(
    ("params", "limit", "offset"),
    [
        ({"perPage": "abc", "page": "xyz"}, 20, 0),
        ({"perPage": "0", "page": "-2"}, 1, 0),
        ({"perPage": "10000"}, 500, 0),
        ({"offset": "-4"}, 20, 0),
    ],
)
def test_from_params_falls_back_and_clamps(params, limit, offset) -> None:
    options = FindOptions.from_params(params)

    assert (options.limit, options.offset) == (limit, offset)


def test_from_params_custom_defaults() -> None:
    options = FindOptions.from_params(
        {}, default_limit=50, max_limit=40, default_direction="desc"
    )

    assert options.limit == 40
    assert options.sort.direction == "desc"
    assert options.sort.sort_by is None


def test_options_are_frozen() -> None:
    with pytest.raises(AttributeError):
        FindOptions().limit = 3  # type: ignore[misc]
