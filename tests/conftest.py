import pytest
from unittest.mock import MagicMock

from gridsort.data import Collection, PageableCollection
from gridsort.ui.header import HeaderCell


@pytest.fixture
def people():
    """Local collection in insertion order 30, 10, 20."""
    return Collection(
        [
            {"name": "Carol", "age": 30},
            {"name": "Alice", "age": 10},
            {"name": "Bob", "age": 20},
        ],
        name="people",
    )


@pytest.fixture
def columns():
    return [
        {"name": "name", "label": "Name"},
        {"name": "age", "label": "Age"},
    ]


@pytest.fixture
def age_cell(people):
    cell = HeaderCell(column={"name": "age", "label": "Age"}, collection=people)
    yield cell
    cell.remove()


@pytest.fixture
def name_cell(people):
    cell = HeaderCell(column={"name": "name", "label": "Name"}, collection=people)
    yield cell
    cell.remove()


@pytest.fixture
def paged_people():
    """Client-paged collection, two records per page, insertion order 30, 10, 20, 25."""
    return PageableCollection(
        [
            {"name": "Carol", "age": 30},
            {"name": "Alice", "age": 10},
            {"name": "Bob", "age": 20},
            {"name": "Dave", "age": 25},
        ],
        mode="client",
        page_size=2,
        name="paged_people",
    )


@pytest.fixture
def grid_sort_listener():
    """MagicMock to subscribe to Events.GRID_SORT."""
    return MagicMock(__name__="grid_sort_listener")
