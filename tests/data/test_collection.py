import pytest
from unittest.mock import MagicMock

from gridsort.core.events import Events
from gridsort.data import Collection, CollectionError, InvalidOrderError, Record, validate_order


def by_age(left, right):
    return left.get("age") - right.get("age")


class TestRecord:
    """Tests for Record data model."""

    def test_free_form_attributes(self):
        record = Record(name="Alice", age=10)

        assert record.get("name") == "Alice"
        assert record.get("age") == 10
        assert record.get("missing") is None
        assert record.get("missing", 0) == 0

    def test_cid_increases_with_creation(self):
        first = Record(age=1)
        second = Record(age=1)

        assert second.cid > first.cid

    def test_set(self):
        record = Record(age=1)
        record.set("age", 2)
        record.set("name", "Bob")

        assert record.get("age") == 2
        assert record.to_dict() == {"age": 2, "name": "Bob"}

    def test_declared_fields(self):
        class Person(Record):
            name: str

        person = Person(name="Carol", age=30)

        assert person.get("name") == "Carol"
        assert person.get("age") == 30


class TestCollection:
    """Tests for the in-memory Collection."""

    def test_dicts_become_records(self, people):
        assert all(isinstance(record, Record) for record in people)
        assert people.pluck("age") == [30, 10, 20]
        assert len(people) == 3
        assert people[1].get("name") == "Alice"

    def test_sort_requires_comparator(self, people):
        with pytest.raises(CollectionError):
            people.sort()

    def test_sort_with_comparator(self, people):
        listener = MagicMock(__name__="listener")
        people.events.subscribe(Events.COLLECTION_SORT, listener)

        people.comparator = by_age
        people.sort()

        assert people.pluck("age") == [10, 20, 30]
        listener.assert_called_once_with(people)

    def test_sort_is_stable(self):
        collection = Collection([{"k": 1, "n": "a"}, {"k": 0, "n": "b"}, {"k": 1, "n": "c"}])
        collection.comparator = lambda l, r: l.get("k") - r.get("k")

        collection.sort()

        assert collection.pluck("n") == ["b", "a", "c"]

    def test_constructor_sorts_silently(self):
        listener = MagicMock()
        collection = Collection([{"age": 2}, {"age": 1}], comparator=by_age)
        collection.events.subscribe(Events.COLLECTION_SORT, listener)

        assert collection.pluck("age") == [1, 2]
        listener.assert_not_called()

    def test_add_keeps_comparator_order(self, people):
        people.comparator = by_age
        people.sort()

        added = people.add({"age": 15})

        assert people.pluck("age") == [10, 15, 20, 30]
        assert added[0].get("age") == 15

    def test_add_without_comparator_appends(self, people):
        listener = MagicMock(__name__="listener")
        people.events.subscribe(Events.COLLECTION_ADD, listener)

        people.add([{"age": 1}, Record(age=2)])

        assert people.pluck("age") == [30, 10, 20, 1, 2]
        assert listener.call_count == 1

    def test_add_rejects_other_types(self, people):
        with pytest.raises(TypeError):
            people.add([42])

    def test_reset(self, people):
        listener = MagicMock(__name__="listener")
        people.events.subscribe(Events.COLLECTION_RESET, listener)

        people.reset([{"age": 5}])

        assert people.pluck("age") == [5]
        listener.assert_called_once_with(people)


@pytest.mark.parametrize("order", [-1, 1, None])
def test_validate_order_accepts(order):
    assert validate_order(order) == order


@pytest.mark.parametrize("order", [0, 2, "asc", True])
def test_validate_order_rejects(order):
    with pytest.raises(InvalidOrderError):
        validate_order(order)
