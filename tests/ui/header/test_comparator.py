from functools import cmp_to_key
from itertools import product

import pytest

from gridsort.data import InvalidOrderError, Record
from gridsort.ui.header import cid_comparator, default_comparator, make_comparator


def test_default_comparator():
    assert default_comparator(1, 2) == -1
    assert default_comparator(2, 1) == 1
    assert default_comparator("a", "a") == 0


def test_default_comparator_missing_values_first():
    assert default_comparator(None, 1) == -1
    assert default_comparator(1, None) == 1
    assert default_comparator(None, None) == 0
    assert sorted([3, None, 1], key=cmp_to_key(default_comparator)) == [None, 1, 3]


@pytest.mark.parametrize("attr, order", [(None, -1), ("", 1), ("age", None), (None, None)])
def test_missing_input_means_fallback(attr, order):
    assert make_comparator(attr, order) is None


def test_invalid_order_rejected():
    with pytest.raises(InvalidOrderError):
        make_comparator("age", 2)


def test_orders_are_exact_negations():
    records = [Record(age=age) for age in (10, 20, 20, 30)]
    natural = make_comparator("age", -1)
    swapped = make_comparator("age", 1)

    for left, right in product(records, repeat=2):
        assert natural(left, right) == -swapped(left, right)


def test_ascending_sign_sorts_smallest_first():
    records = [Record(age=age) for age in (30, 10, 20)]

    ascending = sorted(records, key=cmp_to_key(make_comparator("age", -1)))
    descending = sorted(records, key=cmp_to_key(make_comparator("age", 1)))

    assert [r.get("age") for r in ascending] == [10, 20, 30]
    assert [r.get("age") for r in descending] == [30, 20, 10]


def test_custom_value_and_comparator():
    def by_length(record, attr):
        return len(record.get(attr))

    def reverse_natural(left, right):
        return default_comparator(right, left)

    compare = make_comparator("name", -1, comparator=reverse_natural, value=by_length)

    assert compare(Record(name="Al"), Record(name="Alice")) == 1


def test_works_on_plain_mappings():
    compare = make_comparator("age", -1)

    assert compare({"age": 1}, {"age": 2}) == -1


def test_cid_comparator_uses_creation_order():
    first, second = Record(age=99), Record(age=1)

    assert cid_comparator(first, second) == -1
    assert cid_comparator(second, first) == 1
    assert cid_comparator(first, first) == 0


def test_cid_comparator_without_cids():
    assert cid_comparator(object(), object()) == 0
