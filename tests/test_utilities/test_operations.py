"""Tests for higher-order record helpers."""

from functools import cmp_to_key, partial

import pytest

from panchayat.operations import apply_operations, create_filter, create_mapper, create_sorter

DHABAS = [
    {"name": "Punjab Dhaba", "rating": 4.5, "city": "Ambala"},
    {"name": "Amrik Sukhdev", "rating": 4.8, "city": "Murthal"},
    {"name": "Highway King", "rating": 3.9, "city": "Karnal"},
]


class TestCreateFilter:
    @pytest.mark.parametrize("operator, value, expected", [
        (">", 4.5, [False, True, False]),
        ("<", 4.5, [False, False, True]),
        (">=", 4.5, [True, True, False]),
        ("<=", 4.5, [True, False, True]),
        ("===", 4.5, [True, False, False]),
    ])
    def test_operators(self, operator, value, expected):
        predicate = create_filter("rating", operator, value)
        assert [predicate(d) for d in DHABAS] == expected

    def test_unknown_operator(self):
        predicate = create_filter("rating", "!=", 4.5)
        assert not any(predicate(d) for d in DHABAS)

    def test_missing_field(self):
        assert create_filter("price", ">", 0)(DHABAS[0]) is False


class TestCreateSorter:
    def test_numbers_desc(self):
        ordered = sorted(DHABAS, key=cmp_to_key(create_sorter("rating", "desc")))
        assert [d["rating"] for d in ordered] == [4.8, 4.5, 3.9]

    def test_numbers_asc_default(self):
        ordered = sorted([{"rating": 3}, {"rating": 5}, {"rating": 1}], key=cmp_to_key(create_sorter("rating")))
        assert [d["rating"] for d in ordered] == [1, 3, 5]

    def test_strings(self):
        ordered = sorted(DHABAS, key=cmp_to_key(create_sorter("name", "asc")))
        assert [d["name"] for d in ordered] == ["Amrik Sukhdev", "Highway King", "Punjab Dhaba"]

    def test_unknown_order_keeps_input(self):
        ordered = sorted(DHABAS, key=cmp_to_key(create_sorter("rating", "sideways")))
        assert ordered == DHABAS


class TestCreateMapper:
    def test_projection(self):
        assert create_mapper(["name"])({"name": "Dhaba", "rating": 4}) == {"name": "Dhaba"}

    def test_keeps_record_order_and_skips_absent_fields(self):
        project = create_mapper(["rating", "name", "owner"])
        assert list(project(DHABAS[0]).items()) == [("name", "Punjab Dhaba"), ("rating", 4.5)]

    def test_does_not_mutate(self):
        record = {"name": "Dhaba", "rating": 4}
        create_mapper(["name"])(record)
        assert record == {"name": "Dhaba", "rating": 4}


class TestApplyOperations:
    def test_pipeline(self):
        high_rated = create_filter("rating", ">=", 4)
        by_rating = cmp_to_key(create_sorter("rating", "desc"))
        names_only = create_mapper(["name"])

        result = apply_operations(
            DHABAS,
            partial(filter, high_rated),
            partial(sorted, key=by_rating),
            lambda rows: [names_only(r) for r in rows],
        )
        assert result == [{"name": "Amrik Sukhdev"}, {"name": "Punjab Dhaba"}]

    def test_no_operations(self):
        assert apply_operations(DHABAS) is DHABAS

    @pytest.mark.parametrize("data", [None, "rows", {"a": 1}, (1, 2)])
    def test_not_a_list(self, data):
        assert apply_operations(data, lambda rows: rows) == []
