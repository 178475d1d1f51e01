"""Tests for SortEngine."""

import pytest
from igdb_query.errors import EmptyField
from igdb_query.models import SortingOrder, SortingQuery, SubFilter
from igdb_query.sorting import SortEngine


class TestSortEngine:
    """Tests for SortEngine class."""

    def test_no_sorting(self):
        """No sorting emits no parameter."""
        assert SortEngine.serialize(None) == []

    def test_sort_asc(self):
        sorting = SortingQuery(sort_by="name")
        assert SortEngine.serialize(sorting) == [("order", "name:asc")]

    def test_sort_desc(self):
        sorting = SortingQuery(sort_by="hypes", order=SortingOrder.DESC)
        assert SortEngine.serialize(sorting) == [("order", "hypes:desc")]

    def test_subfilter(self):
        """Array fields can be sorted by an aggregate."""
        sorting = SortingQuery(
            sort_by="release_dates.date", order=SortingOrder.ASC, subfilter=SubFilter.MIN
        )
        assert SortEngine.serialize(sorting) == [("order", "release_dates.date:asc:min")]

    def test_order_from_string(self):
        sorting = SortingQuery(sort_by="popularity", order="desc", subfilter="avg")
        assert SortEngine.serialize(sorting) == [("order", "popularity:desc:avg")]

    def test_validate_none(self):
        SortEngine.validate(None)

    def test_empty_sort_by(self):
        with pytest.raises(EmptyField):
            SortEngine.validate(SortingQuery(sort_by=" "))

    def test_invalid_order(self):
        with pytest.raises(ValueError):
            SortingQuery(sort_by="name", order="sideways")
