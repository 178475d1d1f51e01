"""Tests for CommonOptions presets."""

from datetime import date, datetime, timezone

import pytest
from igdb_query.builder import RequestBuilder
from igdb_query.errors import InvalidLimit, InvalidOffset
from igdb_query.models import FilterOperator, OperationKind, SortingOrder
from igdb_query.options import set_filter
from igdb_query.presets import CommonOptions

MARCH_2018 = 1519862400


def params(*options):
    return RequestBuilder().build(OperationKind.LIST, *options).to_params()


class TestCommonOptions:
    """Tests for CommonOptions class."""

    def test_top_default_desc(self):
        assert params(CommonOptions.top(5, by="hypes")) == {
            "fields": "*",
            "order": "hypes:desc",
            "limit": "5",
        }

    def test_top_ascending(self):
        result = params(CommonOptions.top(3, by="name", order=SortingOrder.ASC))
        assert result["order"] == "name:asc"

    def test_top_limit_is_checked(self):
        with pytest.raises(InvalidLimit):
            params(CommonOptions.top(100, by="hypes"))

    def test_has(self):
        option = CommonOptions.has("cover")
        assert option == set_filter("cover", FilterOperator.EXISTS)

    def test_missing(self):
        option = CommonOptions.missing("cover")
        assert option.filter.operator is FilterOperator.NOT_EXISTS

    def test_ids(self):
        assert params(CommonOptions.ids(1, 2, 3))["filter[id][in]"] == "1,2,3"

    def test_exclude_ids(self):
        assert params(CommonOptions.exclude_ids(7))["filter[id][not_in]"] == "7"

    def test_after_datetime(self):
        option = CommonOptions.after(
            "first_release_date", datetime(2018, 3, 1, tzinfo=timezone.utc)
        )
        assert option.filter.operator is FilterOperator.GT
        assert option.filter.values == (str(MARCH_2018),)

    def test_after_date_string(self):
        option = CommonOptions.after("first_release_date", "2018-03-01")
        assert option.filter.values == (str(MARCH_2018),)

    def test_before_date(self):
        option = CommonOptions.before("first_release_date", date(2018, 3, 1))
        assert option.filter.operator is FilterOperator.LT
        assert option.filter.values == (str(MARCH_2018),)

    def test_between(self):
        result = params(CommonOptions.between("created_at", MARCH_2018, MARCH_2018 + 86400))
        assert result["filter[created_at][gte]"] == str(MARCH_2018)
        assert result["filter[created_at][lte]"] == str(MARCH_2018 + 86400)

    def test_between_reversed(self):
        with pytest.raises(ValueError):
            CommonOptions.between("created_at", "2019-01-01", "2018-01-01")

    def test_page(self):
        result = params(CommonOptions.page(3, 20))
        assert result["limit"] == "20"
        assert result["offset"] == "40"

    def test_first_page(self):
        assert params(CommonOptions.page(1, 10))["offset"] == "0"

    def test_page_below_one(self):
        with pytest.raises(InvalidOffset):
            CommonOptions.page(0, 10)

    def test_presets_combine(self):
        result = params(
            CommonOptions.top(5, by="hypes"),
            CommonOptions.has("cover"),
            CommonOptions.after("first_release_date", MARCH_2018),
        )
        assert list(result) == [
            "fields",
            "filter[cover][exists]",
            "filter[first_release_date][gt]",
            "order",
            "limit",
        ]
