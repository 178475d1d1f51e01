"""Tests for query options and the option interpreter."""

import pytest
from igdb_query.errors import (
    EmptyField,
    InvalidLimit,
    InvalidOffset,
    InvalidOperandCount,
    InvalidOperator,
)
from igdb_query.models import FilterOperator, RequestConfig, SortingOrder, SubFilter
from igdb_query.options import (
    ComposedOption,
    FieldsOption,
    FilterOption,
    LimitOption,
    QueryOption,
    apply_option,
    apply_options,
    compose_options,
    set_fields,
    set_filter,
    set_limit,
    set_offset,
    set_order,
    set_search,
)


def applied(*options):
    return apply_options(RequestConfig(), options)


class TestConstructors:
    """Tests for the option constructors."""

    def test_set_fields(self):
        option = set_fields("name", "cover.image_id")
        assert isinstance(option, FieldsOption)
        assert option.fields == ("name", "cover.image_id")

    def test_set_fields_requires_a_name(self):
        with pytest.raises(EmptyField):
            set_fields()

    def test_set_fields_blank_name(self):
        with pytest.raises(EmptyField):
            set_fields("name", " ")

    def test_set_fields_non_string_name(self):
        with pytest.raises(TypeError):
            set_fields("name", 1)

    @pytest.mark.parametrize("limit", [True, 5.0, "5"])
    def test_set_limit_requires_int(self, limit):
        """Booleans, floats and strings are not coerced to a limit."""
        with pytest.raises(InvalidLimit):
            set_limit(limit)

    @pytest.mark.parametrize("offset", [False, 10.0, "10"])
    def test_set_offset_requires_int(self, offset):
        with pytest.raises(InvalidOffset):
            set_offset(offset)

    def test_limit_option_is_strict(self):
        with pytest.raises(ValueError):
            LimitOption(limit=True)

    def test_set_filter_converts_values(self):
        option = set_filter("platforms", FilterOperator.IN, 48, 49)
        assert isinstance(option, FilterOption)
        assert option.filter.values == ("48", "49")

    def test_set_filter_fails_fast_on_arity(self):
        """Invalid filters are rejected when the option is created."""
        with pytest.raises(InvalidOperandCount):
            set_filter("rating", FilterOperator.EQ)

    def test_set_filter_unknown_operator(self):
        with pytest.raises(InvalidOperator):
            set_filter("rating", "approx", 1)

    def test_options_are_comparable(self):
        assert set_limit(5) == set_limit(5)
        assert set_filter("id", FilterOperator.EQ, 1) == set_filter("id", "eq", "1")

    def test_options_are_frozen(self):
        option = set_limit(5)
        with pytest.raises(Exception):
            option.limit = 10


class TestApply:
    """Tests for applying options to a configuration."""

    def test_scalar_options(self):
        config = applied(
            set_limit(5),
            set_offset(10),
            set_search("zelda"),
            set_order("hypes", SortingOrder.DESC, SubFilter.MAX),
        )
        assert config.limit == 5
        assert config.offset == 10
        assert config.search == "zelda"
        assert config.sorting.sort_by == "hypes"
        assert config.sorting.order is SortingOrder.DESC
        assert config.sorting.subfilter is SubFilter.MAX

    def test_last_scalar_wins(self):
        config = applied(set_limit(5), set_limit(7), set_order("name"), set_order("hypes"))
        assert config.limit == 7
        assert config.sorting.sort_by == "hypes"

    def test_fields_last_wins(self):
        """Field selection is replaced, not accumulated."""
        config = applied(set_fields("name"), set_fields("summary", "rating"))
        assert config.fields == ["summary", "rating"]

    def test_fields_deduplicated(self):
        config = applied(set_fields("name", "rating", "name"))
        assert config.fields == ["name", "rating"]

    def test_filters_accumulate(self):
        config = applied(
            set_filter("rating", FilterOperator.GT, 70),
            set_filter("rating", FilterOperator.LT, 90),
            set_filter("cover", FilterOperator.EXISTS),
        )
        assert list(config.filters) == [
            ("rating", FilterOperator.GT),
            ("rating", FilterOperator.LT),
            ("cover", FilterOperator.EXISTS),
        ]

    def test_same_key_replaces_in_place(self):
        """A repeated constraint key keeps its position and takes the new value."""
        config = applied(
            set_filter("rating", FilterOperator.GT, 70),
            set_filter("hypes", FilterOperator.GT, 10),
            set_filter("rating", FilterOperator.GT, 80),
        )
        filters = list(config.filters.values())
        assert [f.field for f in filters] == ["rating", "hypes"]
        assert filters[0].values == ("80",)

    def test_apply_method(self):
        config = set_limit(3).apply(RequestConfig())
        assert config.limit == 3

    def test_unknown_option_type(self):
        class Custom(QueryOption):
            pass

        with pytest.raises(TypeError):
            apply_option(RequestConfig(), Custom())


class TestCompose:
    """Tests for compose_options()."""

    def test_compose_equals_sequence(self):
        """Applying a composition equals applying its parts in order."""
        parts = (
            set_limit(5),
            set_fields("name"),
            set_filter("rating", FilterOperator.GT, 70),
            set_order("hypes", SortingOrder.DESC),
        )
        assert applied(compose_options(*parts)) == applied(*parts)

    def test_nested_composition(self):
        inner = compose_options(set_limit(5), set_offset(5))
        outer = compose_options(inner, set_limit(10))
        config = applied(outer)
        assert config.limit == 10
        assert config.offset == 5

    def test_empty_composition(self):
        assert applied(compose_options()) == RequestConfig()

    def test_composed_type(self):
        assert isinstance(compose_options(set_limit(1)), ComposedOption)

    def test_composition_is_reusable(self):
        """A composed option can be applied any number of times."""
        popular = compose_options(set_limit(5), set_order("hypes", SortingOrder.DESC))
        first = applied(popular, set_search("mario"))
        second = applied(popular)
        assert first.search == "mario"
        assert second.search is None
        assert first.limit == second.limit == 5
