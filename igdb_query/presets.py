"""Common option presets for frequently used query patterns."""

from datetime import date, datetime
from typing import Union

from igdb_query.errors import InvalidOffset
from igdb_query.filters import to_timestamp
from igdb_query.models import FilterOperator, SortingOrder
from igdb_query.options import (
    ComposedOption,
    FilterOption,
    compose_options,
    set_filter,
    set_limit,
    set_offset,
    set_order,
)
from igdb_query.pagination import PaginationEngine

PointInTime = Union[str, int, float, date, datetime]


class CommonOptions:
    """
    Pre-defined option presets for common query patterns.

    Every preset returns an ordinary option, so presets compose with each other
    and with hand-written options.

    Example usage:
        from igdb_query.presets import CommonOptions

        # Five most hyped games released after 2018 that have a cover
        client.games.list(
            CommonOptions.top(5, by="hypes"),
            CommonOptions.after("first_release_date", "2018-01-01"),
            CommonOptions.has("cover"),
        )
    """

    @staticmethod
    def top(n: int, by: str, order: SortingOrder = SortingOrder.DESC) -> ComposedOption:
        """
        First n results ordered by a field.

        Args:
            n: Number of results
            by: Field to order by
            order: Sorting order (default: descending)

        Returns:
            ComposedOption: Limit plus order
        """
        return compose_options(set_limit(n), set_order(by, order))

    @staticmethod
    def has(field: str) -> FilterOption:
        """Results where field is set."""
        return set_filter(field, FilterOperator.EXISTS)

    @staticmethod
    def missing(field: str) -> FilterOption:
        """Results where field is not set."""
        return set_filter(field, FilterOperator.NOT_EXISTS)

    @staticmethod
    def ids(*ids: int) -> FilterOption:
        """Results whose id is one of ids."""
        return set_filter("id", FilterOperator.IN, *ids)

    @staticmethod
    def exclude_ids(*ids: int) -> FilterOption:
        """Results whose id is none of ids."""
        return set_filter("id", FilterOperator.NOT_IN, *ids)

    @staticmethod
    def after(field: str, when: PointInTime) -> FilterOption:
        """
        Results where a time field is strictly after a point in time.

        Args:
            field: Name of the Unix-time field, e.g. "first_release_date"
            when: Datetime, date, Unix timestamp or date string

        Returns:
            FilterOption: GT filter on the timestamp
        """
        return set_filter(field, FilterOperator.GT, to_timestamp(when))

    @staticmethod
    def before(field: str, when: PointInTime) -> FilterOption:
        """
        Results where a time field is strictly before a point in time.

        Args:
            field: Name of the Unix-time field
            when: Datetime, date, Unix timestamp or date string

        Returns:
            FilterOption: LT filter on the timestamp
        """
        return set_filter(field, FilterOperator.LT, to_timestamp(when))

    @staticmethod
    def between(field: str, start: PointInTime, end: PointInTime) -> ComposedOption:
        """
        Results where a time field lies within [start, end].

        Args:
            field: Name of the Unix-time field
            start: Start of the range (inclusive)
            end: End of the range (inclusive)

        Returns:
            ComposedOption: GTE and LTE filters

        Raises:
            ValueError: If start is after end
        """
        start_ts, end_ts = to_timestamp(start), to_timestamp(end)
        if start_ts > end_ts:
            raise ValueError(f"Range start {start!r} is after its end {end!r}")
        return compose_options(
            set_filter(field, FilterOperator.GTE, start_ts),
            set_filter(field, FilterOperator.LTE, end_ts),
        )

    @staticmethod
    def page(number: int, size: int) -> ComposedOption:
        """
        One page of results by 1-based page number.

        Args:
            number: Page number (>= 1)
            size: Results per page; checked as a limit when the request is built

        Returns:
            ComposedOption: Limit plus offset

        Raises:
            InvalidOffset: If number is below 1
        """
        if number < 1:
            raise InvalidOffset(f"Page number {number} is below 1.", value=number)
        offset = PaginationEngine.offset_for_page(number, size)
        return compose_options(set_limit(size), set_offset(offset))
