"""Filter engine with strategy pattern for operator serialization."""

from datetime import date, datetime, time, timezone
from typing import Callable, Dict, Iterable, List, Tuple, Union

from dateutil.parser import ParserError, parse

from igdb_query.errors import InvalidOperandCount
from igdb_query.models import Filter, FilterOperator

FilterValue = Union[str, int, float, bool, date, datetime]

# Type alias for filter strategy functions: filter -> wire value
FilterStrategyFn = Callable[[Filter], str]

# Value sent for operators that take no operand; the API requires one.
NULLARY_PLACEHOLDER = "1"


def to_timestamp(value: Union[str, int, float, date, datetime]) -> int:
    """
    Convert a point in time to a Unix timestamp in seconds.

    Naive datetimes and plain dates are taken as UTC. Strings are parsed
    with dateutil, so "2018-03-01" and "1 March 2018 14:00" both work.

    Args:
        value: Datetime, date, Unix timestamp or date string

    Returns:
        int: Seconds since the epoch

    Raises:
        InvalidOperandCount: If a string cannot be parsed as a date
    """
    if isinstance(value, bool):
        raise InvalidOperandCount(f"Cannot use {value!r} as a point in time.", value=value)
    if isinstance(value, (int, float)):
        return int(value)
    if isinstance(value, str):
        try:
            value = parse(value)
        except (ParserError, OverflowError) as e:
            raise InvalidOperandCount(f"Cannot parse '{value}' as a date.", value=value) from e
    if not isinstance(value, datetime):
        value = datetime.combine(value, time.min)
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return int(value.timestamp())


def to_wire_value(value: FilterValue) -> str:
    """
    Convert a filter operand to its string representation.

    Args:
        value: Operand as passed by the caller

    Returns:
        str: Operand as sent to the API

    Raises:
        InvalidOperandCount: If value is not a str, int, float, bool, date or datetime
    """
    if not isinstance(value, (str, int, float, date, datetime)):
        raise InvalidOperandCount(
            f"Unsupported operand {value!r} of type {type(value).__name__}; "
            "pass each value as a separate argument.",
            value=value,
        )
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (date, datetime)):
        return str(to_timestamp(value))
    return str(value)


def to_wire_values(values: Iterable[FilterValue]) -> Tuple[str, ...]:
    """Convert every operand with to_wire_value()."""
    return tuple(to_wire_value(v) for v in values)


def filter_param_name(f: Filter) -> str:
    """
    Build the bracketed parameter name for a filter.

    Args:
        f: Filter to name

    Returns:
        str: Name such as ``filter[platforms][in]``
    """
    return f"filter[{f.field}][{f.operator.symbol}]"


# --- Strategy functions, one per operator arity ---


def _strategy_nullary(f: Filter) -> str:
    return NULLARY_PLACEHOLDER


def _strategy_unary(f: Filter) -> str:
    return f.values[0]


def _strategy_nary(f: Filter) -> str:
    return ",".join(f.values)


# Strategy registry: maps FilterOperator -> serializer function
FILTER_STRATEGIES: Dict[FilterOperator, FilterStrategyFn] = {
    FilterOperator.EQ: _strategy_unary,
    FilterOperator.NE: _strategy_unary,
    FilterOperator.GT: _strategy_unary,
    FilterOperator.GTE: _strategy_unary,
    FilterOperator.LT: _strategy_unary,
    FilterOperator.LTE: _strategy_unary,
    FilterOperator.IN: _strategy_nary,
    FilterOperator.NOT_IN: _strategy_nary,
    FilterOperator.EXISTS: _strategy_nullary,
    FilterOperator.NOT_EXISTS: _strategy_nullary,
}


class FilterEngine:
    """
    Engine for serializing filters into wire parameters.

    Uses the strategy pattern to dispatch value formatting by operator, so
    arity handling lives in one registry instead of branching per call site.
    """

    @staticmethod
    def serialize_filter(f: Filter) -> Tuple[str, str]:
        """
        Serialize one filter using strategy pattern dispatch.

        Args:
            f: Filter to serialize

        Returns:
            Tuple[str, str]: Parameter name and value
        """
        strategy = FILTER_STRATEGIES[f.operator]
        return filter_param_name(f), strategy(f)

    def serialize(self, filters: Iterable[Filter]) -> List[Tuple[str, str]]:
        """
        Serialize filters in order.

        Filters on the same field with different operators produce separate
        parameters, which the API combines with AND.

        Args:
            filters: Filters to serialize

        Returns:
            List[Tuple[str, str]]: Parameter pairs
        """
        return [self.serialize_filter(f) for f in filters]
