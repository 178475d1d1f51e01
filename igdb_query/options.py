"""Query options: declarative, reusable changes to a request configuration.

Options are plain frozen values. They are applied by a single interpreter,
``apply_option``, which dispatches on the option type through
``OPTION_HANDLERS``. Because options carry no state of their own they can be
shared freely between requests and threads, compared, and logged.

Example:
    popular = compose_options(
        set_limit(5),
        set_fields("name", "cover"),
        set_order("hypes", SortingOrder.DESC),
    )
    client.games.list(popular, set_filter("platforms", FilterOperator.EQ, 48))
"""

from typing import Callable, Dict, Iterable, Optional, Tuple, Type

from pydantic import BaseModel, ConfigDict, StrictInt

from igdb_query.errors import EmptyField, InvalidLimit, InvalidOffset
from igdb_query.filters import FilterValue, to_wire_values
from igdb_query.models import (
    Filter,
    FilterOperator,
    RequestConfig,
    SortingOrder,
    SortingQuery,
    SubFilter,
)


class QueryOption(BaseModel):
    """Base class of every query option"""

    model_config = ConfigDict(frozen=True)

    def apply(self, config: RequestConfig) -> RequestConfig:
        """Apply this option to config in place and return it."""
        return apply_option(config, self)


class FieldsOption(QueryOption):
    """Replace the selected fields"""

    fields: Tuple[str, ...]


class FilterOption(QueryOption):
    """Add or replace one filter"""

    filter: Filter


class OrderOption(QueryOption):
    """Replace the sort"""

    sorting: SortingQuery


class LimitOption(QueryOption):
    """Replace the result limit"""

    limit: StrictInt


class OffsetOption(QueryOption):
    """Replace the result offset"""

    offset: StrictInt


class SearchOption(QueryOption):
    """Set the free-text search term"""

    term: str


class ComposedOption(QueryOption):
    """Several options applied left to right as one"""

    options: Tuple[QueryOption, ...]


# --- Handlers, one per option type ---


def _apply_fields(config: RequestConfig, option: FieldsOption) -> None:
    config.replace_fields(option.fields)


def _apply_filter(config: RequestConfig, option: FilterOption) -> None:
    config.put_filter(option.filter)


def _apply_order(config: RequestConfig, option: OrderOption) -> None:
    config.sorting = option.sorting


def _apply_limit(config: RequestConfig, option: LimitOption) -> None:
    config.limit = option.limit


def _apply_offset(config: RequestConfig, option: OffsetOption) -> None:
    config.offset = option.offset


def _apply_search(config: RequestConfig, option: SearchOption) -> None:
    config.search = option.term


def _apply_composed(config: RequestConfig, option: ComposedOption) -> None:
    apply_options(config, option.options)


OptionHandlerFn = Callable[[RequestConfig, QueryOption], None]

# Handler registry: maps option type -> handler function
OPTION_HANDLERS: Dict[Type[QueryOption], OptionHandlerFn] = {
    FieldsOption: _apply_fields,
    FilterOption: _apply_filter,
    OrderOption: _apply_order,
    LimitOption: _apply_limit,
    OffsetOption: _apply_offset,
    SearchOption: _apply_search,
    ComposedOption: _apply_composed,
}


def apply_option(config: RequestConfig, option: QueryOption) -> RequestConfig:
    """
    Apply a single option to a configuration in place.

    Args:
        config: Configuration being built
        option: Option to apply

    Returns:
        RequestConfig: The same configuration, for chaining

    Raises:
        TypeError: If option is not a known query option
    """
    handler = OPTION_HANDLERS.get(type(option))
    if handler is None:
        raise TypeError(f"Unsupported query option: {option!r}")
    handler(config, option)
    return config


def apply_options(config: RequestConfig, options: Iterable[QueryOption]) -> RequestConfig:
    """Apply options in order; see apply_option()."""
    for option in options:
        apply_option(config, option)
    return config


# --- Constructors ---


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def set_fields(*names: str) -> FieldsOption:
    """
    Select which fields of the entity the API returns.

    Repeated use is not additive: the last set_fields() applied wins.
    Subfields use a dot (``cover.image_id``); ``*`` selects everything.

    Args:
        names: Field names, duplicates are collapsed

    Returns:
        FieldsOption: The option

    Raises:
        EmptyField: If no names are given or one of them is blank
        TypeError: If a name is not a string
    """
    if not names:
        raise EmptyField("set_fields() needs at least one field name.")
    for name in names:
        if not isinstance(name, str):
            raise TypeError(f"Field names must be strings, got {name!r}")
        if not name.strip():
            raise EmptyField("Blank field name in set_fields().", value=names)
    return FieldsOption(fields=names)


def set_filter(field: str, operator: FilterOperator, *values: FilterValue) -> FilterOption:
    """
    Filter the results on a field.

    The filter is validated immediately. Filters on different constraint keys
    combine with AND; a later filter with the same field and operator replaces
    the earlier one at its original position.

    Args:
        field: Field name
        operator: Filter operator
        values: Operands; none for EXISTS/NOT_EXISTS, one or more for IN/NOT_IN,
            exactly one otherwise

    Returns:
        FilterOption: The option

    Raises:
        InvalidOperator: If operator is not a FilterOperator
        InvalidOperandCount: If the number of values does not fit the operator
    """
    f = Filter(field=field, operator=operator, values=to_wire_values(values))
    return FilterOption(filter=f)


def set_order(
    field: str,
    order: SortingOrder = SortingOrder.ASC,
    subfilter: Optional[SubFilter] = None,
) -> OrderOption:
    """
    Order the results by a field, replacing any earlier order.

    Args:
        field: Field to sort by
        order: Sorting order
        subfilter: Aggregate to sort an array field by (max, min, sum, avg, median)

    Returns:
        OrderOption: The option
    """
    return OrderOption(sorting=SortingQuery(sort_by=field, order=order, subfilter=subfilter))


def set_limit(limit: int) -> LimitOption:
    """
    Limit the number of results. The range is checked when the request is built.

    Raises:
        InvalidLimit: If limit is not an integer
    """
    if not _is_int(limit):
        raise InvalidLimit(f"Limit must be an integer, got {limit!r}.", value=limit)
    return LimitOption(limit=limit)


def set_offset(offset: int) -> OffsetOption:
    """
    Skip the first offset results. The range is checked when the request is built.

    Raises:
        InvalidOffset: If offset is not an integer
    """
    if not _is_int(offset):
        raise InvalidOffset(f"Offset must be an integer, got {offset!r}.", value=offset)
    return OffsetOption(offset=offset)


def set_search(term: str) -> SearchOption:
    """Set the free-text search term. Only valid for search requests."""
    return SearchOption(term=term)


def compose_options(*options: QueryOption) -> ComposedOption:
    """
    Combine options into a single reusable option.

    Nothing is validated here; the composed option is checked together with
    everything else when a request is built.
    """
    return ComposedOption(options=options)
