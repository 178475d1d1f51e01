"""RequestBuilder: turns query options into validated wire parameters."""

import logging
from typing import List, Tuple

from igdb_query.errors import EmptySearchTerm, IncompatibleOption
from igdb_query.filters import FilterEngine
from igdb_query.models import OperationKind, Query, RequestConfig
from igdb_query.options import QueryOption, apply_options
from igdb_query.pagination import DEFAULT_MAX_LIMIT, DEFAULT_MAX_OFFSET, PaginationEngine
from igdb_query.sorting import SortEngine

logger = logging.getLogger(__name__)

# Field selection used when a non-count request does not call set_fields().
DEFAULT_FIELDS: Tuple[str, ...] = ("*",)


class RequestBuilder:
    """
    Builds a validated Query from an ordered sequence of options.

    The build pipeline is split across focused engines:
    - FilterEngine: per-operator filter serialization
    - SortEngine: sort validation and serialization
    - PaginationEngine: limit/offset validation and serialization

    Every check runs before any network call; a Query that comes out of
    build() is safe to send.

    Example:
        query = RequestBuilder().build(
            OperationKind.LIST,
            set_limit(5),
            set_filter("platforms", FilterOperator.IN, 48),
        )
        query.to_params()
        # {"fields": "*", "filter[platforms][in]": "48", "limit": "5"}
    """

    def __init__(self, max_limit: int = DEFAULT_MAX_LIMIT, max_offset: int = DEFAULT_MAX_OFFSET):
        """
        Initialize RequestBuilder.

        Args:
            max_limit: Largest accepted result limit
            max_offset: Largest accepted result offset
        """
        self._filter_engine = FilterEngine()
        self._sort_engine = SortEngine()
        self._pagination_engine = PaginationEngine(max_limit=max_limit, max_offset=max_offset)

    @property
    def max_limit(self) -> int:
        """Largest accepted result limit."""
        return self._pagination_engine.max_limit

    @property
    def max_offset(self) -> int:
        """Largest accepted result offset."""
        return self._pagination_engine.max_offset

    @staticmethod
    def apply(*options: QueryOption) -> RequestConfig:
        """
        Apply options, in order, to a fresh configuration.

        Args:
            options: Options to apply

        Returns:
            RequestConfig: The resulting, not yet validated, configuration
        """
        return apply_options(RequestConfig(), options)

    def build(self, kind: OperationKind, *options: QueryOption) -> Query:
        """
        Apply, validate and serialize options for one operation kind.

        Args:
            kind: Operation the request is for
            options: Options to apply, composed options included

        Returns:
            Query: Frozen, validated request description

        Raises:
            IncompatibleOption: If an option is not allowed for kind
            EmptySearchTerm: If a search request has no search term
            InvalidLimit: If the limit is out of range
            InvalidOffset: If the offset is out of range
            EmptyField: If the sort field is blank
        """
        kind = OperationKind(kind)
        config = self.apply(*options)

        self._check_operation(kind, config)
        self._pagination_engine.validate(config.limit, config.offset)
        self._sort_engine.validate(config.sorting)

        fields = tuple(config.fields)
        if not fields and kind is not OperationKind.COUNT:
            fields = DEFAULT_FIELDS

        query = Query(
            kind=kind,
            fields=fields,
            filters=tuple(config.filters.values()),
            sorting=config.sorting,
            limit=config.limit,
            offset=config.offset,
            search=config.search,
        )
        query = query.model_copy(update={"params": tuple(self.serialize(query))})
        logger.debug("Built %s query: %s", kind, query.params)
        return query

    @staticmethod
    def _check_operation(kind: OperationKind, config: RequestConfig) -> None:
        """Apply the per-operation rules."""
        if kind is OperationKind.COUNT and config.fields:
            raise IncompatibleOption(
                "set_fields() cannot be used with count; count responses carry no entities.",
                value=tuple(config.fields),
            )
        if config.search is not None and kind is not OperationKind.SEARCH:
            raise IncompatibleOption(
                f"set_search() can only be used with search, not {kind}.",
                value=config.search,
            )
        if kind is OperationKind.SEARCH and (config.search is None or not config.search.strip()):
            raise EmptySearchTerm("Search requires a non-empty search term.", value=config.search)

    def serialize(self, query: Query) -> List[Tuple[str, str]]:
        """
        Serialize a query into wire parameters.

        Order: fields, filters, order, limit, offset, search.

        Args:
            query: Query to serialize

        Returns:
            List[Tuple[str, str]]: Parameter pairs
        """
        params = []
        if query.fields:
            params.append(("fields", ",".join(query.fields)))
        params.extend(self._filter_engine.serialize(query.filters))
        params.extend(self._sort_engine.serialize(query.sorting))
        params.extend(self._pagination_engine.serialize(query.limit, query.offset))
        if query.search is not None:
            params.append(("search", query.search))
        return params
