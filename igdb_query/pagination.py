"""Pagination engine for result limit and offset."""

from typing import List, Optional, Tuple

from igdb_query.errors import InvalidLimit, InvalidOffset

DEFAULT_MAX_LIMIT = 50
DEFAULT_MAX_OFFSET = 10000


class PaginationEngine:
    """
    Engine for validating and serializing limit/offset pagination.

    The API pages by offset; there are no page numbers or cursors on the wire.
    """

    def __init__(self, max_limit: int = DEFAULT_MAX_LIMIT, max_offset: int = DEFAULT_MAX_OFFSET):
        """
        Initialize PaginationEngine.

        Args:
            max_limit: Largest accepted limit (inclusive)
            max_offset: Largest accepted offset (inclusive)
        """
        self.max_limit = max_limit
        self.max_offset = max_offset

    def validate(self, limit: Optional[int], offset: Optional[int]) -> None:
        """
        Validate limit and offset.

        Args:
            limit: Requested result limit, or None for the server default
            offset: Requested result offset, or None for the server default

        Raises:
            InvalidLimit: If limit is outside [1, max_limit]
            InvalidOffset: If offset is outside [0, max_offset]
        """
        if limit is not None and not 1 <= limit <= self.max_limit:
            raise InvalidLimit(
                f"Limit {limit} is out of range; must be between 1 and {self.max_limit}.",
                value=limit,
            )
        if offset is not None and not 0 <= offset <= self.max_offset:
            raise InvalidOffset(
                f"Offset {offset} is out of range; must be between 0 and {self.max_offset}.",
                value=offset,
            )

    @staticmethod
    def serialize(limit: Optional[int], offset: Optional[int]) -> List[Tuple[str, str]]:
        """
        Serialize limit and offset.

        Args:
            limit: Validated limit
            offset: Validated offset

        Returns:
            List[Tuple[str, str]]: ``limit`` and ``offset`` parameters that are set
        """
        params = []
        if limit is not None:
            params.append(("limit", str(limit)))
        if offset is not None:
            params.append(("offset", str(offset)))
        return params

    @staticmethod
    def offset_for_page(page: int, per_page: int) -> int:
        """
        Translate a 1-based page number to an offset.

        Args:
            page: Page number (>= 1)
            per_page: Items per page

        Returns:
            int: Offset of the first item on that page
        """
        return (page - 1) * per_page
