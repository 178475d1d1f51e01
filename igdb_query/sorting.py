"""Sort engine for validating and serializing result ordering."""

from typing import List, Optional, Tuple

from igdb_query.errors import EmptyField
from igdb_query.models import SortingQuery


class SortEngine:
    """
    Engine for the single active sort of a request.

    Handles sort field validation, direction and optional array subfilter.
    """

    @staticmethod
    def validate(sorting: Optional[SortingQuery]) -> None:
        """
        Validate a sort specification.

        Args:
            sorting: Sorting configuration, or None

        Raises:
            EmptyField: If the sort field is blank
        """
        if sorting is not None and not sorting.sort_by.strip():
            raise EmptyField("Sort field is empty.", value=sorting.sort_by)

    @staticmethod
    def serialize(sorting: Optional[SortingQuery]) -> List[Tuple[str, str]]:
        """
        Serialize a sort specification.

        Args:
            sorting: Sorting configuration, or None

        Returns:
            List[Tuple[str, str]]: Zero or one ``order`` parameter, e.g.
            ``("order", "popularity:desc")`` or ``("order", "release_dates.date:asc:min")``
        """
        if sorting is None:
            return []
        value = f"{sorting.sort_by}:{sorting.order}"
        if sorting.subfilter is not None:
            value += f":{sorting.subfilter}"
        return [("order", value)]
