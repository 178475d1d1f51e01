"""igdb-query models"""

from enum import StrEnum
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, StrictInt, model_validator

from igdb_query.errors import EmptyField, InvalidOperandCount, InvalidOperator


class Arity(StrEnum):
    """Number of operands an operator takes"""

    NULLARY = "nullary"  # no operand
    UNARY = "unary"  # exactly one operand
    NARY = "nary"  # one or more operands


class FilterOperator(StrEnum):
    """Filter operators, valued by their wire symbol"""

    EQ = "eq"  # equals
    NE = "not_eq"  # not equals
    GT = "gt"  # greater than
    GTE = "gte"  # greater than or equal
    LT = "lt"  # less than
    LTE = "lte"  # less than or equal

    IN = "in"  # field contains all of the values
    NOT_IN = "not_in"  # field contains none of the values

    EXISTS = "exists"  # field is not null
    NOT_EXISTS = "not_exists"  # field is null

    @property
    def symbol(self) -> str:
        """Wire symbol used in the filter parameter name."""
        return self.value

    @property
    def arity(self) -> Arity:
        """Declared operand arity."""
        return OPERATOR_ARITY[self]


OPERATOR_ARITY: Dict[FilterOperator, Arity] = {
    FilterOperator.EQ: Arity.UNARY,
    FilterOperator.NE: Arity.UNARY,
    FilterOperator.GT: Arity.UNARY,
    FilterOperator.GTE: Arity.UNARY,
    FilterOperator.LT: Arity.UNARY,
    FilterOperator.LTE: Arity.UNARY,
    FilterOperator.IN: Arity.NARY,
    FilterOperator.NOT_IN: Arity.NARY,
    FilterOperator.EXISTS: Arity.NULLARY,
    FilterOperator.NOT_EXISTS: Arity.NULLARY,
}


class SortingOrder(StrEnum):
    """Sorting orders"""

    ASC = "asc"  # ascending order
    DESC = "desc"  # descending order


class SubFilter(StrEnum):
    """Aggregate used when ordering by an array field"""

    MAX = "max"
    MIN = "min"
    SUM = "sum"
    AVERAGE = "avg"
    MEDIAN = "median"


class OperationKind(StrEnum):
    """Kinds of endpoint operation"""

    LIST = "list"
    GET = "get"
    SEARCH = "search"
    COUNT = "count"


ConstraintKey = Tuple[str, FilterOperator]


class Filter(BaseModel):
    """
    A single constraint on a field.

    Operator and operand count are checked on construction, so an invalid
    filter never reaches serialization.

    Example:
        Filter(field="platforms", operator=FilterOperator.IN, values=("48", "49"))
    """

    model_config = ConfigDict(frozen=True)

    field: str
    operator: FilterOperator
    values: Tuple[str, ...] = ()

    @model_validator(mode="before")
    @classmethod
    def resolve_operator(cls, data: Any) -> Any:
        if not isinstance(data, dict) or isinstance(data.get("operator"), FilterOperator):
            return data
        raw = data.get("operator")
        try:
            operator = FilterOperator(raw)
        except ValueError as e:
            raise InvalidOperator(
                f"Invalid operator '{raw}' for field '{data.get('field')}'.",
                field=data.get("field"),
                operator=raw,
            ) from e
        return {**data, "operator": operator}

    @model_validator(mode="after")
    def check_operands(self) -> "Filter":
        if not self.field.strip():
            raise EmptyField("Filter field name is empty.", operator=self.operator)

        count = len(self.values)
        arity = self.operator.arity
        if arity is Arity.NULLARY and count != 0:
            expected = "no values"
        elif arity is Arity.UNARY and count != 1:
            expected = "exactly one value"
        elif arity is Arity.NARY and count == 0:
            expected = "at least one value"
        else:
            expected = None
        if expected is not None:
            raise InvalidOperandCount(
                f"Operator '{self.operator}' on field '{self.field}' takes {expected}, "
                f"got {count}.",
                field=self.field,
                operator=self.operator,
                value=self.values,
            )

        if any(not v.strip() for v in self.values):
            raise InvalidOperandCount(
                f"Blank value for operator '{self.operator}' on field '{self.field}'.",
                field=self.field,
                operator=self.operator,
                value=self.values,
            )
        return self

    @property
    def key(self) -> ConstraintKey:
        """Constraint key: two filters with the same key replace each other."""
        return (self.field, self.operator)


class SortingQuery(BaseModel):
    """Sorting query model"""

    model_config = ConfigDict(frozen=True)

    sort_by: str
    order: SortingOrder = SortingOrder.ASC
    subfilter: Optional[SubFilter] = None


class RequestConfig(BaseModel):
    """
    Mutable accumulator that query options are applied to.

    Filters are keyed by constraint key. Re-setting an existing key keeps its
    position and replaces its value.
    """

    fields: List[str] = Field(default_factory=list)
    filters: Dict[ConstraintKey, Filter] = Field(default_factory=dict)
    sorting: Optional[SortingQuery] = None
    limit: Optional[int] = None
    offset: Optional[int] = None
    search: Optional[str] = None

    def replace_fields(self, names: Tuple[str, ...]) -> None:
        """Replace the field selection, collapsing duplicates in order."""
        self.fields = list(dict.fromkeys(names))

    def put_filter(self, f: Filter) -> None:
        """Add a filter, or replace the one sharing its constraint key."""
        self.filters[f.key] = f


class Query(BaseModel):
    """Validated, read-only request description for one operation kind."""

    model_config = ConfigDict(frozen=True)

    kind: OperationKind
    fields: Tuple[str, ...] = ()
    filters: Tuple[Filter, ...] = ()
    sorting: Optional[SortingQuery] = None
    limit: Optional[int] = None
    offset: Optional[int] = None
    search: Optional[str] = None
    params: Tuple[Tuple[str, str], ...] = ()

    def to_params(self) -> Dict[str, str]:
        """Wire query parameters, in serialization order."""
        return dict(self.params)


class Count(BaseModel):
    """Body of a count response"""

    count: StrictInt
