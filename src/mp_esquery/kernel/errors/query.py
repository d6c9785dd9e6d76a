"""Query compilation errors.

Both errors are fatal to the compile call that raised them; the compilers
never recover from them internally.
"""

from __future__ import annotations

from typing import Any, Sequence

from mp_esquery.kernel.errors.base import BaseError


class QueryError(BaseError):
    """The input cannot be turned into a well-formed query body."""

    default_code = "query_error"


class UnsupportedOperatorError(QueryError):
    """A filter operator outside the closed :class:`Operator` set."""

    default_code = "unsupported_operator"

    def __init__(self, operator: Any, *, key: str | None = None) -> None:
        super().__init__(
            f"Unsupported operator: {operator}",
            detail={"operator": operator, "key": key},
        )
        self.operator = operator
        self.key = key


class UnsupportedAnalyzerError(QueryError):
    """A search analyzer name outside the known analyzer modes."""

    default_code = "unsupported_analyzer"

    def __init__(self, analyzer: Any) -> None:
        super().__init__(f"Unsupported search analyzer: {analyzer}", detail={"analyzer": analyzer})
        self.analyzer = analyzer


class InvalidRangeValueCountError(QueryError):
    """A range operator was given zero or several values."""

    default_code = "invalid_range_value_count"

    def __init__(self, operator: Any, values: Sequence[Any], *, key: str | None = None) -> None:
        op = getattr(operator, "value", operator)
        super().__init__(
            f"Operator {op} requires exactly one value",
            detail={"operator": op, "key": key, "count": len(values)},
        )
        self.operator = operator
        self.values = tuple(values)
        self.key = key


InvalidRangeValueCount = InvalidRangeValueCountError


__all__ = [
    "InvalidRangeValueCount",
    "InvalidRangeValueCountError",
    "QueryError",
    "UnsupportedAnalyzerError",
    "UnsupportedOperatorError",
]
