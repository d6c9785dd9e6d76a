"""Query – operator table and field query builder.

``build_field_query`` understands dotted keys: every segment but the last
opens a ``nested`` query.  A segment ending in ``$keyword`` is a literal
field name rather than a nesting boundary, so ``title.$keyword`` targets
the ``title.keyword`` sub-field of a plain object.
"""
from __future__ import annotations

import re
from types import MappingProxyType
from typing import Any, Final, Mapping

from mp_esquery.kernel.errors import UnsupportedOperatorError
from mp_esquery.query.types import Operator

LITERAL_MARKER: Final = "$keyword"

_PATH_SEPARATOR: Final = re.compile(r"\.(?!" + re.escape(LITERAL_MARKER) + ")")

CLAUSE_KINDS: Final[Mapping[Operator, str]] = MappingProxyType({
    Operator.EQ: "term",
    Operator.NEQ: "term",
    Operator.LIKE: "match_phrase",
    Operator.GT: "range",
    Operator.GTE: "range",
    Operator.LT: "range",
    Operator.LTE: "range",
    Operator.EXISTS: "exists",
})

RANGE_OPERATORS: Final[frozenset[Operator]] = frozenset(op for op, kind in CLAUSE_KINDS.items() if kind == "range")


def resolve_operator(operator: Any, *, key: str | None = None) -> Operator:
    """Coerce *operator* into the closed :class:`Operator` set."""
    if isinstance(operator, Operator):
        return operator
    try:
        return Operator(operator)
    except ValueError:
        raise UnsupportedOperatorError(operator, key=key) from None


def clause_kind(operator: Any) -> str:
    """Return the Elasticsearch clause name an operator compiles to."""
    return CLAUSE_KINDS[resolve_operator(operator)]


def strip_literal_marker(name: str) -> str:
    if name.endswith(LITERAL_MARKER):
        return name[: -len(LITERAL_MARKER)] + LITERAL_MARKER[1:]
    return name


def build_field_query(key: str, value: Any, clause: str = "match_phrase") -> dict[str, Any]:
    """Build ``{clause: {field: value}}``, wrapped in one ``nested`` per parent path.

    Example::

        build_field_query("tags.name", "red", "term")
        # {"nested": {"path": "tags", "query": {"term": {"tags.name": "red"}}}}
    """
    segments = _PATH_SEPARATOR.split(key)
    query: dict[str, Any] = {clause: {strip_literal_marker(key): value}}
    for depth in range(len(segments) - 1, 0, -1):
        path = ".".join(strip_literal_marker(s) for s in segments[:depth])
        query = {"nested": {"path": path, "query": query}}
    return query


__all__ = [
    "CLAUSE_KINDS",
    "LITERAL_MARKER",
    "RANGE_OPERATORS",
    "build_field_query",
    "clause_kind",
    "resolve_operator",
    "strip_literal_marker",
]
