"""Query – filter tree compiler.

A node compiles to ``{"bool": {"must": [...], "should": [...]}}``: ``and``
children and the node's own condition land in ``must``, ``or`` children in
``should``.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Any, Callable, Final, Mapping, Sequence

from mp_esquery.kernel.errors import InvalidRangeValueCountError, QueryError
from mp_esquery.observability.logging import get_logger
from mp_esquery.query.operators import RANGE_OPERATORS, build_field_query, clause_kind, resolve_operator
from mp_esquery.query.types import FilterCondition, FilterNode, Operator, as_filter_node, is_many

logger = get_logger(__name__)

ConditionBuilder = Callable[[str, Operator, Sequence[Any]], dict[str, Any]]


def _any_of(key: str, operator: Operator, values: Sequence[Any]) -> dict[str, Any]:
    clause = clause_kind(operator)
    return {"bool": {"should": [build_field_query(key, v, clause) for v in values]}}


def _none_of(key: str, operator: Operator, values: Sequence[Any]) -> dict[str, Any]:
    clause = clause_kind(operator)
    return {"bool": {"must_not": [build_field_query(key, v, clause) for v in values]}}


def _range(key: str, operator: Operator, values: Sequence[Any]) -> dict[str, Any]:
    if len(values) != 1:
        raise InvalidRangeValueCountError(operator, values, key=key)
    return {"range": {key: {operator.value: values[0]}}}


def _exists(key: str, operator: Operator, values: Sequence[Any]) -> dict[str, Any]:  # noqa: ARG001
    return {"exists": {"field": key}}


CONDITION_BUILDERS: Final[Mapping[Operator, ConditionBuilder]] = MappingProxyType({
    Operator.EQ: _any_of,
    Operator.LIKE: _any_of,
    Operator.NEQ: _none_of,
    **dict.fromkeys(RANGE_OPERATORS, _range),
    Operator.EXISTS: _exists,
})


def compile_condition(condition: FilterCondition) -> dict[str, Any]:
    """Compile the condition carried by a leaf node, ignoring its children.

    Raises
    ------
    UnsupportedOperatorError
        When the operator is outside the closed :class:`Operator` set.
    InvalidRangeValueCountError
        When a range operator is not given exactly one value.
    """
    try:
        operator = resolve_operator(condition.operator, key=condition.key)
        return CONDITION_BUILDERS[operator](condition.key, operator, condition.values)
    except QueryError as exc:
        logger.warning("filter.rejected", key=condition.key, code=exc.code)
        raise


def compile_filter(node: FilterNode | Mapping[str, Any]) -> dict[str, Any]:
    """Recursively compile one filter node.

    Both slots are always present, so an empty mapping (a group with no
    children) gives ``{"bool": {"must": [], "should": []}}``.  Use
    :func:`compile_filters` for a whole filter set, which maps an absent or
    empty filter to ``{"bool": {}}``.
    """
    node = as_filter_node(node)
    must = [compile_filter(child) for child in node.and_]
    should = [compile_filter(child) for child in node.or_]
    if isinstance(node, FilterCondition):
        must.append(compile_condition(node))
    return {"bool": {"must": must, "should": should}}


def compile_filters(filters: Any) -> dict[str, Any]:
    """Compile one filter or a sequence of filters into a conjunction.

    ``None`` (or an empty mapping) yields ``{"bool": {}}``; an empty sequence
    yields ``{"bool": {"must": []}}``.
    """
    if filters is None or (isinstance(filters, Mapping) and not filters):
        return {"bool": {}}
    if is_many(filters):
        return {"bool": {"must": [compile_filter(f) for f in filters]}}
    return {"bool": {"must": [compile_filter(filters)]}}


__all__ = ["CONDITION_BUILDERS", "compile_condition", "compile_filter", "compile_filters"]
