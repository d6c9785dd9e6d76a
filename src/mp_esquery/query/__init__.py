"""Query – compile filter/search/ordering input into Elasticsearch request bodies."""
from mp_esquery.query.analyzer import analyze, single_clause
from mp_esquery.query.builder import build_query
from mp_esquery.query.filters import compile_condition, compile_filter, compile_filters
from mp_esquery.query.operators import build_field_query, clause_kind, resolve_operator
from mp_esquery.query.ordering import compile_orders
from mp_esquery.query.searches import CompiledSearch, build_highlight, compile_search_input, compile_searches
from mp_esquery.query.settings import QuerySettings
from mp_esquery.query.types import (
    AttributeDescriptor,
    FilterCondition,
    FilterGroup,
    FilterMode,
    FilterNode,
    Operator,
    OrderingInput,
    OrderingMode,
    PriorityWeight,
    QueryArgs,
    SearchAnalyzerMode,
    SearchInput,
    SearchOptions,
)

__all__ = [
    "AttributeDescriptor",
    "CompiledSearch",
    "FilterCondition",
    "FilterGroup",
    "FilterMode",
    "FilterNode",
    "Operator",
    "OrderingInput",
    "OrderingMode",
    "PriorityWeight",
    "QueryArgs",
    "QuerySettings",
    "SearchAnalyzerMode",
    "SearchInput",
    "SearchOptions",
    "analyze",
    "build_field_query",
    "build_highlight",
    "build_query",
    "clause_kind",
    "compile_condition",
    "compile_filter",
    "compile_filters",
    "compile_orders",
    "compile_search_input",
    "compile_searches",
    "resolve_operator",
    "single_clause",
]
