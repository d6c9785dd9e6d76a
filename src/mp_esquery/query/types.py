"""Query – input value objects and enumerations.

Every compiler accepts either these frozen dataclasses or the equivalent
plain mappings (``{"key": ..., "operator": ..., "values": [...]}``); the
``as_*`` helpers below normalise one into the other without touching the
caller's object.
"""
from __future__ import annotations

import dataclasses
from enum import Enum, IntEnum
from typing import Any, Mapping, Union

from mp_esquery.kernel.errors import UnsupportedAnalyzerError


class Operator(str, Enum):
    EQ = "eq"
    NEQ = "neq"
    LIKE = "like"
    GT = "gt"
    GTE = "gte"
    LT = "lt"
    LTE = "lte"
    EXISTS = "exists"


class FilterMode(str, Enum):
    """Names of the two composite slots of a filter node."""
    AND = "and"
    OR = "or"


class OrderingMode(str, Enum):
    ASC = "asc"
    DESC = "desc"


class SearchAnalyzerMode(str, Enum):
    IGNORE_DIACRITICS = "ignore_diacritics"
    EXACT_ORDER = "exact_order"


class PriorityWeight(IntEnum):
    """Boost multipliers for the search strategies, weakest first."""
    LOWEST = 1
    LOW = 2
    MEDIUM = 3
    HIGH = 4
    HIGHEST = 5


# ---------------------------------------------------------------------------
# Filters
# ---------------------------------------------------------------------------


@dataclasses.dataclass(frozen=True)
class FilterGroup:
    """Composite node: only ``and_`` / ``or_`` children, no condition of its own."""
    and_: tuple["FilterNode", ...] = ()
    or_: tuple["FilterNode", ...] = ()


@dataclasses.dataclass(frozen=True)
class FilterCondition:
    """Leaf node: ``key <operator> values``.

    ``operator`` is kept as given; it is resolved against :class:`Operator`
    when the node is compiled.  A condition may still carry ``and_`` / ``or_``
    children, which are compiled next to it.
    """
    key: str
    operator: Operator | str | None
    values: tuple[Any, ...] = ()
    and_: tuple["FilterNode", ...] = ()
    or_: tuple["FilterNode", ...] = ()


FilterNode = Union[FilterCondition, FilterGroup]


def as_filter_node(node: FilterNode | Mapping[str, Any]) -> FilterNode:
    if isinstance(node, (FilterCondition, FilterGroup)):
        return node
    children = {
        "and_": tuple(as_filter_node(c) for c in node.get(FilterMode.AND.value) or ()),
        "or_": tuple(as_filter_node(c) for c in node.get(FilterMode.OR.value) or ()),
    }
    key = node.get("key")
    if not key:
        return FilterGroup(**children)
    return FilterCondition(
        key=key,
        operator=node.get("operator"),
        values=tuple(node.get("values") or ()),
        **children,
    )


# ---------------------------------------------------------------------------
# Searches
# ---------------------------------------------------------------------------


@dataclasses.dataclass(frozen=True)
class AttributeDescriptor:
    """One searchable field and its relative weight.

    ``sub_key`` overrides the sub-field used for exact term matching
    (``<key>.keyword`` by default).
    """
    key: str
    rate: float = 1
    allow_search_no_accent: bool = True
    is_link: bool = False
    sub_key: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AttributeDescriptor":
        return cls(
            key=data["key"],
            rate=data.get("rate", 1),
            allow_search_no_accent=bool(_pick(data, "allow_search_no_accent", "allowSearchNoAccent", True)),
            is_link=bool(_pick(data, "is_link", "isLink", False)),
            sub_key=_pick(data, "sub_key", "subKey", None),
        )


def as_attribute(attribute: AttributeDescriptor | Mapping[str, Any]) -> AttributeDescriptor:
    if isinstance(attribute, AttributeDescriptor):
        return attribute
    return AttributeDescriptor.from_dict(attribute)


def as_analyzer_mode(mode: SearchAnalyzerMode | str) -> SearchAnalyzerMode:
    if isinstance(mode, SearchAnalyzerMode):
        return mode
    try:
        return SearchAnalyzerMode(mode)
    except ValueError:
        raise UnsupportedAnalyzerError(mode) from None


@dataclasses.dataclass(frozen=True)
class SearchOptions:
    """``analyzers=None`` means nothing to search; ``()`` means a plain ``match``.

    Modes given as strings are resolved when the search is compiled.
    """
    analyzers: tuple[SearchAnalyzerMode | str, ...] | None = None
    boost: float | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SearchOptions":
        analyzers = data.get("analyzers")
        return cls(
            analyzers=None if analyzers is None else tuple(as_analyzer_mode(a) for a in analyzers),
            boost=data.get("boost"),
        )


@dataclasses.dataclass(frozen=True)
class SearchInput:
    key: str
    value: str
    options: SearchOptions | None = None

    @property
    def analyzers(self) -> tuple[SearchAnalyzerMode | str, ...]:
        if self.options is None or self.options.analyzers is None:
            return ()
        return self.options.analyzers

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SearchInput":
        options = data.get("options")
        if options is not None and not isinstance(options, SearchOptions):
            options = SearchOptions.from_dict(options)
        return cls(key=data["key"], value=data["value"], options=options)


def as_search_input(search: SearchInput | Mapping[str, Any]) -> SearchInput:
    if isinstance(search, SearchInput):
        return search
    return SearchInput.from_dict(search)


# ---------------------------------------------------------------------------
# Ordering
# ---------------------------------------------------------------------------


@dataclasses.dataclass(frozen=True)
class OrderingInput:
    key: str
    value: OrderingMode | str = OrderingMode.ASC


def as_ordering_input(order: OrderingInput | Mapping[str, Any]) -> OrderingInput:
    if isinstance(order, OrderingInput):
        return order
    return OrderingInput(key=order["key"], value=order["value"])


# ---------------------------------------------------------------------------
# Top-level request
# ---------------------------------------------------------------------------


@dataclasses.dataclass(frozen=True)
class QueryArgs:
    """Everything :func:`~mp_esquery.query.builder.build_query` needs.

    ``filters``, ``searches`` and ``orders`` each take a single item or a
    sequence of items; ``None`` means "nothing to compile".
    """
    filters: Any = None
    searches: Any = None
    orders: Any = None
    offset: int | None = None
    limit: int | None = None
    is_highlight: bool = False
    track_total_hits: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "QueryArgs":
        return cls(
            filters=_pick(data, "filters", "filter", None),
            searches=_pick(data, "searches", "search", None),
            orders=_pick(data, "orders", "order", None),
            offset=data.get("offset"),
            limit=data.get("limit"),
            is_highlight=bool(_pick(data, "is_highlight", "isHighlight", False)),
            track_total_hits=bool(_pick(data, "track_total_hits", "trackTotalHits", False)),
        )


def is_many(value: Any) -> bool:
    """``True`` for a list/tuple of inputs, ``False`` for a single input."""
    return isinstance(value, (list, tuple))


def _pick(data: Mapping[str, Any], name: str, alias: str, default: Any) -> Any:
    if name in data:
        return data[name]
    return data.get(alias, default)


__all__ = [
    "AttributeDescriptor",
    "FilterCondition",
    "FilterGroup",
    "FilterMode",
    "FilterNode",
    "Operator",
    "OrderingInput",
    "OrderingMode",
    "PriorityWeight",
    "QueryArgs",
    "SearchAnalyzerMode",
    "SearchInput",
    "SearchOptions",
    "as_analyzer_mode",
    "as_attribute",
    "as_filter_node",
    "as_ordering_input",
    "as_search_input",
    "is_many",
]
