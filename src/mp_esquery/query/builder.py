"""Query – request body assembler.

Example::

    from mp_esquery.query import Operator, build_query

    body = build_query(
        filters=[{"key": "status", "operator": Operator.EQ, "values": ["active"]}],
        searches={"key": "name", "value": "Zoë", "options": {"analyzers": ["ignore_diacritics"]}},
        orders={"key": "created_at", "value": "desc"},
        offset=0,
        limit=20,
        is_highlight=True,
    )
"""
from __future__ import annotations

import dataclasses
from typing import Any, Mapping

from mp_esquery.observability.logging import get_logger
from mp_esquery.query.filters import compile_filters
from mp_esquery.query.ordering import compile_orders
from mp_esquery.query.searches import compile_searches
from mp_esquery.query.settings import QuerySettings
from mp_esquery.query.types import QueryArgs, is_many

logger = get_logger(__name__)


def _resolve_args(args: QueryArgs | Mapping[str, Any] | None, fields: dict[str, Any]) -> QueryArgs:
    if isinstance(args, QueryArgs):
        return dataclasses.replace(args, **fields) if fields else args
    return QueryArgs.from_dict({**(args or {}), **fields})


def _keep(value: Any, truthy: bool) -> bool:
    return bool(value) if truthy else value is not None


def _count(value: Any) -> int:
    if value is None:
        return 0
    return len(value) if is_many(value) else 1


def build_query(
    args: QueryArgs | Mapping[str, Any] | None = None,
    *,
    settings: QuerySettings | None = None,
    **fields: Any,
) -> dict[str, Any]:
    """Assemble a complete search request body.

    ``args`` may be a :class:`QueryArgs`, a mapping with the same keys (the
    camelCase ``isHighlight`` is accepted too), or omitted in favour of
    keyword arguments.  Absent filters, searches and orders compile to empty
    clauses.  Optional keys (``from``, ``size``, ``sort``, ``highlight``,
    ``track_total_hits``) are left out entirely when not requested.

    ``settings`` defaults to ``QuerySettings()``; pass
    ``QuerySettings.from_env()`` to apply ``ESQUERY_*`` overrides.
    """
    settings = settings or QuerySettings()
    query_args = _resolve_args(args, fields)

    compiled_filter = compile_filters(query_args.filters if query_args.filters is not None else [])
    compiled_search = compile_searches(
        query_args.searches if query_args.searches is not None else [],
        highlight=query_args.is_highlight,
        settings=settings,
    )
    compiled_order = compile_orders(query_args.orders)

    body: dict[str, Any] = {
        "query": {
            "bool": {
                "must": [compiled_filter, compiled_search.query],
            },
        },
    }
    if _keep(query_args.offset, settings.truthy_pagination):
        body["from"] = query_args.offset
    if _keep(query_args.limit, settings.truthy_pagination):
        body["size"] = query_args.limit
    if compiled_order:
        body["sort"] = compiled_order
    if query_args.is_highlight:
        body["highlight"] = compiled_search.highlight
    if query_args.track_total_hits:
        body["track_total_hits"] = True

    logger.debug(
        "query.built",
        filters=_count(query_args.filters),
        searches=_count(query_args.searches),
        orders=len(compiled_order),
        paginated="from" in body or "size" in body,
        highlight=query_args.is_highlight,
    )
    return body


__all__ = ["build_query"]
