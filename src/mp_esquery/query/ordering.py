"""Query – sort directives."""
from __future__ import annotations

from enum import Enum
from typing import Any

from mp_esquery.query.types import as_ordering_input, is_many


def compile_orders(orders: Any) -> list[dict[str, Any]]:
    """Turn one ordering input or a sequence of them into ``[{key: direction}, ...]``."""
    if orders is None:
        return []
    items = orders if is_many(orders) else [orders]
    directives = []
    for order in map(as_ordering_input, items):
        direction = order.value.value if isinstance(order.value, Enum) else order.value
        directives.append({order.key: direction})
    return directives


__all__ = ["compile_orders"]
