"""conftest.py for benchmarks.

Provides representative request arguments shared by every benchmark.
"""

from __future__ import annotations

from typing import Any

import pytest


@pytest.fixture(scope="session")
def wide_filters() -> list[dict[str, Any]]:
    """Twenty conditions spread over every operator, some on nested keys."""
    operators = ["eq", "neq", "like", "gt", "gte", "lt", "lte", "exists"]
    filters = []
    for i in range(20):
        op = operators[i % len(operators)]
        values = [str(i)] if op in ("gt", "gte", "lt", "lte") else [f"v{i}", f"w{i}"]
        key = f"items.field_{i}" if i % 3 == 0 else f"field_{i}"
        filters.append({"key": key, "operator": op, "values": values})
    return filters


@pytest.fixture(scope="session")
def deep_filter() -> dict[str, Any]:
    """A filter tree eight levels deep."""
    node: dict[str, Any] = {"key": "leaf", "operator": "exists"}
    for depth in range(8):
        node = {"and": [node], "or": [{"key": f"alt_{depth}", "operator": "eq", "values": ["x"]}]}
    return node


@pytest.fixture(scope="session")
def searches() -> list[dict[str, Any]]:
    return [
        {"key": "title", "value": "Đà Nẵng", "options": {"analyzers": ["ignore_diacritics"]}},
        {"key": "body", "value": "rock & roll", "options": {"analyzers": ["ignore_diacritics", "exact_order"]}},
        {"key": "url", "value": "https://example.com", "options": {"analyzers": ["ignore_diacritics"]}},
    ]
