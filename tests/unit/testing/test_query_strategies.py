"""Unit tests for the hypothesis strategies shipped in mp_esquery.testing."""
from __future__ import annotations

import sys
from unittest.mock import patch

import pytest
from hypothesis import given, settings

from mp_esquery.query.operators import RANGE_OPERATORS
from mp_esquery.query.types import FilterCondition, FilterGroup, Operator, QueryArgs, SearchInput
from mp_esquery.testing.generators import (
    filter_condition_strategy,
    filter_node_strategy,
    query_args_strategy,
    search_input_strategy,
)


class TestRequireHypothesis:
    def test_raises_import_error_without_hypothesis(self) -> None:
        from mp_esquery.testing.generators.strategies import _require_hypothesis

        with patch.dict(sys.modules, {"hypothesis.strategies": None}):
            with pytest.raises(ImportError, match="pip install hypothesis"):
                _require_hypothesis()


@settings(max_examples=50)
@given(filter_condition_strategy())
def test_conditions_are_well_formed(condition: FilterCondition) -> None:
    assert condition.key
    if condition.operator in RANGE_OPERATORS:
        assert len(condition.values) == 1
    elif condition.operator is not Operator.EXISTS:
        assert condition.values


@settings(max_examples=50)
@given(filter_node_strategy())
def test_nodes_are_filter_nodes(node: FilterCondition | FilterGroup) -> None:
    assert isinstance(node, (FilterCondition, FilterGroup))


@settings(max_examples=50)
@given(search_input_strategy())
def test_search_inputs(search: SearchInput) -> None:
    assert isinstance(search, SearchInput)
    assert search.value


@settings(max_examples=25)
@given(query_args_strategy())
def test_query_args(args: QueryArgs) -> None:
    assert isinstance(args, QueryArgs)
    assert args.offset is None or args.offset >= 0
