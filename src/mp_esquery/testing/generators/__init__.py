"""Testing generators – Hypothesis strategies for query inputs."""
from mp_esquery.testing.generators.strategies import (
    filter_condition_strategy,
    filter_node_strategy,
    ordering_input_strategy,
    query_args_strategy,
    search_input_strategy,
)

__all__ = [
    "filter_condition_strategy",
    "filter_node_strategy",
    "ordering_input_strategy",
    "query_args_strategy",
    "search_input_strategy",
]
