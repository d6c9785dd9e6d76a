"""Unit tests for the request body assembler."""

from __future__ import annotations

import copy

import pytest
from structlog.testing import capture_logs

from mp_esquery.kernel.errors import InvalidRangeValueCountError
from mp_esquery.query.builder import build_query
from mp_esquery.query.settings import QuerySettings
from mp_esquery.query.types import Operator, OrderingMode, QueryArgs


class TestBuildQueryDefaults:
    def test_empty_arguments(self) -> None:
        assert build_query({}) == {
            "query": {"bool": {"must": [{"bool": {"must": []}}, {"bool": {"should": []}}]}}
        }

    def test_no_arguments_at_all(self) -> None:
        assert build_query() == build_query(QueryArgs())

    @pytest.mark.parametrize("key", ["from", "size", "sort", "highlight", "track_total_hits"])
    def test_optional_keys_absent(self, key: str) -> None:
        assert key not in build_query()


class TestBuildQueryFull:
    def test_filter_search_order_and_pagination(self) -> None:
        result = build_query(
            {
                "filter": {"key": "name", "operator": Operator.EQ, "values": ["John"]},
                "search": {"key": "name", "value": "John"},
                "order": {"key": "age", "value": OrderingMode.ASC},
                "offset": 10,
                "limit": 20,
                "isHighlight": True,
            }
        )
        assert result == {
            "query": {
                "bool": {
                    "must": [
                        {
                            "bool": {
                                "must": [
                                    {
                                        "bool": {
                                            "must": [{"bool": {"should": [{"term": {"name": "John"}}]}}],
                                            "should": [],
                                        }
                                    }
                                ]
                            }
                        },
                        {"bool": {"must": {}}},
                    ]
                }
            },
            "from": 10,
            "size": 20,
            "sort": [{"age": "asc"}],
            "highlight": {"fields": {"name": {}}},
        }

    def test_keyword_arguments(self) -> None:
        result = build_query(
            searches=[{"key": "title", "value": "Zoë", "options": {"analyzers": ["ignore_diacritics"]}}],
            is_highlight=True,
            track_total_hits=True,
        )
        assert result["highlight"] == {"fields": {"title": {}, "title.accent": {}}}
        assert result["track_total_hits"] is True

    def test_keyword_arguments_override_dataclass(self) -> None:
        args = QueryArgs(limit=5)
        assert build_query(args, limit=50)["size"] == 50

    def test_highlight_absent_when_not_requested(self) -> None:
        result = build_query(searches=[{"key": "t", "value": "x", "options": {"analyzers": []}}])
        assert "highlight" not in result

    def test_track_total_hits_false_is_omitted(self) -> None:
        assert "track_total_hits" not in build_query(track_total_hits=False)

    def test_errors_propagate(self) -> None:
        with pytest.raises(InvalidRangeValueCountError):
            build_query(filters=[{"key": "age", "operator": "gt", "values": []}])


class TestPagination:
    def test_zero_is_kept_by_default(self) -> None:
        result = build_query(offset=0, limit=0)
        assert result["from"] == 0
        assert result["size"] == 0

    def test_truthy_pagination_drops_zero(self) -> None:
        result = build_query(offset=0, limit=0, settings=QuerySettings(truthy_pagination=True))
        assert "from" not in result
        assert "size" not in result

    def test_environment_applies_only_through_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ESQUERY_TRUTHY_PAGINATION", "1")
        assert build_query(offset=0)["from"] == 0
        assert "from" not in build_query(offset=0, settings=QuerySettings.from_env())

    def test_truthy_pagination_keeps_non_zero(self) -> None:
        result = build_query(offset=5, limit=10, settings=QuerySettings(truthy_pagination=True))
        assert (result["from"], result["size"]) == (5, 10)


class TestPurity:
    def test_idempotent(self) -> None:
        args = {
            "filters": [{"key": "a", "operator": "neq", "values": ["1", "2"]}],
            "searches": {"key": "b", "value": "café", "options": {"analyzers": ["ignore_diacritics", "exact_order"]}},
            "orders": [{"key": "c", "value": "desc"}],
            "isHighlight": True,
        }
        assert build_query(args) == build_query(args)

    def test_input_not_mutated(self) -> None:
        args = {
            "filters": {"and": [{"key": "a", "operator": "exists"}]},
            "searches": [{"key": "b", "value": "x", "options": {"analyzers": ["exact_order"]}}],
        }
        snapshot = copy.deepcopy(args)
        build_query(args)
        assert args == snapshot

    def test_outputs_do_not_alias(self) -> None:
        first = build_query(orders={"key": "a", "value": "asc"})
        second = build_query(orders={"key": "a", "value": "asc"})
        first["sort"].append({"b": "desc"})
        assert second["sort"] == [{"a": "asc"}]


class TestLogging:
    def test_emits_query_built_event(self) -> None:
        with capture_logs() as logs:
            build_query(filters=[{"key": "a", "operator": "exists"}], limit=10)
        (event,) = [e for e in logs if e["event"] == "query.built"]
        assert event["log_level"] == "debug"
        assert event["filters"] == 1
        assert event["paginated"] is True

    def test_rejected_filter_is_logged(self) -> None:
        with capture_logs() as logs:
            with pytest.raises(InvalidRangeValueCountError):
                build_query(filters={"key": "age", "operator": "lt", "values": ["1", "2"]})
        (event,) = [e for e in logs if e["event"] == "filter.rejected"]
        assert event["log_level"] == "warning"
        assert event["code"] == "invalid_range_value_count"
        assert event["key"] == "age"
