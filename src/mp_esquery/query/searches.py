"""Query – search compiler and highlight map."""
from __future__ import annotations

import dataclasses
from types import MappingProxyType
from typing import Any, Callable, Final, Mapping, Sequence

from mp_esquery.query.analyzer import analyze
from mp_esquery.query.settings import QuerySettings
from mp_esquery.query.types import (
    AttributeDescriptor,
    SearchAnalyzerMode,
    SearchInput,
    as_analyzer_mode,
    as_search_input,
    is_many,
)

ModeBuilder = Callable[[SearchInput, QuerySettings], dict[str, Any]]


@dataclasses.dataclass(frozen=True)
class CompiledSearch:
    """``highlight`` is ``None`` unless highlighting was requested."""
    query: dict[str, Any]
    highlight: dict[str, Any] | None = None


def synthetic_attribute(key: str) -> AttributeDescriptor:
    """Attribute used when a search input does not describe its own field."""
    return AttributeDescriptor(key=key, rate=1, allow_search_no_accent=True, is_link=False)


def _exact_order(search: SearchInput, settings: QuerySettings) -> dict[str, Any]:  # noqa: ARG001
    return {"match_phrase": {search.key: search.value}}


def _ignore_diacritics(search: SearchInput, settings: QuerySettings) -> dict[str, Any]:
    return analyze(search.value, [synthetic_attribute(search.key)], settings)


MODE_BUILDERS: Final[Mapping[SearchAnalyzerMode, ModeBuilder]] = MappingProxyType({
    SearchAnalyzerMode.EXACT_ORDER: _exact_order,
    SearchAnalyzerMode.IGNORE_DIACRITICS: _ignore_diacritics,
})


def compile_search_input(
    search: SearchInput | Mapping[str, Any],
    settings: QuerySettings | None = None,
) -> dict[str, Any]:
    """Compile one search input.

    * no options / ``analyzers=None`` → ``{}``
    * ``analyzers=()`` → plain ``match``
    * otherwise every analyzer mode must hold (``bool.must``)

    Raises
    ------
    UnsupportedAnalyzerError
        When an analyzer mode is outside :class:`SearchAnalyzerMode`.
    """
    settings = settings or QuerySettings()
    search = as_search_input(search)
    options = search.options
    if options is None or options.analyzers is None:
        return {}

    if not options.analyzers:
        if options.boost is None:
            return {"match": {search.key: search.value}}
        return {"match": {search.key: {"query": search.value, "boost": options.boost}}}

    modes = [as_analyzer_mode(mode) for mode in options.analyzers]
    body: dict[str, Any] = {"must": [MODE_BUILDERS[mode](search, settings) for mode in modes]}
    if options.boost is not None:
        body["boost"] = options.boost
    return {"bool": body}


def build_highlight(searches: Sequence[SearchInput], settings: QuerySettings | None = None) -> dict[str, Any]:
    """Register every searched key, plus its accent sub-field when diacritics are ignored."""
    settings = settings or QuerySettings()
    fields: dict[str, Any] = {}
    for search in searches:
        fields[search.key] = {}
        if SearchAnalyzerMode.IGNORE_DIACRITICS in search.analyzers:
            fields[settings.accent_field(search.key)] = {}
    return {"fields": fields}


def compile_searches(
    searches: Any,
    highlight: bool = False,
    settings: QuerySettings | None = None,
) -> CompiledSearch:
    """Compile one search input or a sequence of alternatives.

    A single input is required (``bool.must``); several inputs are
    alternatives (``bool.should``), i.e. "match the keyword in any of these".
    """
    settings = settings or QuerySettings()
    if searches is None or (isinstance(searches, Mapping) and not searches):
        inputs: list[SearchInput] = []
        query: dict[str, Any] = {"bool": {}}
    elif is_many(searches):
        inputs = [as_search_input(s) for s in searches]
        query = {"bool": {"should": [compile_search_input(s, settings) for s in inputs]}}
    else:
        inputs = [as_search_input(searches)]
        query = {"bool": {"must": compile_search_input(inputs[0], settings)}}

    return CompiledSearch(
        query=query,
        highlight=build_highlight(inputs, settings) if highlight else None,
    )


__all__ = [
    "CompiledSearch",
    "MODE_BUILDERS",
    "build_highlight",
    "compile_search_input",
    "compile_searches",
    "synthetic_attribute",
]
