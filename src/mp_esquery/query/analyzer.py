"""Query – search keyword analyzer.

Expands one keyword into a set of alternative match strategies per attribute,
each boosted by ``attribute.rate × PriorityWeight``.  The strategies are
selected from two rule tables, one for keywords that carry diacritics and one
for keywords that don't:

==============================  =============  ===============  =========
rule (accented keyword)         field          clause           weight
==============================  =============  ===============  =========
not a link                      ``.accent``    ``match``        LOWEST
special characters              ``.accent``    ``match_phrase`` MEDIUM
no special, not a link          literal        ``match``        LOW
no special characters           literal        ``match_phrase`` HIGH
always                          ``.keyword``   ``term``         HIGHEST
==============================  =============  ===============  =========

==============================  =============  ===============  =========
rule (plain keyword)            field          clause           weight
==============================  =============  ===============  =========
accent search allowed           ``.accent``    ``match_phrase`` MEDIUM
special, not a link             ``.accent``    ``match``        LOWEST
special characters              ``.keyword``   ``term``         HIGHEST
no special, not a link, allowed ``.accent``    ``match``        LOWEST
no special, not a link          literal        ``match``        LOW
no special characters           literal        ``match_phrase`` HIGH
==============================  =============  ===============  =========

Accented keywords are folded before being matched against ``.accent``.
"""
from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Any, Callable, Final, Iterable, Mapping

from mp_esquery.kernel.text import has_special_characters, is_link, remove_accent
from mp_esquery.query.settings import QuerySettings
from mp_esquery.query.types import AttributeDescriptor, PriorityWeight, as_attribute


class TargetField(str, Enum):
    ACCENT = "accent"
    LITERAL = "literal"
    KEYWORD = "keyword"


@dataclasses.dataclass(frozen=True)
class KeywordSignals:
    """What the analyzer knows about one keyword against one attribute."""
    special: bool
    link: bool
    allow_no_accent: bool


@dataclasses.dataclass(frozen=True)
class Strategy:
    applies: Callable[[KeywordSignals], bool]
    field: TargetField
    clause: str
    weight: PriorityWeight
    folded: bool = False


ACCENTED_STRATEGIES: Final[tuple[Strategy, ...]] = (
    Strategy(lambda s: not s.link, TargetField.ACCENT, "match", PriorityWeight.LOWEST, folded=True),
    Strategy(lambda s: s.special, TargetField.ACCENT, "match_phrase", PriorityWeight.MEDIUM, folded=True),
    Strategy(lambda s: not s.special and not s.link, TargetField.LITERAL, "match", PriorityWeight.LOW),
    Strategy(lambda s: not s.special, TargetField.LITERAL, "match_phrase", PriorityWeight.HIGH),
    Strategy(lambda s: True, TargetField.KEYWORD, "term", PriorityWeight.HIGHEST),
)

PLAIN_STRATEGIES: Final[tuple[Strategy, ...]] = (
    Strategy(lambda s: s.allow_no_accent, TargetField.ACCENT, "match_phrase", PriorityWeight.MEDIUM),
    Strategy(lambda s: s.special and not s.link, TargetField.ACCENT, "match", PriorityWeight.LOWEST),
    Strategy(lambda s: s.special, TargetField.KEYWORD, "term", PriorityWeight.HIGHEST),
    Strategy(
        lambda s: not s.special and not s.link and s.allow_no_accent,
        TargetField.ACCENT,
        "match",
        PriorityWeight.LOWEST,
    ),
    Strategy(lambda s: not s.special and not s.link, TargetField.LITERAL, "match", PriorityWeight.LOW),
    Strategy(lambda s: not s.special, TargetField.LITERAL, "match_phrase", PriorityWeight.HIGH),
)


def single_clause(field: str, value: Any, boost: float, clause: str = "match_phrase") -> dict[str, Any]:
    """One boosted alternative: ``{"bool": {"must": {clause: {field: value}}, "boost": boost}}``."""
    return {
        "bool": {
            "must": {clause: {field: value}},
            "boost": boost,
        }
    }


def _field_name(target: TargetField, attribute: AttributeDescriptor, settings: QuerySettings) -> str:
    if target is TargetField.ACCENT:
        return settings.accent_field(attribute.key)
    if target is TargetField.KEYWORD:
        return settings.keyword_field(attribute.key, attribute.sub_key)
    return attribute.key


def analyze(
    keyword: str,
    attributes: Iterable[AttributeDescriptor | Mapping[str, Any]],
    settings: QuerySettings | None = None,
) -> dict[str, Any]:
    """Build a ``should`` set of every applicable strategy for every attribute.

    At least one alternative must match (``minimum_should_match: 1``); the
    engine ranks hits by the accumulated boost of the alternatives they hit.
    """
    settings = settings or QuerySettings()
    folded = remove_accent(keyword)
    table = ACCENTED_STRATEGIES if folded != keyword else PLAIN_STRATEGIES
    special = has_special_characters(keyword)
    link = is_link(keyword, settings.link_marker)

    should: list[dict[str, Any]] = []
    for attribute in map(as_attribute, attributes):
        signals = KeywordSignals(
            special=special,
            link=link or attribute.is_link,
            allow_no_accent=attribute.allow_search_no_accent,
        )
        for strategy in table:
            if not strategy.applies(signals):
                continue
            should.append(
                single_clause(
                    _field_name(strategy.field, attribute, settings),
                    folded if strategy.folded else keyword,
                    attribute.rate * strategy.weight,
                    strategy.clause,
                )
            )

    return {
        "bool": {
            "should": should,
            "minimum_should_match": 1,
        }
    }


__all__ = [
    "ACCENTED_STRATEGIES",
    "KeywordSignals",
    "PLAIN_STRATEGIES",
    "Strategy",
    "TargetField",
    "analyze",
    "single_clause",
]
