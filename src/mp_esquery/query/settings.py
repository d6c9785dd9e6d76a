"""Query – QuerySettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from mp_esquery.config.settings import EnvSettingsLoader, Settings
from mp_esquery.config.validation import InvalidSettingValueError
from mp_esquery.kernel.text import DEFAULT_LINK_MARKER


@dataclasses.dataclass(frozen=True)
class QuerySettings(Settings):
    """Index conventions the compilers rely on.

    Loaded from ``ESQUERY_*`` environment variables by :meth:`from_env`.
    The compilers never read the environment themselves: without an explicit
    ``settings`` argument they use the defaults below.

    * ``accent_subfield`` – multi-field holding accent-folded text
      (``name.accent``).
    * ``keyword_subfield`` – unanalysed multi-field used for exact terms
      (``name.keyword``).
    * ``link_marker`` – a keyword containing it is treated as a URL.
    * ``truthy_pagination`` – drop ``from``/``size`` when they are ``0``
      instead of only when they are absent.
    """

    _prefix: ClassVar[str] = "ESQUERY"

    accent_subfield: str = "accent"
    keyword_subfield: str = "keyword"
    link_marker: str = DEFAULT_LINK_MARKER
    truthy_pagination: bool = False

    def _validate(self) -> None:
        for name in ("accent_subfield", "keyword_subfield", "link_marker"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value.strip():
                raise InvalidSettingValueError(
                    name, value, "must be a non-empty string", env_key=self.env_key(name)
                )

    def accent_field(self, key: str) -> str:
        return f"{key}.{self.accent_subfield}"

    def keyword_field(self, key: str, sub_key: str | None = None) -> str:
        return f"{key}.{sub_key or self.keyword_subfield}"

    @classmethod
    def from_env(cls) -> "QuerySettings":
        return EnvSettingsLoader().load(cls)


__all__ = ["QuerySettings"]
