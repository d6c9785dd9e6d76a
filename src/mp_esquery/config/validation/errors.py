"""Config validation errors.

Every error names the offending field and the environment variable it is
loaded from, so a bad ``ESQUERY_*`` value can be traced back to its source.
"""
from __future__ import annotations

from mp_esquery.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Settings could not be loaded or failed validation."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A settings field without a default has no environment variable."""
    default_code = "missing_required_setting"

    def __init__(self, env_key: str, *, field: str | None = None) -> None:
        super().__init__(
            f"Environment variable {env_key} is required",
            detail={"env_key": env_key, "field": field},
        )
        self.env_key = env_key
        self.field = field


class InvalidSettingValueError(ConfigError):
    """A settings field holds a value the compilers cannot use."""
    default_code = "invalid_setting_value"

    def __init__(
        self,
        setting_name: str,
        value: object,
        reason: str,
        *,
        env_key: str | None = None,
    ) -> None:
        source = f" (from {env_key})" if env_key else ""
        super().__init__(
            f"{setting_name}{source} {reason}, got {value!r}",
            detail={"field": setting_name, "env_key": env_key, "value": value, "reason": reason},
        )
        self.setting_name = setting_name
        self.env_key = env_key
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
