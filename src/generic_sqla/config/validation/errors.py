"""Config validation errors."""
from __future__ import annotations

from typing import Any

from generic_sqla.kernel.errors import BaseError


class ConfigError(BaseError):
    """Settings could not be loaded or did not validate."""

    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(f"{setting_name} is not set", detail={"setting": setting_name})
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """*setting_name* is set to a value that cannot be used; *reason* says why."""

    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: Any, reason: str) -> None:
        super().__init__(
            f"{setting_name}={value!r} rejected: {reason}",
            detail={"setting": setting_name, "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
