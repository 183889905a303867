from __future__ import annotations
from collections.abc import Mapping
from typing import TypeAlias

SettingType: TypeAlias = str | int | float | bool | None

class SettingsError(Exception):
    """Raised when a setting cannot be coerced to the expected type."""
    pass

class SettingsType(dict[str, SettingType]):
    """
    Settings dictionary with type-safe getters.

    Values may arrive as strings (e.g. from the environment or a config file) and are
    converted on access.
    """
    def __init__(self, settings : Mapping[str, SettingType]|None = None):
        super().__init__(dict(settings or {}))

    def get_bool(self, key : str, default : bool = False) -> bool:
        value = self.get(key, default)
        if value is None:
            return default

        if isinstance(value, bool):
            return value
        if isinstance(value, str) and value.strip().lower() in ('true', 'false', 'yes', 'no', '1', '0'):
            return value.strip().lower() in ('true', 'yes', '1')

        raise SettingsError(f"Setting '{key}' should be a bool, not {type(value).__name__} {repr(value)}")

    def get_int(self, key : str, default : int|None = None) -> int|None:
        value = self.get(key, default)
        if value is None:
            return default
        if isinstance(value, bool):
            raise SettingsError(f"Setting '{key}' should be an int, not a bool")

        try:
            return int(value)
        except ValueError as e:
            raise SettingsError(f"Setting '{key}' should be an int, not {repr(value)}") from e

    def get_float(self, key : str, default : float|None = None) -> float|None:
        value = self.get(key, default)
        if value is None:
            return default

        try:
            return float(value)
        except ValueError as e:
            raise SettingsError(f"Setting '{key}' should be a number, not {repr(value)}") from e

    def get_str(self, key : str, default : str|None = None) -> str|None:
        value = self.get(key, default)
        return None if value is None else str(value)
