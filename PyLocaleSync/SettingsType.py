from __future__ import annotations
from collections.abc import Mapping
from typing import TypeAlias

BasicType: TypeAlias = str | int | float | bool | list[str] | None
SettingType: TypeAlias = BasicType | dict[str, 'SettingType'] | dict[str, 'SettingsType']

class SettingsError(Exception):
    """Raised when a setting cannot be coerced to the expected type."""
    pass

class SettingsType(dict[str, SettingType]):
    """
    Settings dictionary with restricted range of types allowed and type-safe getters
    """
    def __init__(self, settings : Mapping[str,SettingType]|None = None):
        if not isinstance(settings, SettingsType):
            settings = dict(settings or {})
        super().__init__(settings)

    def get_bool(self, key: str, default: bool|None = False) -> bool:
        """Get a boolean setting with type safety"""
        value = self.get(key, default)
        if value is None:
            return False

        if isinstance(value, bool):
            return value

        if isinstance(value, str):
            lower_val = value.strip().lower()
            if lower_val in ('true', 'yes', '1'):
                return True
            if lower_val in ('false', 'no', '0', ''):
                return False

        raise SettingsError(f"Cannot convert setting '{key}' of type {type(value).__name__} with value {repr(value)} to bool")

    def get_float(self, key: str, default: float|None = None) -> float|None:
        """Get a float setting with type safety"""
        value = self.get(key, default)
        if value is None:
            return None

        if isinstance(value, bool):
            raise SettingsError(f"Cannot convert setting '{key}' of type bool to float")

        try:
            return float(value) # type: ignore[arg-type]
        except (TypeError, ValueError) as e:
            raise SettingsError(f"Cannot convert setting '{key}' with value {repr(value)} to float") from e

    def get_str(self, key: str, default: str|None = None) -> str|None:
        """Get a string setting with type safety"""
        value = self.get(key, default)
        if value is None:
            return None

        if isinstance(value, (dict, list)):
            raise SettingsError(f"Cannot convert setting '{key}' of type {type(value).__name__} to str")

        return str(value)

    def get_str_list(self, key: str, default: list[str]|None = None) -> list[str]:
        """
        Get a list of strings, accepting either a list or a comma-separated string
        """
        value = self.get(key, default)
        if value is None:
            return []

        if isinstance(value, str):
            value = value.split(',')

        if not isinstance(value, (list, tuple, set)):
            raise SettingsError(f"Cannot convert setting '{key}' of type {type(value).__name__} to a list of strings")

        return [str(item).strip() for item in value if item is not None and str(item).strip()]

    def get_dict(self, key: str, default: dict[str, SettingType]|None = None) -> dict[str, SettingType]:
        """Get a dict setting with type safety - returns mutable reference when possible"""
        value = self.get(key, default)
        if value is None:
            if default is not None:
                return default
            return {}

        if isinstance(value, SettingsType):
            return value
        elif isinstance(value, dict):
            settings_type = SettingsType(value)
            self[key] = settings_type
            return settings_type
        else:
            raise TypeError(f"Expected dict for key '{key}', got {type(value).__name__}")

    def update(self, other=(), /, **kwds) -> None:
        """Update settings, filtering out None values"""
        if hasattr(other, 'items'):
            if isinstance(other, SettingsType):
                other = dict(other)
            if isinstance(other, dict):
                other = {k: v for k, v in other.items() if v is not None}
        super().update(other, **kwds)
