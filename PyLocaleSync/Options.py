from __future__ import annotations
from collections.abc import Mapping
from copy import deepcopy
import os
import dotenv

from PyLocaleSync.SettingsType import SettingType, SettingsType
from PyLocaleSync.version import __version__

# Load environment variables from .env file
dotenv.load_dotenv()

def env_bool(key : str, default : bool = False) -> bool:
    var = os.getenv(key, default)
    return True if var and str(var).lower() in ('true', 'yes', '1') else False

def env_str(key : str, default : str|None = None) -> str|None:
    value = os.getenv(key, default)
    return str(value) if value is not None else None

def env_float(key : str, default : float|None = None) -> float|None:
    value = os.getenv(key, default)
    if value is None:
        return None
    if isinstance(value, str) and not value.strip():
        return None
    return float(value)

def env_list(key : str, default : list[str]|None = None) -> list[str]:
    value = os.getenv(key)
    if value is None:
        return list(default or [])
    return [item.strip() for item in value.split(',') if item.strip()]

def default_settings() -> dict[str, SettingType]:
    """
    Defaults are read from the environment each time so that a .env file or test override is honoured
    """
    return {
        'version': __version__,
        'source_locale': env_str('SOURCE_LOCALE', 'en'),
        'locales': env_list('TARGET_LOCALES'),
        'messages_root': env_str('MESSAGES_ROOT', os.path.join('src', 'messages')),
        'provider': env_str('TRANSLATION_PROVIDER', 'passthrough'),
        'cache_path': env_str('TRANSLATION_CACHE', os.path.join('.cache', 'i18n-cache.json')),
        'dry_run': env_bool('DRY_RUN', False),
        'extension': env_str('MESSAGE_EXTENSION', 'ts'),
        'reserved_keys': env_list('RESERVED_KEYS', ['tone']),
        'skip_directories': env_list('SKIP_DIRECTORIES', ['types']),
        'ui_language': env_str('UI_LANGUAGE', 'en'),
        'provider_settings': SettingsType({}),
    }

class Options(SettingsType):
    def __init__(self, settings : SettingsType|Mapping[str, SettingType]|None = None, **kwargs : SettingType):
        """ Initialise the Options object with default options and any provided options. """
        super().__init__()
        self.update(default_settings())

        settings = SettingsType(settings)

        if settings:
            # Remove None values from options and merge with defaults
            filtered_settings = {k: deepcopy(v) for k, v in settings.items() if v is not None}
            self.update(filtered_settings)

        self.update(kwargs)

    @property
    def version(self) -> str:
        return self.get_str('version') or ''

    @property
    def source_locale(self) -> str:
        """ the canonical locale whose files define the content shape """
        return self.get_str('source_locale') or 'en'

    @property
    def locales(self) -> list[str]:
        """ target locales to generate, in the order requested """
        return self.get_str_list('locales')

    @locales.setter
    def locales(self, value : list[str]):
        self['locales'] = value

    @property
    def messages_root(self) -> str:
        return os.path.abspath(self.get_str('messages_root') or '.')

    @property
    def provider(self) -> str:
        """ the name of the translation provider """
        return self.get_str('provider') or 'passthrough'

    @provider.setter
    def provider(self, value : str):
        self['provider'] = value

    @property
    def cache_path(self) -> str:
        return os.path.abspath(self.get_str('cache_path') or os.path.join('.cache', 'i18n-cache.json'))

    @property
    def dry_run(self) -> bool:
        return self.get_bool('dry_run', False)

    @property
    def extension(self) -> str:
        return (self.get_str('extension') or 'ts').lstrip('.')

    @property
    def reserved_keys(self) -> set[str]:
        return set(self.get_str_list('reserved_keys'))

    @property
    def skip_directories(self) -> set[str]:
        return set(self.get_str_list('skip_directories'))

    @property
    def ui_language(self) -> str:
        """ language for the tool's own messages """
        return self.get_str('ui_language') or 'en'

    @property
    def provider_settings(self) -> dict[str, SettingType]:
        return self.get_dict('provider_settings')

    def GetProviderSettings(self, provider : str) -> SettingsType:
        """ Get a copy of the settings for a specific provider """
        if not provider:
            return SettingsType()

        settings = self.provider_settings.get(provider.lower())
        if not isinstance(settings, dict):
            return SettingsType()

        return SettingsType(deepcopy(settings))
