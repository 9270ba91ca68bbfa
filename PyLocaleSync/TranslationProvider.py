import importlib
import logging
import pkgutil
from typing import cast

from PyLocaleSync.Helpers.Localization import _
from PyLocaleSync.Options import Options
from PyLocaleSync.SettingsType import SettingsType

passthrough_provider_name = "passthrough"

class TranslationProvider:
    """
    Base class for translation service providers.
    """
    name : str = ""
    _providers_imported : bool = False

    def __init__(self, name : str, settings : SettingsType):
        self.name : str = name
        self.settings : SettingsType = SettingsType(settings)
        self.validation_message : str|None = None

    @property
    def timeout(self) -> float:
        """
        Seconds to wait for a response from the service
        """
        return self.settings.get_float('timeout') or 60.0

    def ValidateSettings(self) -> bool:
        """
        Validate the settings for the provider
        """
        return True

    def TranslateBatch(self, texts : list[str], source_locale : str, target_locale : str) -> list[str]:
        """
        Translate a list of strings, returning a list of the same length in the same order
        """
        raise NotImplementedError

    @classmethod
    def get_providers(cls) -> dict:
        """
        Return a dictionary of all available providers
        """
        if not TranslationProvider._providers_imported:
            try:
                cls.import_providers(f"{__package__}.Providers")
                TranslationProvider._providers_imported = True

            except Exception as e:
                logging.error(f"Error importing providers: {str(e)}")

        providers = { cast(TranslationProvider, provider).name : provider for provider in cls.__subclasses__() }

        return providers

    @classmethod
    def get_provider(cls, options : Options):
        """
        Create the provider selected in the options.

        An unknown name or missing credentials is not fatal: a warning is logged and the passthrough provider is used instead.
        """
        if not isinstance(options, Options):
            raise ValueError("Options object required")

        try:
            provider : TranslationProvider = cls.create_provider(options.provider, options.GetProviderSettings(options.provider))

        except ValueError:
            logging.warning(_("Unknown provider \"{}\". Falling back to passthrough.").format(options.provider))
            return cls.create_provider(passthrough_provider_name)

        if not provider.ValidateSettings():
            logging.warning(_("{}. Falling back to passthrough provider.").format(provider.validation_message))
            return cls.create_provider(passthrough_provider_name)

        return provider

    @classmethod
    def create_provider(cls, name : str, provider_settings : SettingsType|None = None):
        """
        Create a new instance of the provider with the given name
        """
        normalized = (name or '').strip().lower()
        for provider_name, provider in cls.get_providers().items():
            if provider_name == normalized:
                return provider(SettingsType(provider_settings))

        raise ValueError(_("Unknown translation provider: {}").format(name))

    @classmethod
    def import_providers(cls, package_name):
        """
        Dynamically import all modules in the providers package.
        """
        package = importlib.import_module(package_name)
        for loader, module_name, is_pkg in pkgutil.iter_modules(package.__path__, package.__name__ + '.'): # type: ignore[ignore-unused]
            logging.debug(f"Importing provider: {module_name}")
            importlib.import_module(module_name)
