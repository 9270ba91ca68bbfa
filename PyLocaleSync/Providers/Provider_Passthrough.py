from PyLocaleSync.SettingsType import SettingsType
from PyLocaleSync.TranslationProvider import TranslationProvider

class PassthroughProvider(TranslationProvider):
    """
    Returns the source text unchanged. Used when no translation service is configured.
    """
    name = "passthrough"

    def __init__(self, settings : SettingsType|None = None):
        super().__init__(self.name, SettingsType(settings))

    def TranslateBatch(self, texts : list[str], source_locale : str, target_locale : str) -> list[str]:
        return list(texts)
