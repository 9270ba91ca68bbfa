from PyLocaleSync.SettingsType import SettingsType
from PyLocaleSync.SyncError import TranslationRequestError
from PyLocaleSync.TranslationProvider import TranslationProvider

class RecordingProvider(TranslationProvider):
    """
    Test provider that records each request and tags the text with the target locale
    """
    name = "test-recording"

    def __init__(self, settings : SettingsType|None = None):
        super().__init__(self.name, SettingsType(settings))
        self.requests : list[tuple[list[str], str, str]] = []

    @property
    def requested_texts(self) -> list[str]:
        return [ text for texts, _, _ in self.requests for text in texts ]

    def TranslateBatch(self, texts : list[str], source_locale : str, target_locale : str) -> list[str]:
        self.requests.append((list(texts), source_locale, target_locale))
        return [ f"<{target_locale}>{text}" for text in texts ]

class FailingProvider(TranslationProvider):
    """
    Test provider whose every request fails
    """
    name = "test-failing"

    def __init__(self, settings : SettingsType|None = None):
        super().__init__(self.name, SettingsType(settings))
        self.attempts : int = 0

    def TranslateBatch(self, texts : list[str], source_locale : str, target_locale : str) -> list[str]:
        self.attempts += 1
        raise TranslationRequestError("Service unavailable")

class EmptyResultProvider(TranslationProvider):
    """
    Test provider that returns nothing usable
    """
    name = "test-empty"

    def __init__(self, settings : SettingsType|None = None):
        super().__init__(self.name, SettingsType(settings))

    def TranslateBatch(self, texts : list[str], source_locale : str, target_locale : str) -> list[str]:
        return []
