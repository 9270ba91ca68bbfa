import logging
from typing import Any

import httpx

from PyLocaleSync.Helpers.Localization import _
from PyLocaleSync.Helpers.Text import DecodeHtmlEntities
from PyLocaleSync.Options import env_float, env_str
from PyLocaleSync.SettingsType import SettingsType
from PyLocaleSync.SyncError import TranslationRequestError, TranslationResponseError
from PyLocaleSync.TranslationProvider import TranslationProvider

google_translate_url = "https://translation.googleapis.com/language/translate/v2"

class GoogleTranslateProvider(TranslationProvider):
    name = "google"

    def __init__(self, settings : SettingsType|None = None):
        settings = SettingsType(settings)
        super().__init__(self.name, SettingsType({
            'api_key': settings.get_str('api_key', env_str('GOOGLE_TRANSLATE_API_KEY', env_str('GOOGLE_API_KEY'))),
            'url': settings.get_str('url', env_str('GOOGLE_TRANSLATE_URL', google_translate_url)),
            'timeout': settings.get_float('timeout', env_float('GOOGLE_TRANSLATE_TIMEOUT', 60.0)),
        }))

        self.transport : httpx.BaseTransport|None = None

    @property
    def api_key(self) -> str|None:
        return self.settings.get_str('api_key')

    @property
    def url(self) -> str:
        return self.settings.get_str('url') or google_translate_url

    def ValidateSettings(self) -> bool:
        if not self.api_key:
            self.validation_message = _("Google Translate provider requires GOOGLE_TRANSLATE_API_KEY (or GOOGLE_API_KEY)")
            return False

        return True

    def TranslateBatch(self, texts : list[str], source_locale : str, target_locale : str) -> list[str]:
        if not texts:
            return []

        body = {
            'q': texts,
            'source': source_locale,
            'target': target_locale,
            'format': 'text',
        }

        logging.debug(f"Google request ({source_locale} -> {target_locale}): {texts}")

        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                response : httpx.Response = client.post(self.url, params={ 'key': self.api_key or '' }, json=body)

        except httpx.HTTPError as e:
            raise TranslationRequestError(_("Google Translate request failed"), error=e)

        if response.is_error:
            raise TranslationResponseError(_("Google Translate request failed"), response.status_code, response.reason_phrase, response.text)

        payload : Any = response.json()
        data = payload.get('data') if isinstance(payload, dict) else None
        translations = data.get('translations') if isinstance(data, dict) else None
        if not isinstance(translations, list):
            translations = []

        results : list[str] = []
        for index, text in enumerate(texts):
            item = translations[index] if index < len(translations) and isinstance(translations[index], dict) else {}
            translated = item.get('translatedText')
            results.append(DecodeHtmlEntities(translated) if isinstance(translated, str) and translated else text)

        return results
