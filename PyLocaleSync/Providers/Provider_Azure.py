import logging
from typing import Any

import httpx

from PyLocaleSync.Helpers.Localization import _
from PyLocaleSync.Options import env_float, env_str
from PyLocaleSync.SettingsType import SettingsType
from PyLocaleSync.SyncError import TranslationRequestError, TranslationResponseError
from PyLocaleSync.TranslationProvider import TranslationProvider

class AzureTranslatorProvider(TranslationProvider):
    name = "azure"

    def __init__(self, settings : SettingsType|None = None):
        settings = SettingsType(settings)
        super().__init__(self.name, SettingsType({
            'endpoint': settings.get_str('endpoint', env_str('AZURE_TRANSLATOR_ENDPOINT')),
            'api_key': settings.get_str('api_key', env_str('AZURE_TRANSLATOR_KEY')),
            'region': settings.get_str('region', env_str('AZURE_TRANSLATOR_REGION')),
            'timeout': settings.get_float('timeout', env_float('AZURE_TRANSLATOR_TIMEOUT', 60.0)),
        }))

        self.transport : httpx.BaseTransport|None = None

    @property
    def endpoint(self) -> str|None:
        endpoint = self.settings.get_str('endpoint')
        return endpoint.rstrip('/') if endpoint else None

    @property
    def api_key(self) -> str|None:
        return self.settings.get_str('api_key')

    @property
    def region(self) -> str|None:
        return self.settings.get_str('region')

    def ValidateSettings(self) -> bool:
        if not self.endpoint or not self.api_key:
            self.validation_message = _("Azure translator requires AZURE_TRANSLATOR_ENDPOINT and AZURE_TRANSLATOR_KEY")
            return False

        return True

    def TranslateBatch(self, texts : list[str], source_locale : str, target_locale : str) -> list[str]:
        if not texts:
            return []

        headers = {
            'Ocp-Apim-Subscription-Key': self.api_key or '',
            'Content-Type': 'application/json',
        }
        if self.region:
            headers['Ocp-Apim-Subscription-Region'] = self.region

        params = { 'api-version': '3.0', 'from': source_locale, 'to': target_locale }
        body = [ { 'text': text } for text in texts ]

        logging.debug(f"Azure request ({source_locale} -> {target_locale}): {body}")

        try:
            with httpx.Client(base_url=self.endpoint or '', timeout=self.timeout, transport=self.transport) as client:
                response : httpx.Response = client.post('/translate', params=params, headers=headers, json=body)

        except httpx.HTTPError as e:
            raise TranslationRequestError(_("Azure Translator request failed"), error=e)

        if response.is_error:
            raise TranslationResponseError(_("Azure Translator request failed"), response.status_code, response.reason_phrase, response.text)

        payload : Any = response.json()
        if not isinstance(payload, list):
            payload = []

        results : list[str] = []
        for index, text in enumerate(texts):
            item = payload[index] if index < len(payload) and isinstance(payload[index], dict) else {}
            translations = item.get('translations') or []
            translated = translations[0].get('text') if translations and isinstance(translations[0], dict) else None
            results.append(translated if isinstance(translated, str) else text)

        return results
