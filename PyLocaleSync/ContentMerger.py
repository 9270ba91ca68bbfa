import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from PyLocaleSync.Helpers.Localization import _
from PyLocaleSync.TranslationCache import HashSourceText, TranslationCache
from PyLocaleSync.TranslationProvider import TranslationProvider

default_reserved_keys = frozenset({ 'tone' })

@dataclass
class MergeStats:
    """
    Counts for a single target locale, reported when the locale is complete
    """
    strings_processed : int = 0
    reused_from_cache : int = 0
    reused_existing : int = 0
    translated : int = 0

    def __str__(self) -> str:
        return _("{processed} strings processed (translated: {translated}, cache: {cache}, reused existing: {existing})").format(
            processed=self.strings_processed,
            translated=self.translated,
            cache=self.reused_from_cache,
            existing=self.reused_existing
        )

class TranslationManager:
    """
    Resolves the translation of a single source string, consulting the cache, any existing translation and the provider
    """
    def __init__(self, cache : TranslationCache, provider : TranslationProvider, source_locale : str, stats : MergeStats, dry_run : bool = False):
        self.cache : TranslationCache = cache
        self.provider : TranslationProvider = provider
        self.source_locale : str = source_locale
        self.stats : MergeStats = stats
        self.dry_run : bool = dry_run
        self.failed_locales : set[str] = set()

    def GetTranslation(self, locale : str, source : str, existing : str|None = None) -> str:
        self.stats.strings_processed += 1

        hash = HashSourceText(locale, source)
        cached = self.cache.Get(locale, hash)
        if cached is not None:
            self.stats.reused_from_cache += 1
            return cached

        if existing and existing.strip():
            self.cache.Set(locale, hash, existing)
            self.stats.reused_existing += 1
            return existing

        if self.dry_run:
            placeholder = f"[{locale}] {source}"
            self.cache.Set(locale, hash, placeholder)
            self.stats.translated += 1
            return placeholder

        try:
            translations = self.provider.TranslateBatch([source], self.source_locale, locale)

        except Exception as e:
            if locale not in self.failed_locales:
                self.failed_locales.add(locale)
                logging.warning(_("Translation request failed for locale \"{}\". Falling back to source strings: {}").format(locale, e))

            # The fallback is cached too, so the same string is not retried in this run
            self.cache.Set(locale, hash, source)
            return source

        translated = translations[0] if translations and isinstance(translations[0], str) else None
        final_text = translated if translated is not None else source

        self.cache.Set(locale, hash, final_text)
        self.stats.translated += 1
        return final_text

def MergeLocaleTrees(source : Any, target : Any, locale : str, manager : TranslationManager, path : Sequence[str] = (), reserved_keys : set[str]|frozenset[str] = default_reserved_keys) -> Any:
    """
    Merge a source content tree with the existing target tree for a locale.

    The result always has the shape of the source: mapping keys and list lengths come from the source,
    the target only supplies values to reuse. Strings under a reserved key are copied rather than translated.
    """
    if isinstance(source, str):
        current_key = path[-1] if path else None
        if current_key in reserved_keys:
            return target if isinstance(target, str) else source

        existing = target if isinstance(target, str) else None
        return manager.GetTranslation(locale, source, existing)

    if isinstance(source, list):
        target_list = target if isinstance(target, list) else []
        results = []
        for index, item in enumerate(source):
            target_item = target_list[index] if index < len(target_list) else None
            results.append(MergeLocaleTrees(item, target_item, locale, manager, (*path, str(index)), reserved_keys))
        return results

    if isinstance(source, dict):
        target_dict = target if isinstance(target, dict) else {}
        result = {}
        for key, value in source.items():
            result[key] = MergeLocaleTrees(value, target_dict.get(key), locale, manager, (*path, key), reserved_keys)
        return result

    return source
