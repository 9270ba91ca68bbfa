import hashlib
import json
import logging
import os

from PyLocaleSync.Helpers.Files import ReadTextFile, WriteTextFile
from PyLocaleSync.Helpers.Localization import _
from PyLocaleSync.SyncError import CacheParseError

def HashSourceText(locale : str, text : str) -> str:
    """
    Cache key for a source string in a target locale
    """
    return hashlib.sha1(f"{locale}::{text}".encode('utf-8')).hexdigest()

class TranslationCache:
    """
    Persistent store of translations, keyed by locale and a hash of the source text.

    Loaded once, mutated in memory and written back at most once per run, only if something changed.
    """
    def __init__(self, filepath : str):
        self.filepath : str = filepath
        self.data : dict[str, dict[str, str]] = {}
        self.dirty : bool = False

    @property
    def is_dirty(self) -> bool:
        return self.dirty

    @property
    def locales(self) -> list[str]:
        return sorted(self.data.keys())

    def Count(self, locale : str) -> int:
        return len(self.data.get(locale, {}))

    def Load(self):
        """
        Read the cache file. A missing file is an empty cache; a malformed one is fatal.
        """
        if not os.path.exists(self.filepath):
            logging.debug(f"No translation cache at {self.filepath}, starting empty")
            return

        try:
            parsed = json.loads(ReadTextFile(self.filepath))

        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise CacheParseError(_("Unable to read translation cache {}").format(self.filepath), path=self.filepath, error=e)

        if not isinstance(parsed, dict):
            raise CacheParseError(_("Translation cache {} is not a JSON object").format(self.filepath), path=self.filepath)

        for locale, entries in parsed.items():
            if not isinstance(entries, dict) or not all(isinstance(value, str) for value in entries.values()):
                raise CacheParseError(_("Translation cache {} has invalid entries for locale {}").format(self.filepath, locale), path=self.filepath)

            self.data[locale] = dict(entries)

        logging.debug(f"Loaded translation cache from {self.filepath} ({len(self.data)} locales)")

    def Get(self, locale : str, hash : str) -> str|None:
        return self.data.get(locale, {}).get(hash)

    def Set(self, locale : str, hash : str, translation : str) -> bool:
        """
        Store a translation. Returns True if the cache changed.
        """
        entries = self.data.setdefault(locale, {})
        if entries.get(hash) == translation:
            return False

        entries[hash] = translation
        self.dirty = True
        return True

    def Save(self) -> bool:
        """
        Write the cache if anything changed. Returns True if the file was written.
        """
        if not self.dirty:
            return False

        content = json.dumps(self.data, ensure_ascii=False, indent=2, sort_keys=True) + "\n"
        WriteTextFile(self.filepath, content)
        self.dirty = False

        logging.debug(f"Saved translation cache to {self.filepath}")
        return True
