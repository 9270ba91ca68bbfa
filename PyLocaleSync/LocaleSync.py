import logging
import os
from dataclasses import dataclass, field
from enum import Enum

from PyLocaleSync.ContentMerger import MergeLocaleTrees, MergeStats, TranslationManager
from PyLocaleSync.ContentWalker import CollectSourceFiles, GetTargetPath
from PyLocaleSync.Helpers.Files import GetRelativePath, WriteTextFile
from PyLocaleSync.Helpers.Localization import _, get_locale_display_name
from PyLocaleSync.LocaleFileBuilder import BuildLocaleFile
from PyLocaleSync.MessageFile import LoadMessageFile
from PyLocaleSync.Options import Options
from PyLocaleSync.SyncError import NoTargetLocalesError
from PyLocaleSync.TranslationCache import TranslationCache
from PyLocaleSync.TranslationProvider import TranslationProvider

class FileAction(Enum):
    Unchanged = "unchanged"
    Created = "created"
    Updated = "updated"

@dataclass
class FileResult:
    path : str
    action : FileAction
    written : bool = False

    def __str__(self) -> str:
        path = GetRelativePath(self.path)
        if self.action == FileAction.Unchanged:
            return _("{} unchanged").format(path)
        if not self.written:
            return _("{} would be {} (dry run)").format(path, self.action.value)
        if self.action == FileAction.Created:
            return _("Created {}").format(path)
        return _("Updated {}").format(path)

@dataclass
class LocaleResult:
    locale : str
    stats : MergeStats = field(default_factory=MergeStats)
    files : list[FileResult] = field(default_factory=list)

class LocaleSynchroniser:
    """
    Generates or updates every target locale module from the source locale modules
    """
    def __init__(self, options : Options, provider : TranslationProvider, cache : TranslationCache):
        self.options : Options = options
        self.provider : TranslationProvider = provider
        self.cache : TranslationCache = cache

    @property
    def source_locale(self) -> str:
        return self.options.source_locale

    @property
    def dry_run(self) -> bool:
        return self.options.dry_run

    def Run(self) -> dict[str, LocaleResult]:
        """
        Process all locales sequentially then flush the cache once
        """
        locales = self.options.locales
        if not locales:
            raise NoTargetLocalesError()

        if self.source_locale in locales:
            logging.warning(_("Skipping locale \"{}\" because it is the source locale").format(self.source_locale))
            locales = [ locale for locale in locales if locale != self.source_locale ]
            if not locales:
                raise NoTargetLocalesError()

        source_files = CollectSourceFiles(self.options.messages_root, self.source_locale, self.options.extension, self.options.skip_directories)

        results : dict[str, LocaleResult] = {}
        for locale in locales:
            results[locale] = self.ProcessLocale(locale, source_files)

        if self.dry_run:
            logging.info(_("Dry run: translation cache not written"))
        elif self.cache.Save():
            logging.info(_("Saved translation cache to {}").format(GetRelativePath(self.cache.filepath)))

        return results

    def ProcessLocale(self, locale : str, source_files : list[str]) -> LocaleResult:
        result = LocaleResult(locale)

        logging.info("")
        logging.info(_("Processing locale \"{}\" ({}) using provider \"{}\"...").format(locale, get_locale_display_name(locale), self.provider.name))

        manager = TranslationManager(self.cache, self.provider, self.source_locale, result.stats, dry_run=self.dry_run)

        for source_path in source_files:
            file_result = self.ProcessFile(source_path, locale, manager)
            logging.info(f"  • {file_result}")
            result.files.append(file_result)

        logging.info(_("Locale {}: {}").format(locale, result.stats))
        return result

    def ProcessFile(self, source_path : str, locale : str, manager : TranslationManager) -> FileResult:
        """
        Merge one source module into its target locale module and write it if it changed
        """
        extension = self.options.extension
        target_path = GetTargetPath(source_path, locale, extension)
        target_exists = os.path.exists(target_path)

        source = LoadMessageFile(source_path)
        target = LoadMessageFile(target_path) if target_exists else None

        merged = MergeLocaleTrees(source.content, target.content if target else {}, locale, manager, reserved_keys=self.options.reserved_keys)

        generated = BuildLocaleFile(source.text, locale, self.source_locale, merged)

        if target and generated == target.text:
            return FileResult(target_path, FileAction.Unchanged)

        action = FileAction.Updated if target_exists else FileAction.Created

        if self.dry_run:
            return FileResult(target_path, action)

        WriteTextFile(target_path, generated)
        return FileResult(target_path, action, written=True)
