import os
import logging

from argparse import ArgumentParser, Namespace
from dataclasses import dataclass

from PyLocaleSync.Helpers.Resources import config_dir
from PyLocaleSync.Options import Options
from PyLocaleSync.TranslationCache import TranslationCache
from PyLocaleSync.TranslationProvider import TranslationProvider

@dataclass
class LoggerOptions():
    file_handler: logging.FileHandler|None
    log_path: str

def InitLogger(logfilename: str, debug: bool = False) -> LoggerOptions:
    """ Initialise the logger with a file handler and return the path to the log file """
    log_path = os.path.join(config_dir, f"{logfilename}.log")
    file_handler = None

    if debug:
        logging_level = logging.DEBUG
    else:
        level_name = os.getenv('LOG_LEVEL', 'INFO').upper()
        logging_level = getattr(logging, level_name, logging.INFO)

    logging.basicConfig(format='%(levelname)s: %(message)s', encoding='utf-8', level=logging_level)

    if debug:
        logging.debug("Debug logging enabled")

    # Create file handler with the same logging level
    try:
        os.makedirs(config_dir, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding='utf-8', mode='w')
        file_handler.setLevel(logging_level)
        file_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
        logging.getLogger('').addHandler(file_handler)
    except OSError as e:
        logging.warning(f"Unable to create log file at {log_path}: {e}")

    return LoggerOptions(file_handler=file_handler, log_path=log_path)

def CreateArgParser(description : str) -> ArgumentParser:
    """
    Create the argument parser for the locale sync command
    """
    parser = ArgumentParser(description=description)
    parser.add_argument('--locales', type=str, default=None, help="Comma-separated list of target locales (required), e.g. --locales=zh,fr")
    parser.add_argument('--source', type=str, default=None, help="Source locale to treat as canonical (default: en)")
    parser.add_argument('--messages-root', dest='messages_root', type=str, default=None, help="Root directory of message bundles (default: src/messages)")
    parser.add_argument('--provider', type=str, default=None, help="Translation provider (passthrough | azure | google) (default: passthrough)")
    parser.add_argument('--cache', type=str, default=None, help="Translation cache file (default: .cache/i18n-cache.json)")
    parser.add_argument('--dry-run', dest='dry_run', action='store_true', default=None, help="Do not write files; report planned changes")
    parser.add_argument('--debug', action='store_true', help="Run with DEBUG log level")
    return parser

def CreateOptions(args: Namespace, **kwargs) -> Options:
    """ Create options from the command line, falling back to environment defaults """
    options = {
        'locales': args.locales,
        'source_locale': args.source,
        'messages_root': args.messages_root,
        'provider': args.provider,
        'cache_path': args.cache,
        'dry_run': args.dry_run,
    }

    for key, value in kwargs.items():
        options[key] = value

    return Options(options)

def CreateProvider(options : Options) -> TranslationProvider:
    """
    Initialise the translation provider, substituting passthrough if it is not usable
    """
    translation_provider = TranslationProvider.get_provider(options)

    logging.info(f"Using translation provider {translation_provider.name}")
    return translation_provider

def CreateCache(options : Options) -> TranslationCache:
    """
    Load the translation cache named in the options
    """
    cache = TranslationCache(options.cache_path)
    cache.Load()
    return cache
