"""Entry point functions for the locale-sync command line tool."""

import os
import sys
import logging

# Add the parent directory to the sys path so that modules can be found
base_path = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.append(base_path)


def locale_sync(argv : list[str]|None = None) -> int:
    """Entry point for locale-sync command."""
    from scripts.locale_sync_common import InitLogger, CreateArgParser, CreateOptions, CreateProvider, CreateCache
    from PyLocaleSync.Helpers.Localization import _, initialize_localization
    from PyLocaleSync.LocaleSync import LocaleSynchroniser
    from PyLocaleSync.Options import Options
    from PyLocaleSync.SyncError import NoTargetLocalesError, SyncConfigurationError, SyncError

    parser = CreateArgParser("Generate or update target locale message files from the source locale")
    try:
        args, unknown_args = parser.parse_known_args(argv)
    except SystemExit as e:
        # argparse exits with 2 for malformed arguments
        if e.code:
            return 1
        raise

    logger_options = InitLogger("locale-sync", args.debug)

    if unknown_args:
        logging.warning(_("Ignoring unrecognised arguments: {}").format(" ".join(unknown_args)))

    try:
        options : Options = CreateOptions(args)

        initialize_localization(options.ui_language)

        if not options.locales:
            raise NoTargetLocalesError()

        provider = CreateProvider(options)
        cache = CreateCache(options)

        synchroniser = LocaleSynchroniser(options, provider, cache)
        synchroniser.Run()

    except SyncConfigurationError as e:
        logging.error(str(e))
        return 1

    except SyncError as e:
        logging.error(f"Error: {e}")
        return 1

    except Exception as e:
        logging.exception(f"Unexpected error: {e}")
        return 1

    finally:
        if logger_options.file_handler:
            logging.getLogger('').removeHandler(logger_options.file_handler)
            logger_options.file_handler.close()

    return 0


if __name__ == "__main__":
    sys.exit(locale_sync())
