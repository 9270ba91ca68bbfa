import logging
import os

from PyLocaleSync.SyncError import NoSourceFilesError

default_skip_directories = frozenset({ 'types' })

def CollectSourceFiles(messages_root : str, source_locale : str, extension : str = 'ts', skip_directories : set[str]|frozenset[str] = default_skip_directories) -> list[str]:
    """
    Find every <source_locale>.<extension> file under the messages root, in sorted order.

    Directories named in skip_directories hold type declarations rather than content and are not searched.
    """
    filename = f"{source_locale}.{extension}"
    messages_root = os.path.abspath(messages_root)

    if not os.path.isdir(messages_root):
        raise NoSourceFilesError(messages_root, filename)

    results : list[str] = []
    for directory, subdirectories, files in os.walk(messages_root):
        subdirectories[:] = [ name for name in subdirectories if name not in skip_directories ]

        if filename in files:
            path = os.path.join(directory, filename)
            if os.path.isfile(path):
                results.append(path)

    if not results:
        raise NoSourceFilesError(messages_root, filename)

    results.sort()

    logging.debug(f"Found {len(results)} {filename} files under {messages_root}")
    return results

def GetTargetPath(source_path : str, locale : str, extension : str = 'ts') -> str:
    """
    The target locale file sits beside the source file: .../<namespace>/<locale>.<extension>
    """
    return os.path.join(os.path.dirname(source_path), f"{locale}.{extension}")
