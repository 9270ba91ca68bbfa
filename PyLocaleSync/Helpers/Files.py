import os
import tempfile

default_encoding = os.getenv('DEFAULT_ENCODING', 'utf-8')

def ReadTextFile(path : str) -> str:
    with open(path, 'r', encoding=default_encoding, newline='') as file:
        return file.read()

def WriteTextFile(path : str, content : str):
    """
    Write a file via a temporary sibling and rename it into place, so a crash never leaves it truncated
    """
    directory = os.path.dirname(os.path.abspath(path))
    os.makedirs(directory, exist_ok=True)

    fd, temp_path = tempfile.mkstemp(prefix=f".{os.path.basename(path)}.", suffix=".tmp", dir=directory)
    try:
        with os.fdopen(fd, 'w', encoding=default_encoding, newline='') as file:
            file.write(content)
        os.replace(temp_path, path)

    except BaseException:
        if os.path.exists(temp_path):
            os.remove(temp_path)
        raise

def GetRelativePath(path : str, start : str|None = None) -> str:
    """
    Path relative to the working directory for display, or the absolute path if it is on another drive
    """
    try:
        return os.path.relpath(path, start or os.getcwd())
    except ValueError:
        return path
