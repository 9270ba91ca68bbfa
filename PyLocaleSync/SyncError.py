from PyLocaleSync.Helpers.Localization import _

class SyncError(Exception):
    def __init__(self, message : str|None = None, error : Exception|None = None):
        super().__init__(message)
        self.error = error
        self.message = message

    def __str__(self) -> str:
        if self.message and self.error:
            return f"{self.message}: {self.error}"
        elif self.message:
            return self.message
        elif self.error:
            return str(self.error)
        return super().__str__()

class SyncConfigurationError(SyncError):
    """ The run cannot start with the settings provided """
    pass

class NoTargetLocalesError(SyncConfigurationError):
    def __init__(self):
        super().__init__(_("No target locales provided. Use --locales=zh,fr,..."))

class NoSourceFilesError(SyncConfigurationError):
    def __init__(self, messages_root : str, filename : str):
        super().__init__(_("No {} files found under {}").format(filename, messages_root))
        self.messages_root = messages_root
        self.filename = filename

class ContentParseError(SyncError):
    """Error raised when a message file cannot be read or parsed."""
    def __init__(self, message : str, path : str|None = None, error : Exception|None = None):
        super().__init__(message, error)
        self.path = path

class CacheParseError(SyncError):
    """Error raised when the translation cache file is corrupt."""
    def __init__(self, message : str, path : str|None = None, error : Exception|None = None):
        super().__init__(message, error)
        self.path = path

class TranslationError(SyncError):
    def __init__(self, message : str, error : Exception|None = None):
        super().__init__(message, error)

class TranslationRequestError(TranslationError):
    """ The request never produced a response """
    def __init__(self, message : str, error : Exception|None = None):
        super().__init__(message, error)

class TranslationResponseError(TranslationError):
    def __init__(self, message : str, status_code : int, reason : str, body : str):
        super().__init__(f"{message}: {status_code} {reason} - {body}")
        self.status_code = status_code
        self.reason = reason
        self.body = body
