class DisavowError(Exception):
    pass

class ConfigError(DisavowError):
    pass

class SourceError(DisavowError):
    """Reading an input or greenlist source failed."""
    pass

class SourceReadError(SourceError):
    pass

class SourceDecodeError(SourceError):
    """Source bytes are not valid UTF-8 under strict verification."""

    def __init__(self, name: str, reason: str = "") -> None:
        self.name = name
        self.reason = reason
        message = f"UTF-8 verification failed for {name}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)

class ExportError(DisavowError):
    """Writing the disavow document failed."""
    pass
