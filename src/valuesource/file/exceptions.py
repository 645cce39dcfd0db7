from __future__ import annotations


class FileSourceError(RuntimeError):
    """Base file source error."""


class RefreshFileSourceError(FileSourceError):
    """Raised when the backing file cannot be turned into a cached value."""


class RefreshIOError(RefreshFileSourceError):
    """Raised when reading the backing file fails."""

    def __init__(self, error: OSError | UnicodeDecodeError) -> None:
        super().__init__(f"error reading config from file: {error}")
        self.error = error


class RefreshParseError(RefreshFileSourceError):
    """Raised when the file contents do not parse into the target type."""

    def __init__(self, error: Exception) -> None:
        super().__init__(f"error parsing string value to type: {error!r}")
        self.error = error


class RefreshNoValueError(RefreshFileSourceError):
    """Raised when a required source's backing file does not exist."""

    def __init__(self) -> None:
        super().__init__("no value given/file found")


class ValueSourceError(FileSourceError):
    """Base error for value access."""


class NoValueError(ValueSourceError):
    """Raised when a required source has no cached value after refreshing."""

    def __init__(self) -> None:
        super().__init__("no value given for required config variable")


class ValueRefreshError(ValueSourceError):
    """Raised when value access fails because the refresh failed."""

    def __init__(self, refresh_error: RefreshFileSourceError) -> None:
        super().__init__(f"error refreshing values: {refresh_error}")
        self.refresh_error = refresh_error
