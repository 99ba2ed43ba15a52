from __future__ import annotations


class HdrCompleteError(Exception):
    """Base class for every error raised by hdrcomplete."""


class ConfigurationError(HdrCompleteError):
    """A path source could not be turned into a list of directories."""


class UnsupportedModeError(ConfigurationError):
    def __init__(self, mode: str, supported) -> None:
        self.mode = mode
        self.supported = sorted(supported)
        super().__init__(f"Major mode {mode!r} not supported (known: {', '.join(self.supported)})")


class ScanError(HdrCompleteError):
    """A directory could not be listed; carries the directory and the cause."""

    def __init__(self, directory: str, cause: OSError) -> None:
        self.directory = directory
        self.cause = cause
        super().__init__(f"cannot scan {directory}: {cause}")
