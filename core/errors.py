"""Exception types for tagwatch."""


class TagwatchError(Exception):
    """Base class for all tagwatch errors."""


class VersionParseError(TagwatchError, ValueError):
    """Raised when a string is not a valid semantic version."""


class ResolutionError(TagwatchError):
    """Raised when the latest upstream version cannot be determined."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class MalformedURLError(ResolutionError):
    """Raised when a source URL does not match its provider's shape."""


class NoValidVersionsError(ResolutionError):
    """Raised when a tag listing holds no semantic versions."""

    def __init__(self, message: str = "no valid versions found"):
        super().__init__(message)


class DeliveryError(TagwatchError):
    """Raised when a chunk could not be delivered to the sink."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class ConfigError(TagwatchError):
    """Raised for missing or invalid required configuration."""


class WorkspaceError(TagwatchError):
    """Raised when the local working copy cannot be prepared."""
