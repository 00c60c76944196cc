"""homefs Errors"""


class HomeFSError(Exception):
    """Base homefs exception."""


class ConfigurationError(HomeFSError):
    """Root directory or configuration file cannot be used."""


class BadRequest(HomeFSError):
    """Request path does not resolve or escapes the root directory."""


class NotFound(HomeFSError):
    """Resolved target is not the kind of entry the operation expects."""


class InternalError(HomeFSError):
    """Filesystem failure unrelated to the caller's input."""
