"""Helper dir for homefs."""

from homefs.helper.exceptions import (
    BadRequest,
    ConfigurationError,
    HomeFSError,
    InternalError,
    NotFound,
)

__all__ = [
    "BadRequest",
    "ConfigurationError",
    "HomeFSError",
    "InternalError",
    "NotFound",
]
