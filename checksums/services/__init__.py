"""Service layer for configuration resolution, errors and file system access."""

from .config import ConfigurationService, build_parser, resolve
from .errors import (
    AppError,
    ConfigError,
    ErrorCategory,
    ErrorHandlingService,
    ErrorSeverity,
    FileSystemError,
    InvalidDirectory,
    MalformedDepth,
    UnsupportedAlgorithm,
    UserFriendlyError,
    get_error_service,
    handle_error,
)
from .filesystem import FileSystemService

__all__ = [
    "AppError",
    "ConfigError",
    "ConfigurationService",
    "ErrorCategory",
    "ErrorHandlingService",
    "ErrorSeverity",
    "FileSystemError",
    "FileSystemService",
    "InvalidDirectory",
    "MalformedDepth",
    "UnsupportedAlgorithm",
    "UserFriendlyError",
    "build_parser",
    "get_error_service",
    "handle_error",
    "resolve",
]
