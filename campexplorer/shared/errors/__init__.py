from .base import (
    AppError,
    AuthenticationRequiredError,
    ConfigurationError,
    DomainError,
    InfrastructureError,
    StorageError,
    ValidationError,
)
from .http import handle_app_error, register_error_handler

__all__ = [
    "AppError",
    "AuthenticationRequiredError",
    "ConfigurationError",
    "DomainError",
    "InfrastructureError",
    "StorageError",
    "ValidationError",
    "handle_app_error",
    "register_error_handler",
]
