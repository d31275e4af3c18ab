from .constants import DEFAULT_CONFIG_PATH, DEFAULT_HOST
from .endpoints import resolve
from .exceptions import ConfigParseError, ConfigReadError, CredentialError, MissingFieldError
from .models.credential import Credential

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_HOST",
    "ConfigParseError",
    "ConfigReadError",
    "Credential",
    "CredentialError",
    "MissingFieldError",
    "resolve",
]
