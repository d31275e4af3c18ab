from pathlib import Path


class CredentialError(Exception):
    """Base class for every failure while resolving a credential."""

    def __init__(self, message: str, path: Path | None = None):
        super().__init__(message)
        self.path = path


class ConfigReadError(CredentialError):
    """The config file could not be opened, read or decoded."""


class ConfigParseError(CredentialError):
    """The config file is not valid TOML."""


class MissingFieldError(CredentialError):
    """A required key is absent or not of the expected type."""

    def __init__(self, field: str, path: Path | None = None):
        where = f" in {path}" if path is not None else ""
        super().__init__(f"Missing or invalid field '{field}'{where}", path)
        self.field = field
