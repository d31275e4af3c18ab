from collections.abc import Mapping
from os import PathLike
from pathlib import Path
from types import MappingProxyType
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator, model_validator

from ..config import load
from ..constants import DEFAULT_CONFIG_PATH
from ..endpoints import resolve


def mask(value: str) -> str:
    """Mask a secret for display, keeping a short prefix and suffix."""
    if not value:
        return value
    return f"{value[:8]}...{value[-4:]}" if len(value) > 12 else "****"


def freeze(value: Any) -> Any:
    """Return a read-only copy of parsed TOML: tables become mapping proxies, arrays tuples."""
    if isinstance(value, Mapping):
        return MappingProxyType({key: freeze(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(freeze(item) for item in value)
    return value


def thaw(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {key: thaw(item) for key, item in value.items()}
    if isinstance(value, tuple):
        return [thaw(item) for item in value]
    return value


class Credential(BaseModel):
    """OVH API credentials: application key and secret plus a consumer key.

    The consumer key is a user-scoped token granting access to the API on
    behalf of an account. It is empty until one has been requested.
    """

    model_config = ConfigDict(frozen=True)

    host: str = Field(min_length=1)
    application_key: str
    application_secret: str = Field(repr=False)
    consumer_key: str = Field(default="", repr=False)
    source_path: Path | None = None
    raw_config: Mapping[str, Any] | None = Field(default=None, repr=False)

    @field_validator("raw_config")
    @classmethod
    def freeze_raw_config(cls, value: Mapping[str, Any] | None) -> Mapping[str, Any] | None:
        return freeze(value) if value is not None else None

    @field_serializer("raw_config")
    def serialize_raw_config(self, value: Mapping[str, Any] | None) -> dict[str, Any] | None:
        return thaw(value) if value is not None else None

    @model_validator(mode="after")
    def check_source(self) -> Self:
        if (self.source_path is None) != (self.raw_config is None):
            raise ValueError("source_path and raw_config must be set together")
        return self

    def __hash__(self) -> int:
        # Excludes raw_config, which is unhashable
        return hash(
            (self.host, self.application_key, self.application_secret, self.consumer_key, self.source_path)
        )

    @property
    def is_file_backed(self) -> bool:
        return self.source_path is not None

    def masked(self) -> dict[str, str | None]:
        return {
            "host": self.host,
            "application_key": self.application_key,
            "application_secret": mask(self.application_secret),
            "consumer_key": mask(self.consumer_key),
            "source_path": str(self.source_path) if self.source_path is not None else None,
        }

    @classmethod
    def from_default_file(cls) -> Self:
        """Load credentials from `Config.toml` in the working directory."""
        return cls.from_file(DEFAULT_CONFIG_PATH)

    @classmethod
    def from_file(cls, path: str | PathLike[str]) -> Self:
        """Load credentials from a TOML file.

        The `[default]` table names the endpoint, and the table of the same
        name holds `application_key`, `application_secret` and `consumer_key`.

        Raises:
            ConfigReadError: the file cannot be read.
            ConfigParseError: the file is not valid TOML.
            MissingFieldError: a required key is absent or not a string.
        """
        section, fields = load(path)
        return cls(
            host=section.host,
            source_path=Path(path),
            raw_config=section.values,
            **fields,
        )

    @classmethod
    def from_application(cls, endpoint: str, application_key: str, application_secret: str) -> Self:
        """Build credentials for an application that has no consumer key yet."""
        return cls(
            host=resolve(endpoint),
            application_key=application_key,
            application_secret=application_secret,
        )

    @classmethod
    def from_credential(
        cls,
        endpoint: str,
        application_key: str,
        application_secret: str,
        consumer_key: str,
    ) -> Self:
        return cls(
            host=resolve(endpoint),
            application_key=application_key,
            application_secret=application_secret,
            consumer_key=consumer_key,
        )
