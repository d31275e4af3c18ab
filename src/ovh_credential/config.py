import logging
import tomllib
from os import PathLike
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict

from .constants import CREDENTIAL_FIELDS, DEFAULT_SECTION
from .endpoints import resolve
from .exceptions import ConfigParseError, ConfigReadError, MissingFieldError

logger = logging.getLogger(__name__)


class EndpointSection(BaseModel):
    """The `[<endpoint>]` table selected by `default.endpoint`."""

    model_config = ConfigDict(frozen=True)

    endpoint: str
    host: str
    values: dict[str, Any]


def read_toml(path: Path) -> dict[str, Any]:
    """Read and parse a whole TOML file."""
    logger.debug("Reading credentials from %s", path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigReadError(f"Cannot read config file {path}: {e}", path) from e

    try:
        return tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Cannot parse config file {path}: {e}", path) from e


def select_endpoint(config: dict[str, Any], path: Path | None = None) -> EndpointSection:
    default = config.get(DEFAULT_SECTION)
    endpoint = default.get("endpoint") if isinstance(default, dict) else None
    if not isinstance(endpoint, str):
        raise MissingFieldError(f"{DEFAULT_SECTION}.endpoint", path)

    host = resolve(endpoint)
    logger.debug("Endpoint %s resolved to %s", endpoint, host)

    # The section is named after the endpoint id, not the resolved host
    section = config.get(endpoint)
    if not isinstance(section, dict):
        raise MissingFieldError(endpoint, path)

    return EndpointSection(endpoint=endpoint, host=host, values=section)


def credential_fields(section: EndpointSection, path: Path | None = None) -> dict[str, str]:
    fields = {}
    for name in CREDENTIAL_FIELDS:
        value = section.values.get(name)
        if not isinstance(value, str):
            raise MissingFieldError(f"{section.endpoint}.{name}", path)
        fields[name] = value
    return fields


def load(path: str | PathLike[str]) -> tuple[EndpointSection, dict[str, str]]:
    """Load a config file and return its endpoint section and credential fields."""
    path = Path(path)
    section = select_endpoint(read_toml(path), path)
    return section, credential_fields(section, path)
