"""
Shared fixtures for ovh_credential tests.
"""

import logging
from pathlib import Path

import pytest

SAMPLE_CONFIG = """\
[default]
endpoint = "ovh-eu"

[ovh-eu]
application_key = "ak"
application_secret = "as"
consumer_key = "ck"
"""


@pytest.fixture
def write_config(tmp_path):
    """Write TOML text to a file under tmp_path and return its path."""

    def _write(text: str, name: str = "Config.toml") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def config_file(write_config):
    """A well-formed config file for the ovh-eu endpoint."""
    return write_config(SAMPLE_CONFIG)


@pytest.fixture
def restore_logging():
    """Undo logger changes made by `--verbose` so later tests start quiet."""
    logger = logging.getLogger("ovh_credential")
    level = logger.level
    handlers = list(logger.handlers)
    yield logger
    logger.setLevel(level)
    logger.handlers[:] = handlers
