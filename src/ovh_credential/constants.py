from pathlib import Path
from types import MappingProxyType

# Configuration
DEFAULT_CONFIG_PATH = Path("Config.toml")
DEFAULT_SECTION = "default"
CREDENTIAL_FIELDS = ("application_key", "application_secret", "consumer_key")

# API
DEFAULT_HOST = "api.ovh.com"
ENDPOINTS = MappingProxyType(
    {
        # OVH
        "ovh-ca": "ca.api.ovh.com",
        "ovh-eu": "eu.api.ovh.com",
        "ovh-us": "us.api.ovh.com",
        # So you Start
        "soyoustart-ca": "ca.api.soyoustart.com",
        "soyoustart-eu": "eu.api.soyoustart.com",
        # Kimsufi
        "kimsufi-ca": "ca.api.kimsufi.com",
        "kimsufi-eu": "eu.api.kimsufi.com",
    }
)
