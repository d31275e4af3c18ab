import logging

from .constants import DEFAULT_HOST, ENDPOINTS

logger = logging.getLogger(__name__)


def resolve(endpoint: str) -> str:
    """Return the API host for an endpoint id, falling back to the generic host."""
    host = ENDPOINTS.get(endpoint)
    if host is None:
        logger.debug("Unknown endpoint %r, using %s", endpoint, DEFAULT_HOST)
        return DEFAULT_HOST
    return host


def is_known(endpoint: str) -> bool:
    return endpoint in ENDPOINTS


def known_endpoints() -> tuple[tuple[str, str], ...]:
    return tuple(ENDPOINTS.items())
