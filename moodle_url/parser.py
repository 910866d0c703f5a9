# ============================================================================
# moodle_url/parser.py
# ============================================================================
"""
URL parsing, assembling and validation.

Parsing uses the regular expression from RFC 3986, Appendix B:
https://tools.ietf.org/html/rfc3986#appendix-B
"""

import functools
import logging
import re
from typing import Dict, Optional, Tuple

from .config_manager import DEFAULT_CONFIG, STATIC_SITE_URL, UrlToolkitConfiguration
from .data_models import UrlParts
from .exceptions import InvalidUrlError, guard_string_inputs

logger = logging.getLogger(__name__)

URL_PATTERN = re.compile(r'^(([^:/?#]+):)?(//([^/?#]*))?([^?#]*)(\?([^#]*))?(#(.*))?')

# Same as URL_PATTERN but spaces are not admitted before the query.
VALID_MOODLE_URL_PATTERN = re.compile(r'(([^:/?# ]+):)?(//([^/?# ]*))?([^?# ]*)(\?([^#]*))?(#(.*))?')

# Pre-decomposed sites that skip the regular expression.
BUILTIN_WELL_KNOWN_PARTS: Dict[str, UrlParts] = {
    STATIC_SITE_URL: UrlParts(
        protocol='https',
        domain='jubileelife.edwantage.net',
        path='/',
    ),
}


def _split_url(url: str) -> UrlParts:
    match = URL_PATTERN.match(url.strip())

    host = match.group(4) or ''

    # Credentials are everything before the last '@', the port comes after the last ':'.
    credentials, _, domain_and_port = host.rpartition('@')
    domain, separator, port = domain_and_port.rpartition(':')
    if not separator:
        domain, port = domain_and_port, ''
    username, _, password = credentials.partition(':')

    return UrlParts(
        protocol=match.group(2) or None,
        domain=domain or None,
        port=port or None,
        credentials=credentials or None,
        username=username or None,
        password=password or None,
        path=match.group(5) or None,
        query=match.group(7) or None,
        fragment=match.group(9) or None,
    )


@functools.lru_cache(maxsize=None)
def _build_well_known_table(urls: Tuple[str, ...]) -> Dict[str, UrlParts]:
    table = {}
    for url in urls:
        table[url] = BUILTIN_WELL_KNOWN_PARTS.get(url) or _split_url(url)
    logger.debug(f"Built well-known URL table with {len(table)} entries")
    return table


def get_well_known_parts(url: str, *, config: Optional[UrlToolkitConfiguration] = None) -> Optional[UrlParts]:
    """Return the pre-built parts if ``url`` is exactly a well-known site URL."""
    config = config or DEFAULT_CONFIG
    return _build_well_known_table(config.well_known_urls).get(url)


def is_well_known_url(url: str, *, config: Optional[UrlToolkitConfiguration] = None) -> bool:
    return get_well_known_parts(url, config=config) is not None


@guard_string_inputs("url", default=None)
def parse(url: str, *, config: Optional[UrlToolkitConfiguration] = None) -> Optional[UrlParts]:
    """
    Parse the parts of a URL.

    Args:
        url: URL to parse

    Returns:
        UrlParts, or None if url is not a string
    """
    well_known = get_well_known_parts(url, config=config)
    if well_known is not None:
        logger.debug(f"Using pre-built parts for well-known URL {url}")
        return well_known

    return _split_url(url)


def parse_valid_url(url: str, *, config: Optional[UrlToolkitConfiguration] = None) -> UrlParts:
    """
    Parse a URL, raising if it is not valid for connecting to a site.

    Raises:
        InvalidUrlError: If url is not a string or fails is_valid_moodle_url
    """
    if not isinstance(url, str):
        raise InvalidUrlError(url, "not a string", {"received_type": type(url).__name__})

    if not is_valid_moodle_url(url, config=config):
        raise InvalidUrlError(url, "spaces or malformed scheme, authority or path")

    return parse(url, config=config)


def assemble(parts: UrlParts) -> str:
    """Given some parts of a URL, return the URL as a string."""
    return ''.join([
        f'{parts.protocol}://' if parts.protocol else '',
        f'{parts.credentials}@' if parts.credentials else '',
        parts.domain or '',
        f':{parts.port}' if parts.port else '',
        parts.path or '',
        f'?{parts.query}' if parts.query else '',
        f'#{parts.fragment}' if parts.fragment else '',
    ])


def get_valid_moodle_url_pattern() -> re.Pattern:
    """Return the pattern used to check whether a URL is a valid site URL."""
    return VALID_MOODLE_URL_PATTERN


@guard_string_inputs("url", default=False)
def is_valid_moodle_url(url: str, *, config: Optional[UrlToolkitConfiguration] = None) -> bool:
    """Check if the given URL is valid for the app to connect."""
    if is_well_known_url(url, config=config):
        return True

    return get_valid_moodle_url_pattern().fullmatch(url.strip()) is not None
