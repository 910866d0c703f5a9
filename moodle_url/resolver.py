# ============================================================================
# moodle_url/resolver.py
# ============================================================================
"""
Helpers to compare URLs and convert them between absolute and relative forms.
"""

import logging
import re
from typing import Optional

from .config_manager import DEFAULT_CONFIG, UrlToolkitConfiguration
from .data_models import UrlParts
from .exceptions import guard_string_inputs
from .parser import assemble, get_well_known_parts, is_well_known_url, parse
from .path import concatenate_paths
from .text import remove_ending_slash, remove_starting_slash

logger = logging.getLogger(__name__)

HTTP_PREFIX_PATTERN = re.compile(r'^https?://')
PROTOCOL_PATTERN = re.compile(r'^[a-zA-Z]+://', re.IGNORECASE)
SCHEME_DELIMITER_PATTERN = re.compile(r'^[^/:.?]*://')


@guard_string_inputs("url", default=None)
def guess_moodle_domain(url: str, *, config: Optional[UrlToolkitConfiguration] = None) -> Optional[str]:
    """
    Guess the Moodle domain from a site URL.

    The URL is matched against common Moodle page suffixes; whatever comes
    before the first suffix found is the guessed domain (it can include a
    path, e.g. "example.com/moodle"). If no suffix matches, the parsed domain
    is returned.

    Args:
        url: Site URL

    Returns:
        Guessed domain, None if it can't be guessed
    """
    config = config or DEFAULT_CONFIG

    well_known = get_well_known_parts(url, config=config)
    if well_known is not None:
        return well_known.domain

    # Moodle can only be served through http or https.
    if not HTTP_PREFIX_PATTERN.match(url):
        url = f'{config.default_scheme}://{url}'

    suffixes = '|'.join(config.moodle_path_suffixes)
    match = re.match(f'^https?://(.*?)({suffixes})', url)
    if match:
        return match.group(1)

    parts = parse(url, config=config)

    return parts.domain if parts and parts.domain else None


@guard_string_inputs("url", default='')
def remove_protocol(url: str) -> str:
    """Remove the protocol from a URL, e.g. "https://example.com" becomes "example.com"."""
    return PROTOCOL_PATTERN.sub('', url, count=1)


@guard_string_inputs("url_a", "url_b", default=False)
def same_domain_and_path(url_a: str, url_b: str, *,
                         config: Optional[UrlToolkitConfiguration] = None) -> bool:
    """
    Check if two URLs have the same domain and path.

    Protocol, port, credentials, query, fragment, case and a trailing slash
    in the path are ignored.
    """
    if is_well_known_url(url_a, config=config) or is_well_known_url(url_b, config=config):
        return url_a == url_b

    # parse() needs the protocol to tell the domain apart from the path.
    if not SCHEME_DELIMITER_PATTERN.match(url_a):
        url_a = f'https://{url_a}'
    if not SCHEME_DELIMITER_PATTERN.match(url_b):
        url_b = f'https://{url_b}'

    parts_a = parse(url_a, config=config) or UrlParts()
    parts_b = parse(url_b, config=config) or UrlParts()
    parts_a = parts_a.lowered()
    parts_b = parts_b.lowered()

    return (parts_a.domain == parts_b.domain
            and remove_ending_slash(parts_a.path) == remove_ending_slash(parts_b.path))


@guard_string_inputs("url", default=None)
def get_url_anchor(url: str) -> Optional[str]:
    """
    Get the anchor of a URL. If there's more than one they are all returned,
    e.g. "myurl.com#foo=1#bar=2" gives "#foo=1#bar=2".
    """
    first_anchor_index = url.find('#')
    if first_anchor_index == -1:
        return None

    return url[first_anchor_index:]


@guard_string_inputs("url", default='')
def remove_url_anchor(url: str) -> str:
    return url.split('#', 1)[0]


def _directory(path: Optional[str]) -> Optional[str]:
    # "/course/view.php" -> "/course/"
    if not path:
        return path
    return path[:path.rfind('/') + 1] or None


@guard_string_inputs("parent_url", "url", default='')
def to_absolute_url(parent_url: str, url: str, *,
                    config: Optional[UrlToolkitConfiguration] = None) -> str:
    """
    Convert a URL to an absolute URL, if it isn't already.

    Args:
        parent_url: URL of the page containing ``url``
        url: URL to convert

    Returns:
        Absolute URL
    """
    config = config or DEFAULT_CONFIG

    if is_well_known_url(url, config=config):
        return url

    parsed_url = parse(url, config=config)
    if parsed_url and parsed_url.protocol:
        return url

    parsed_parent = parse(parent_url, config=config) or UrlParts()
    protocol = parsed_parent.protocol or config.default_scheme

    if url.startswith('//'):
        # It only lacks the protocol.
        return f'{protocol}:{url}'

    # Root-relative URLs go after the domain, the rest after the parent's directory.
    base_url = assemble(UrlParts(
        protocol=protocol,
        domain=parsed_parent.domain,
        port=parsed_parent.port,
        credentials=parsed_parent.credentials,
        path=None if url.startswith('/') else _directory(parsed_parent.path),
    ))

    return concatenate_paths(base_url, url)


@guard_string_inputs("parent_url", "url", default='')
def to_relative_url(parent_url: str, url: str, *,
                    config: Optional[UrlToolkitConfiguration] = None) -> str:
    """
    Convert a URL to a URL relative to ``parent_url``, if it isn't already.

    This is a plain text replacement of the first occurrence of the parent
    (without protocol), so a parent appearing elsewhere in the URL, e.g. in a
    query parameter, is removed from there too.
    """
    parent_url = remove_protocol(parent_url)

    well_known = get_well_known_parts(url, config=config)
    if well_known is not None:
        return well_known.path or '/'

    url_without_protocol = remove_protocol(url)
    if parent_url not in url_without_protocol:
        return url

    return remove_starting_slash(url_without_protocol.replace(parent_url, '', 1))
