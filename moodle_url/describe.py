"""URL summary reports for the command line tool."""

import logging
from typing import Any, Dict, Optional

import tldextract  # type: ignore

from .config_manager import UrlToolkitConfiguration
from .parser import is_valid_moodle_url, parse
from .resolver import get_url_anchor, guess_moodle_domain
from .vimeo import is_vimeo_video_url

logger = logging.getLogger(__name__)

# Bundled public suffix snapshot only; never fetch the list over the network.
_tld_extractor = tldextract.TLDExtract(suffix_list_urls=None, cache_dir=None)


def _split_domain(domain: Optional[str]) -> Dict[str, Optional[str]]:
    if not domain:
        return {'subdomain': None, 'registered_domain': None, 'suffix': None}

    extracted = _tld_extractor(domain)
    registered = f"{extracted.domain}.{extracted.suffix}" if extracted.domain and extracted.suffix else None
    return {
        'subdomain': extracted.subdomain or None,
        'registered_domain': registered,
        'suffix': extracted.suffix or None,
    }


def describe_url(url: Any, *, config: Optional[UrlToolkitConfiguration] = None) -> Dict[str, Any]:
    """
    Build a JSON-ready summary of a URL.

    Args:
        url: URL to describe

    Returns:
        Dictionary with validity, parts, anchor, guessed site domain,
        Vimeo detection and the public-suffix breakdown of the domain
    """
    parts = parse(url, config=config)
    if parts is None:
        logger.debug(f"Cannot describe non-string value of type {type(url).__name__}")
        return {
            'url': None,
            'valid': False,
            'parts': None,
            'anchor': None,
            'guessed_domain': None,
            'is_vimeo': False,
            'subdomain': None,
            'registered_domain': None,
            'suffix': None,
        }

    report = {
        'url': url,
        'valid': is_valid_moodle_url(url, config=config),
        'parts': parts.to_dict(),
        'anchor': get_url_anchor(url),
        'guessed_domain': guess_moodle_domain(url, config=config),
        'is_vimeo': is_vimeo_video_url(url),
    }
    report.update(_split_domain(parts.domain))
    return report
