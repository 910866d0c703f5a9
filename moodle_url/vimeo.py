# ============================================================================
# moodle_url/vimeo.py
# ============================================================================
"""
Vimeo player URL handling.

Vimeo embeds are played through the site's own wsplayer script so that
restricted videos work inside the app.
"""

import logging
import re
from typing import Optional, Protocol, runtime_checkable

from .config_manager import DEFAULT_CONFIG, UrlToolkitConfiguration
from .exceptions import guard_string_inputs
from .path import concatenate_paths

logger = logging.getLogger(__name__)

VIMEO_VIDEO_PATTERN = re.compile(r'https?://player\.vimeo\.com/video/[0-9]+')
VIMEO_PRIVACY_HASH_PATTERN = re.compile(r'https?://player\.vimeo\.com/video/([0-9]+)([?&]+h=([a-zA-Z0-9]*))?')
VIMEO_LEGACY_HASH_PATTERN = re.compile(r'https?://player\.vimeo\.com/video/([0-9]+)(/([a-zA-Z0-9]+))?')


@runtime_checkable
class SiteInterface(Protocol):
    """A connected site, as needed to build player URLs."""

    def get_url(self) -> str:
        """Return the site base URL."""
        ...

    def get_token(self) -> str:
        """Return the current session token."""
        ...


@guard_string_inputs("url", default=False)
def is_vimeo_video_url(url: str) -> bool:
    """Return whether the URL is a Vimeo player video URL."""
    return VIMEO_VIDEO_PATTERN.search(url) is not None


@guard_string_inputs("url", default=None)
def get_vimeo_player_url(url: str, site: SiteInterface, *,
                         config: Optional[UrlToolkitConfiguration] = None) -> Optional[str]:
    """
    Get the URL to use to play a Vimeo video.

    Args:
        url: URL to treat
        site: Site that contains the URL

    Returns:
        URL of the site's Vimeo player, None if url is not a Vimeo video
    """
    config = config or DEFAULT_CONFIG

    matches = VIMEO_PRIVACY_HASH_PATTERN.search(url)
    if not matches or not matches.group(1):
        return None

    video_id = matches.group(1)
    new_url = (
        concatenate_paths(site.get_url(), f'{config.vimeo_player_path}?video=')
        + video_id + '&token=' + site.get_token()
    )

    privacy_hash = matches.group(3)
    if not privacy_hash:
        # No privacy hash using the new format, check the legacy one.
        legacy_matches = VIMEO_LEGACY_HASH_PATTERN.search(url)
        privacy_hash = legacy_matches.group(3) if legacy_matches else None

    if privacy_hash:
        new_url += f'&h={privacy_hash}'
    else:
        logger.debug(f"No privacy hash found for Vimeo video {video_id}")

    return new_url
