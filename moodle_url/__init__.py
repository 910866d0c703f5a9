"""
Moodle URL toolkit

Helpers to parse, compare and rewrite the URLs of Moodle sites: absolute and
relative conversion, site domain guessing, anchors and Vimeo player links.
"""

from .config_manager import (
    DEFAULT_CONFIG,
    UrlToolkitConfiguration,
    get_config_from_env,
    get_default_config,
)
from .data_models import UrlParts
from .exceptions import ConfigurationError, InvalidUrlError, MoodleUrlError
from .parser import assemble, get_valid_moodle_url_pattern, is_valid_moodle_url, parse, parse_valid_url
from .path import concatenate_paths
from .resolver import (
    get_url_anchor,
    guess_moodle_domain,
    remove_protocol,
    remove_url_anchor,
    same_domain_and_path,
    to_absolute_url,
    to_relative_url,
)
from .text import remove_ending_slash, remove_starting_slash
from .vimeo import SiteInterface, get_vimeo_player_url, is_vimeo_video_url

__version__ = "1.0.0"

__all__ = [
    "UrlParts",
    "parse",
    "parse_valid_url",
    "assemble",
    "get_valid_moodle_url_pattern",
    "is_valid_moodle_url",
    "guess_moodle_domain",
    "remove_protocol",
    "same_domain_and_path",
    "get_url_anchor",
    "remove_url_anchor",
    "to_absolute_url",
    "to_relative_url",
    "is_vimeo_video_url",
    "get_vimeo_player_url",
    "SiteInterface",
    "concatenate_paths",
    "remove_ending_slash",
    "remove_starting_slash",
    "UrlToolkitConfiguration",
    "DEFAULT_CONFIG",
    "get_default_config",
    "get_config_from_env",
    "MoodleUrlError",
    "InvalidUrlError",
    "ConfigurationError",
]
