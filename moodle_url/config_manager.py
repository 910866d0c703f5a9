# ============================================================================
# moodle_url/config_manager.py
# ============================================================================
"""
Configuration management for the Moodle URL toolkit.
Defaults can be overridden through environment variables.
"""

import logging
import os
import re
from dataclasses import dataclass, field
from typing import List, Tuple

from .exceptions import ConfigurationError

STATIC_SITE_URL = 'https://jubileelife.edwantage.net/'

# Path suffixes commonly found in Moodle page URLs, tried in this order.
DEFAULT_MOODLE_PATH_SUFFIXES: Tuple[str, ...] = (
    r'/my/?',
    r'/\?redirect=0',
    r'/index\.php',
    r'/course/view\.php',
    r'/login/index\.php',
    r'/mod/page/view\.php',
)

ALLOWED_DEFAULT_SCHEMES = ('http', 'https')


@dataclass(frozen=True)
class LoggingConfiguration:
    """Logging configuration settings."""
    level: str = "INFO"
    format: str = '%(asctime)s %(levelname)s %(name)s: %(message)s'


@dataclass(frozen=True)
class UrlToolkitConfiguration:
    """Complete toolkit configuration."""
    default_scheme: str = 'https'
    well_known_urls: Tuple[str, ...] = (STATIC_SITE_URL,)
    moodle_path_suffixes: Tuple[str, ...] = DEFAULT_MOODLE_PATH_SUFFIXES
    vimeo_player_path: str = '/media/player/vimeo/wsplayer.php'
    logging: LoggingConfiguration = field(default_factory=LoggingConfiguration)

    def __post_init__(self):
        # Sequences are frozen to tuples so the configuration stays hashable.
        object.__setattr__(self, 'well_known_urls', tuple(self.well_known_urls))
        object.__setattr__(self, 'moodle_path_suffixes', tuple(self.moodle_path_suffixes))

    def validate(self) -> None:
        """Validate configuration values and raise ConfigurationError listing every problem."""
        errors: List[str] = []

        # Moodle is only served through http or https.
        if self.default_scheme not in ALLOWED_DEFAULT_SCHEMES:
            errors.append(f"default_scheme must be one of {ALLOWED_DEFAULT_SCHEMES}")

        for url in self.well_known_urls:
            if not isinstance(url, str) or '://' not in url:
                errors.append(f"well-known URL {url!r} must be an absolute URL")

        if not self.moodle_path_suffixes:
            errors.append("moodle_path_suffixes cannot be empty")
        for suffix in self.moodle_path_suffixes:
            try:
                re.compile(suffix)
            except (re.error, TypeError) as e:
                errors.append(f"invalid path suffix pattern {suffix!r}: {e}")

        if not self.vimeo_player_path.startswith('/'):
            errors.append("vimeo_player_path must start with '/'")

        if not isinstance(logging.getLevelName(self.logging.level), int):
            errors.append(f"unknown log level {self.logging.level!r}")

        if errors:
            raise ConfigurationError(
                f"Configuration validation failed: {'; '.join(errors)}",
                {"error_count": len(errors)}
            )


def get_config_from_env() -> UrlToolkitConfiguration:
    """Load configuration from environment variables."""

    logging_config = LoggingConfiguration(
        level=os.getenv("MOODLE_URL_LOG_LEVEL", "INFO").upper(),
    )

    extra_urls = tuple(
        url.strip() for url in os.getenv("MOODLE_URL_WELL_KNOWN_URLS", "").split(",")
        if url.strip()
    )

    config = UrlToolkitConfiguration(
        default_scheme=os.getenv("MOODLE_URL_DEFAULT_SCHEME", "https").lower(),
        well_known_urls=(STATIC_SITE_URL,) + tuple(u for u in extra_urls if u != STATIC_SITE_URL),
        vimeo_player_path=os.getenv("MOODLE_URL_VIMEO_PLAYER_PATH", "/media/player/vimeo/wsplayer.php"),
        logging=logging_config
    )

    config.validate()

    return config


def get_default_config() -> UrlToolkitConfiguration:
    """Get default configuration with factory defaults."""
    config = UrlToolkitConfiguration()
    config.validate()
    return config


DEFAULT_CONFIG = get_default_config()
