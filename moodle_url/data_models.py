"""
Data models for the Moodle URL toolkit.
"""

from dataclasses import dataclass, fields, replace
from typing import Dict, Optional


@dataclass(frozen=True)
class UrlParts:
    """Parts contained within a URL. ``None`` means the part is not present."""
    protocol: Optional[str] = None
    domain: Optional[str] = None
    port: Optional[str] = None
    credentials: Optional[str] = None  # raw "user:pass" before '@'
    username: Optional[str] = None
    password: Optional[str] = None
    path: Optional[str] = None
    query: Optional[str] = None  # without leading '?'
    fragment: Optional[str] = None  # without leading '#'

    def to_dict(self) -> Dict[str, Optional[str]]:
        """Convert to dictionary for JSON serialization."""
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def lowered(self) -> "UrlParts":
        """Return a copy with every present part lower-cased."""
        return replace(self, **{
            name: value.lower()
            for name, value in self.to_dict().items()
            if value is not None
        })
