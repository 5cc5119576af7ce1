"""
Recent file entry model.

Contains:
- format_timestamp / parse_timestamp: ISO 8601 UTC encoding for modified_at
- RecentFile: one tracked file reference
"""

import os
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from recent_registry.config import UNKNOWN_IDENTIFIER

# Fractional seconds longer than microseconds (e.g. nanosecond writers)
_EXCESS_FRACTION = re.compile(r"(\.\d{6})\d+")


def format_timestamp(dt: datetime) -> str:
    """Format datetime as ISO 8601 UTC with microseconds and Z suffix."""
    # Format: 2025-01-23T12:34:56.789123Z
    return dt.astimezone(timezone.utc).strftime('%Y-%m-%dT%H:%M:%S.%fZ')


def parse_timestamp(ts: str) -> datetime:
    """
    Parse an ISO 8601 timestamp to an aware UTC datetime.

    Raises:
        ValueError: If ts is not a parseable timestamp
    """
    if not isinstance(ts, str) or not ts:
        raise ValueError(f"Invalid timestamp: {ts!r}")
    if ts.endswith('Z'):
        ts = ts[:-1] + '+00:00'
    ts = _EXCESS_FRACTION.sub(r"\1", ts)
    dt = datetime.fromisoformat(ts)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


@dataclass(frozen=True)
class RecentFile:
    """Entry in the recent files list."""
    identifier: str           # Display name snapshot
    location: str             # Natural key, exact string match
    modified_at: datetime     # File mtime captured at insertion
    preview: Optional[str] = None

    @classmethod
    def from_path(cls, location: str, preview: Optional[str] = None) -> "RecentFile":
        """
        Build an entry for an existing file.

        Raises:
            FileNotFoundError: If location does not exist
            OSError: If the file's metadata cannot be read
        """
        st = os.stat(location)
        return cls(
            identifier=Path(location).name or UNKNOWN_IDENTIFIER,
            location=location,
            modified_at=datetime.fromtimestamp(st.st_mtime, tz=timezone.utc),
            preview=preview,
        )

    def to_dict(self) -> dict:
        return {
            "identifier": self.identifier,
            "location": self.location,
            "modified_at": format_timestamp(self.modified_at),
            "preview": self.preview,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "RecentFile":
        """
        Raises:
            ValueError: If a required field is missing or has the wrong type
        """
        if not isinstance(data, dict):
            raise ValueError(f"Entry must be an object, got {type(data).__name__}")
        location = data.get("location")
        if not isinstance(location, str) or not location:
            raise ValueError("Entry has no location")
        identifier = data.get("identifier")
        if identifier is None:
            identifier = Path(location).name or UNKNOWN_IDENTIFIER
        elif not isinstance(identifier, str):
            raise ValueError(f"Entry identifier must be a string: {location}")
        preview = data.get("preview")
        if preview is not None and not isinstance(preview, str):
            raise ValueError(f"Entry preview must be a string or null: {location}")
        return cls(
            identifier=identifier,
            location=location,
            modified_at=parse_timestamp(data.get("modified_at")),
            preview=preview,
        )
