"""
Archive entries.

The core only builds the value handed to the archive store; storing,
listing and deleting belong to the host application. A record is plain
UTF-8 strings plus an ISO-8601 timestamp.
"""

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class ArchiveEntry:
    original: str
    encoded: str
    method: str
    date: datetime = field(default_factory=_now)

    @property
    def iso_date(self) -> str:
        return self.date.isoformat()

    def default_id(self) -> str:
        """Milliseconds since the epoch of `date`, as the original store keyed entries."""
        return str(int(self.date.timestamp() * 1000))

    def as_record(self, entry_id: Optional[str] = None) -> dict:
        return {
            "id":       entry_id or self.default_id(),
            "original": self.original,
            "encoded":  self.encoded,
            "method":   self.method,
            "date":     self.iso_date,
        }

    def to_json(self, entry_id: Optional[str] = None) -> str:
        return json.dumps(self.as_record(entry_id), ensure_ascii=False)

    @classmethod
    def from_record(cls, record: dict) -> "ArchiveEntry":
        raw = record["date"]
        # JavaScript toISOString() writes UTC as "Z"
        if raw.endswith("Z"):
            raw = raw[:-1] + "+00:00"
        return cls(
            original=record["original"],
            encoded=record["encoded"],
            method=record["method"],
            date=datetime.fromisoformat(raw),
        )
