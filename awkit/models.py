"""Core data types: events, buckets and time intervals."""

from __future__ import annotations

import copy
import re
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

_FRACTION = re.compile(r"\.(\d+)")


def parse_timestamp(value: datetime | str) -> datetime:
    """Parse an RFC 3339 timestamp (or pass through a datetime) as an aware UTC datetime."""
    if isinstance(value, datetime):
        parsed = value
    else:
        text = value.strip().replace("Z", "+00:00").replace("z", "+00:00")
        text = _FRACTION.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0"), text, count=1)
        parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


@dataclass(frozen=True)
class TimeInterval:
    """A closed span of time between two instants."""

    start: datetime
    end: datetime

    def duration(self) -> timedelta:
        return self.end - self.start

    def intersects(self, other: TimeInterval) -> bool:
        """True if the two intervals share a span of non-zero length."""
        return self.start < other.end and other.start < self.end

    def union(self, other: TimeInterval) -> Optional[TimeInterval]:
        """The combined interval if the two overlap or touch, otherwise None."""
        if self.start <= other.end and other.start <= self.end:
            return TimeInterval(min(self.start, other.start), max(self.end, other.end))
        return None


@dataclass
class Event:
    """A single timestamped record with a duration and arbitrary data."""

    timestamp: datetime = EPOCH
    duration: timedelta = timedelta(0)
    data: dict[str, Any] = field(default_factory=dict)
    id: Optional[int] = None

    def calculate_endtime(self) -> datetime:
        return self.timestamp + self.duration

    def interval(self) -> TimeInterval:
        return TimeInterval(self.timestamp, self.calculate_endtime())

    def copy(self) -> Event:
        return copy.deepcopy(self)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "timestamp": self.timestamp.isoformat(),
            "duration": self.duration.total_seconds(),
            "data": copy.deepcopy(self.data),
        }
        if self.id is not None:
            result["id"] = self.id
        return result

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> Event:
        return cls(
            timestamp=parse_timestamp(raw["timestamp"]),
            duration=timedelta(seconds=float(raw.get("duration", 0))),
            data=copy.deepcopy(raw.get("data", {})),
            id=raw.get("id"),
        )


@dataclass
class BucketMetadata:
    """Time range covered by the events of a bucket."""

    start: Optional[datetime] = None
    end: Optional[datetime] = None


@dataclass
class Bucket:
    """A named collection of events from one client on one host."""

    id: str
    type: str
    hostname: str
    client: str
    bid: Optional[int] = None
    created: Optional[datetime] = None
    data: dict[str, Any] = field(default_factory=dict)
    metadata: BucketMetadata = field(default_factory=BucketMetadata)
    events: Optional[list[Event]] = None
    last_updated: Optional[datetime] = None

    def copy(self) -> Bucket:
        return copy.deepcopy(self)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "id": self.id,
            "type": self.type,
            "hostname": self.hostname,
            "client": self.client,
            "data": copy.deepcopy(self.data),
        }
        if self.created is not None:
            result["created"] = self.created.isoformat()
        if self.events is not None:
            result["events"] = [e.to_dict() for e in self.events]
        return result

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> Bucket:
        created = raw.get("created")
        events = raw.get("events")
        return cls(
            id=raw["id"],
            type=raw["type"],
            hostname=raw["hostname"],
            client=raw["client"],
            created=parse_timestamp(created) if created is not None else None,
            data=copy.deepcopy(raw.get("data", {})),
            events=[Event.from_dict(e) for e in events] if events is not None else None,
        )