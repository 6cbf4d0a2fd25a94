"""Sorting of event lists."""

from __future__ import annotations

from collections.abc import Iterable

from awkit.models import Event


def sort_by_timestamp(events: Iterable[Event]) -> list[Event]:
    """Return the events sorted by timestamp, earliest first."""
    return sorted(events, key=lambda e: e.timestamp)


def sort_by_duration(events: Iterable[Event]) -> list[Event]:
    """Return the events sorted by duration, longest first."""
    return sorted(events, key=lambda e: e.duration, reverse=True)