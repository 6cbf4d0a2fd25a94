"""Merging of events sharing values at given keys."""

from __future__ import annotations

import json
from collections.abc import Iterable, Sequence

from awkit.models import Event


def merge_events_by_keys(events: Iterable[Event], keys: Sequence[str]) -> list[Event]:
    """Merge all events with equal values at ``keys``, summing their durations.

    Each merged event keeps the timestamp and data of the first event in its group.
    Events missing any of the keys are dropped; an empty key list gives no events.
    """
    if not keys:
        return []
    merged: dict[tuple[str, ...], Event] = {}
    for event in events:
        if any(key not in event.data for key in keys):
            continue
        group = tuple(json.dumps(event.data[key], sort_keys=True) for key in keys)
        if group in merged:
            merged[group].duration += event.duration
        else:
            first = event.copy()
            first.id = None
            merged[group] = first
    return list(merged.values())