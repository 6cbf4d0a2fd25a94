"""Chunking of consecutive events sharing a key value."""

from __future__ import annotations

from collections.abc import Iterable

from awkit.models import Event


def chunk_events_by_key(events: Iterable[Event], key: str) -> list[Event]:
    """Join consecutive events with the same value at ``key``, summing durations.

    Events lacking ``key`` are dropped.
    """
    chunked: list[Event] = []
    for event in events:
        if key not in event.data:
            continue
        if chunked and chunked[-1].data[key] == event.data[key]:
            chunked[-1].duration += event.duration
        else:
            chunked.append(event.copy())
    return chunked