"""Clipping of events to the periods covered by another set of events."""

from __future__ import annotations

from collections.abc import Iterable

from awkit.models import Event
from awkit.sort import sort_by_timestamp


def filter_period_intersect(
    events: Iterable[Event], filter_events: Iterable[Event]
) -> list[Event]:
    """Return the parts of ``events`` that overlap any of ``filter_events``.

    Events are split and trimmed so that each returned event lies inside a
    filter event. Zero-duration events are dropped.
    """
    events_iter = (e.copy() for e in sort_by_timestamp(events))
    filter_iter = iter(sort_by_timestamp(filter_events))

    cur_event = next(events_iter, None)
    cur_filter = next(filter_iter, None)
    if cur_event is None or cur_filter is None:
        return []

    filtered: list[Event] = []
    while True:
        event_end = cur_event.calculate_endtime()
        filter_end = cur_filter.calculate_endtime()

        if not cur_event.duration or event_end <= cur_filter.timestamp:
            cur_event = next(events_iter, None)
            if cur_event is None:
                return filtered
            continue
        if cur_event.timestamp >= filter_end:
            cur_filter = next(filter_iter, None)
            if cur_filter is None:
                return filtered
            continue

        clipped = cur_event.copy()
        clipped.timestamp = max(clipped.timestamp, cur_filter.timestamp)
        clipped.duration = min(event_end, filter_end) - clipped.timestamp

        # Keep only the remainder of the current event after the clipped part.
        new_start = clipped.timestamp + clipped.duration
        cur_event.duration = event_end - new_start
        cur_event.timestamp = new_start

        filtered.append(clipped)