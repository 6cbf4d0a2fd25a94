"""Flooding of small gaps between events and merging of equal neighbours."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterable
from datetime import timedelta
from typing import Optional, Union

from awkit.models import Event
from awkit.sort import sort_by_timestamp

logger = logging.getLogger(__name__)

# Negative gaps smaller than this between events with differing data are tolerated silently.
NEGATIVE_GAP_TRIM_THRESHOLD = timedelta(milliseconds=100)


def _as_timedelta(value: Union[timedelta, float, int]) -> timedelta:
    if isinstance(value, timedelta):
        return value
    return timedelta(seconds=value)


def _merge_into(e1: Event, e2: Event) -> None:
    start = min(e1.timestamp, e2.timestamp)
    end = max(e1.calculate_endtime(), e2.calculate_endtime())
    e1.timestamp = start
    e1.duration = end - start


def flood(
    events: Iterable[Event], pulsetime: Union[timedelta, float, int]
) -> list[Event]:
    """Fill gaps shorter than ``pulsetime`` between events and merge equal neighbours.

    Gaps between events with differing data are split in the middle, each side
    extended halfway. Events with equal data that overlap or lie within
    ``pulsetime`` of each other are merged into one. The input is not modified.
    """
    pulse = _as_timedelta(pulsetime)
    pending = deque(e.copy() for e in sort_by_timestamp(events))
    flooded: list[Event] = []

    gap_prev: Optional[timedelta] = None
    retry: Optional[Event] = None
    warned_safe = False
    warned_unsafe = False

    while retry is not None or pending:
        if retry is not None:
            e1, retry = retry, None
        else:
            e1 = pending.popleft()

        if gap_prev is not None:
            e1.timestamp -= gap_prev / 2
            e1.duration += gap_prev / 2
            gap_prev = None

        if not pending:
            flooded.append(e1)
            break
        e2 = pending[0]

        gap = e2.timestamp - e1.calculate_endtime()

        if gap < timedelta(0):
            if e1.data == e2.data:
                if not warned_safe:
                    logger.warning(
                        "Gap was of negative duration (%ss), but could be safely merged. "
                        "This warning will only show once per batch.",
                        gap.total_seconds(),
                    )
                    warned_safe = True
                _merge_into(e1, e2)
                pending.popleft()
                retry = e1
                continue
            if gap < -NEGATIVE_GAP_TRIM_THRESHOLD and not warned_unsafe:
                logger.warning(
                    "Gap was of negative duration and could NOT be safely merged (%ss). "
                    "This warning will only show once per batch.",
                    gap.total_seconds(),
                )
                warned_unsafe = True
        elif gap < pulse:
            if e1.data == e2.data:
                _merge_into(e1, e2)
                pending.popleft()
                retry = e1
                continue
            e1.duration += gap / 2
            gap_prev = gap

        flooded.append(e1)

    return flooded