"""Union of two event lists with overlap removed, the first list taking precedence."""

from __future__ import annotations

import copy
from collections import deque
from collections.abc import Iterable
from datetime import datetime
from typing import Optional

from awkit.models import Event


def split_event(e: Event, timestamp: datetime) -> tuple[Event, Optional[Event]]:
    """Split an event in two at ``timestamp``.

    If ``timestamp`` lies strictly inside the event, return the part before it
    and the part from it onwards. Otherwise return a copy of the event and None.
    """
    if e.timestamp < timestamp < e.calculate_endtime():
        head = Event(
            timestamp=e.timestamp,
            duration=timestamp - e.timestamp,
            data=copy.deepcopy(e.data),
        )
        tail = Event(
            timestamp=timestamp,
            duration=e.duration - (timestamp - e.timestamp),
            data=copy.deepcopy(e.data),
        )
        return head, tail
    return e.copy(), None


def union_no_overlap(events1: Iterable[Event], events2: Iterable[Event]) -> list[Event]:
    """Merge two event lists, cutting away the parts of ``events2`` that overlap ``events1``.

    Both lists are expected to be sorted by timestamp. The inputs are not modified.
    """
    first = deque(events1)
    second = deque(events2)
    union: list[Event] = []

    while first and second:
        e1 = first[0]
        e2 = second[0]

        if e1.interval().intersects(e2.interval()):
            if e1.timestamp <= e2.timestamp:
                union.append(e1.copy())
                first.popleft()
                # Keep only the part of e2 that continues after e1.
                _, rest = split_event(e2, e1.calculate_endtime())
                if rest is not None:
                    second[0] = rest
                else:
                    second.popleft()
            else:
                head, rest = split_event(e2, e1.timestamp)
                union.append(head)
                second.popleft()
                if rest is not None:
                    second.appendleft(rest)
        elif e1.timestamp <= e2.timestamp:
            union.append(e1.copy())
            first.popleft()
        else:
            union.append(e2.copy())
            second.popleft()

    union.extend(e.copy() for e in first)
    union.extend(e.copy() for e in second)
    return union