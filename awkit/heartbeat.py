"""Merging of heartbeat events."""

from __future__ import annotations

import copy
import logging
from datetime import timedelta
from typing import Optional

from awkit.models import Event

logger = logging.getLogger(__name__)


def heartbeat(last_event: Event, heartbeat: Event, pulsetime: float) -> Optional[Event]:
    """Merge a heartbeat into the last event if data matches and it falls within pulsetime.

    Returns the merged event, or None when the two cannot be merged.
    """
    if heartbeat.data != last_event.data:
        logger.debug("Can't merge, data is different")
        return None

    last_endtime = last_event.calculate_endtime()
    heartbeat_endtime = heartbeat.calculate_endtime()

    last_endtime_allowed = last_endtime + timedelta(seconds=pulsetime)
    if last_event.timestamp > heartbeat.timestamp:
        logger.debug("Can't merge, last event timestamp is after heartbeat timestamp")
        return None
    if heartbeat.timestamp > last_endtime_allowed:
        logger.debug("Can't merge, heartbeat timestamp is after last event endtime")
        return None

    starttime = min(heartbeat.timestamp, last_event.timestamp)
    endtime = max(last_endtime, heartbeat_endtime)
    duration = endtime - starttime
    if duration < timedelta(0):
        logger.debug("Merging heartbeats would result in a negative duration, refusing to merge!")
        return None

    return Event(
        timestamp=starttime,
        duration=duration,
        data=copy.deepcopy(last_event.data),
    )