"""Filtering of events by the value at a data key."""

from __future__ import annotations

import json
import re
from collections.abc import Iterable
from typing import Any, Union

from awkit.models import Event


def _encode(value: Any) -> str:
    # JSON-level equality: 1, 1.0 and true are distinct values.
    return json.dumps(value, sort_keys=True)


def filter_keyvals(events: Iterable[Event], key: str, vals: Iterable[Any]) -> list[Event]:
    """Keep only events whose value at ``key`` equals one of ``vals``."""
    wanted = {_encode(v) for v in vals}
    return [e for e in events if key in e.data and _encode(e.data[key]) in wanted]


def filter_keyvals_regex(
    events: Iterable[Event], key: str, regex: Union[str, re.Pattern[str]]
) -> list[Event]:
    """Keep only events whose string value at ``key`` contains a match of ``regex``."""
    pattern = re.compile(regex)
    return [
        e
        for e in events
        if isinstance(e.data.get(key), str) and pattern.search(e.data[key]) is not None
    ]


def exclude_keyvals(events: Iterable[Event], key: str, vals: Iterable[Any]) -> list[Event]:
    """Drop events whose value at ``key`` equals one of ``vals``."""
    unwanted = {_encode(v) for v in vals}
    return [e for e in events if key not in e.data or _encode(e.data[key]) not in unwanted]