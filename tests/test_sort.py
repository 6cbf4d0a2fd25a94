from datetime import timedelta

from awkit.models import Event, parse_timestamp
from awkit.sort import sort_by_duration, sort_by_timestamp


def test_sort_by_timestamp():
    e1 = Event(
        timestamp=parse_timestamp("2000-01-01T00:00:00Z"),
        duration=timedelta(seconds=1),
        data={"test": 1},
    )
    e2 = Event(
        timestamp=parse_timestamp("2000-01-01T00:00:03Z"),
        duration=timedelta(seconds=1),
        data={"test": 1},
    )
    assert sort_by_timestamp([e2, e1]) == [e1, e2]


def test_sort_by_duration():
    e1 = Event(
        timestamp=parse_timestamp("2000-01-01T00:00:00Z"),
        duration=timedelta(seconds=2),
        data={"test": 1},
    )
    e2 = Event(
        timestamp=parse_timestamp("2000-01-01T00:00:03Z"),
        duration=timedelta(seconds=1),
        data={"test": 1},
    )
    assert sort_by_duration([e2, e1]) == [e1, e2]


def test_sort_by_duration_is_stable():
    e1 = Event(timestamp=parse_timestamp("2000-01-01T00:00:00Z"), data={"n": 1})
    e2 = Event(timestamp=parse_timestamp("2000-01-01T00:00:03Z"), data={"n": 2})
    assert sort_by_duration([e2, e1]) == [e2, e1]