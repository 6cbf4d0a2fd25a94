from datetime import datetime, timedelta, timezone

from awkit.models import Event
from awkit.union_no_overlap import split_event, union_no_overlap

NOW = datetime(2000, 1, 1, tzinfo=timezone.utc)
TD1H = timedelta(hours=1)


def test_split_event():
    e = Event(timestamp=NOW, duration=timedelta(hours=2), data={})
    e1, e2 = split_event(e, NOW + TD1H)
    assert e1.timestamp == NOW
    assert e1.duration == TD1H
    assert e2 is not None
    assert e2.timestamp == NOW + TD1H
    assert e2.duration == TD1H


def test_split_event_no_split():
    e = Event(timestamp=NOW, duration=timedelta(hours=2), data={})
    e1, e2 = split_event(e, NOW)
    assert e1.timestamp == NOW
    assert e1.duration == timedelta(hours=2)
    assert e2 is None


def test_split_event_keeps_data():
    e = Event(timestamp=NOW, duration=timedelta(hours=2), data={"app": "x"})
    e1, e2 = split_event(e, NOW + TD1H)
    assert e1.data == {"app": "x"}
    assert e2.data == {"app": "x"}
    e1.data["app"] = "changed"
    assert e.data == {"app": "x"}


def test_union_no_overlap():
    e1 = Event(timestamp=NOW, duration=TD1H, data={})
    e2 = Event(timestamp=NOW + TD1H, duration=TD1H, data={})
    result = union_no_overlap([e1], [e2])

    assert len(result) == 2
    assert result[0].timestamp == NOW
    assert result[0].duration == TD1H
    assert result[1].timestamp == NOW + TD1H
    assert result[1].duration == TD1H

    result = union_no_overlap([e2], [e1])
    assert len(result) == 2
    assert result[0].timestamp == NOW
    assert result[0].duration == TD1H
    assert result[1].timestamp == NOW + TD1H
    assert result[1].duration == TD1H


def test_union_no_overlap_with_overlap():
    e1 = Event(timestamp=NOW, duration=TD1H, data={})
    e2 = Event(timestamp=NOW, duration=timedelta(hours=2), data={})
    result = union_no_overlap([e1], [e2])

    assert len(result) == 2
    assert result[0].timestamp == NOW
    assert result[0].duration == TD1H
    assert result[1].timestamp == NOW + TD1H
    assert result[1].duration == TD1H


def test_union_no_overlap_second_starts_first():
    e1 = Event(timestamp=NOW + TD1H, duration=TD1H, data={})
    e2 = Event(timestamp=NOW, duration=timedelta(hours=2), data={})
    result = union_no_overlap([e1], [e2])

    assert len(result) == 2
    assert result[0].timestamp == NOW
    assert result[0].duration == TD1H
    assert result[1].timestamp == NOW + TD1H
    assert result[1].duration == TD1H


def test_first_list_has_precedence():
    e1 = Event(timestamp=NOW, duration=TD1H, data={"src": 1})
    e2 = Event(timestamp=NOW, duration=timedelta(hours=2), data={"src": 2})
    result = union_no_overlap([e1], [e2])
    assert [e.data["src"] for e in result] == [1, 2]


def test_inputs_not_modified():
    e1 = Event(timestamp=NOW + TD1H, duration=TD1H, data={})
    e2 = Event(timestamp=NOW, duration=timedelta(hours=2), data={})
    events2 = [e2]
    union_no_overlap([e1], events2)
    assert events2 == [e2]
    assert e2.duration == timedelta(hours=2)


def test_empty_lists():
    e = Event(timestamp=NOW, duration=TD1H, data={})
    assert union_no_overlap([], []) == []
    assert union_no_overlap([e], []) == [e]
    assert union_no_overlap([], [e]) == [e]