# awkit

Tools for working with activity events: time-stamped records with a duration
and a dictionary of data. The package offers two things:

* **Transforms** for lists of events: sorting, heartbeat merging, flooding
  small gaps, chunking and merging by key, filtering by key/value or regex,
  intersecting with filter periods, unions of periods, URL splitting, and
  rule-based categorisation and tagging.
* **Synchronisation** of buckets from one store into another, plus helpers
  for locating a shared sync folder laid out as `{host}/{device_id}/*.db`,
  which any folder synchroniser can mirror between machines.

The only runtime dependency is `platformdirs`. The `test` extra adds `pytest`.

## Data types

`awkit.models` holds the types every other module works on:

* `Event`: `timestamp` (an aware `datetime`), `duration` (a `timedelta`),
  `data` (a dict) and an optional `id`. `calculate_endtime()` gives
  `timestamp + duration`, `interval()` gives a `TimeInterval`, and
  `to_dict()` / `Event.from_dict()` convert to and from plain dictionaries.
* `TimeInterval`: `start` and `end`, with `duration()`, `intersects(other)`
  (true when they share a span of non-zero length) and `union(other)` (the
  combined interval when they overlap or touch, otherwise `None`).
* `Bucket`: `id`, `type`, `hostname`, `client`, `data`, `metadata`
  (a `BucketMetadata` with optional `start` and `end`) and a few optional
  fields, with `to_dict()` / `Bucket.from_dict()`.
* `parse_timestamp()` reads an RFC 3339 string (or a `datetime`) into an
  aware UTC `datetime`.

## Transforms

```python
from datetime import datetime, timedelta, timezone

from awkit.models import Event
from awkit.flood import flood
from awkit.sort import sort_by_duration
from awkit.merge import merge_events_by_keys

t0 = datetime(2000, 1, 1, tzinfo=timezone.utc)
events = [
    Event(timestamp=t0, duration=timedelta(seconds=1), data={"app": "editor"}),
    Event(timestamp=t0 + timedelta(seconds=3), duration=timedelta(seconds=1), data={"app": "editor"}),
]

flooded = flood(events, timedelta(seconds=5))   # one event lasting 4 seconds
totals = sort_by_duration(merge_events_by_keys(flooded, ["app"]))
```

Each transform lives in its own module:

| Function | What it does |
| --- | --- |
| `awkit.sort.sort_by_timestamp(events)` | earliest first |
| `awkit.sort.sort_by_duration(events)` | longest first |
| `awkit.heartbeat.heartbeat(last_event, heartbeat, pulsetime)` | merged event, or `None` if data differs or the heartbeat is out of range |
| `awkit.flood.flood(events, pulsetime)` | fills gaps shorter than `pulsetime` and merges equal neighbours |
| `awkit.chunk.chunk_events_by_key(events, key)` | joins consecutive events with equal values at `key` |
| `awkit.merge.merge_events_by_keys(events, keys)` | joins all events with equal values at `keys`, in any order |
| `awkit.find_bucket.find_bucket(bucket_filter, hostname_filter, buckets)` | id of the first bucket whose id starts with `bucket_filter` |
| `awkit.filter_keyvals.filter_keyvals(events, key, vals)` | keeps events whose value at `key` is in `vals` |
| `awkit.filter_keyvals.filter_keyvals_regex(events, key, regex)` | keeps events whose string value at `key` matches `regex` |
| `awkit.filter_keyvals.exclude_keyvals(events, key, vals)` | drops events whose value at `key` is in `vals` |
| `awkit.filter_period.filter_period_intersect(events, filter_events)` | the parts of `events` inside `filter_events` |
| `awkit.period_union.period_union(events1, events2)` | non-overlapping events covering both lists; data is stripped |
| `awkit.union_no_overlap.union_no_overlap(events1, events2)` | both lists combined, overlapping parts of the second cut away |
| `awkit.union_no_overlap.split_event(e, timestamp)` | splits one event at `timestamp` |
| `awkit.split_url.split_url_event(event)` | adds `$protocol`, `$domain`, `$path` and `$params` from `data["url"]`, in place |

`pulsetime` for `flood` may be a `timedelta` or a number of seconds; for
`heartbeat` it is a number of seconds.

### Classification

```python
from awkit.classify import RegexRule, categorize, tag

rules = [
    (["Work"], RegexRule("editor")),
    (["Work", "Coding"], RegexRule("editor|terminal")),
]
categorized = categorize(events, rules)
# each returned event has data["$category"]; the deepest matching category
# wins, and ["Uncategorized"] is used when nothing matches
tagged = tag(events, [("work", RegexRule("editor", ignore_case=True))])
# each returned event has a sorted, deduplicated data["$tags"] list
```

A `RegexRule` matches an event when its pattern is found in any string value
of the event's data. The base `Rule` matches nothing.

## Synchronisation

A store is anything implementing the abstract class
`awkit.accessmethod.AccessMethod`. Subclasses supply `get_buckets`,
`create_bucket`, `get_events` (most recent first), `insert_events` and
`heartbeat`; `get_bucket`, `get_event_count` and `close` have default
implementations, and the class works as a context manager that calls
`close()` on exit. Missing buckets are reported with `NoSuchBucketError`,
duplicate ones with `BucketAlreadyExistsError`, both subclasses of
`DatastoreError`.

A minimal in-memory store:

```python
from awkit.accessmethod import AccessMethod, BucketAlreadyExistsError
from awkit.heartbeat import heartbeat as merge_heartbeat


class MemoryStore(AccessMethod):
    def __init__(self):
        self.buckets = {}
        self.events = {}

    def get_buckets(self):
        return dict(self.buckets)

    def create_bucket(self, bucket):
        if bucket.id in self.buckets:
            raise BucketAlreadyExistsError(bucket.id)
        self.buckets[bucket.id] = bucket.copy()
        self.events[bucket.id] = []

    def get_events(self, bucket_id, start=None, end=None, limit=None):
        events = sorted(self.events[bucket_id], key=lambda e: e.timestamp, reverse=True)
        events = [
            e for e in events
            if (start is None or e.timestamp >= start)
            and (end is None or e.calculate_endtime() <= end)
        ]
        return events if limit is None else events[:limit]

    def insert_events(self, bucket_id, events):
        self.events[bucket_id].extend(e.copy() for e in events)

    def heartbeat(self, bucket_id, event, duration):
        stored = self.events[bucket_id]
        if stored:
            last = max(stored, key=lambda e: e.timestamp)
            merged = merge_heartbeat(last, event, duration)
            if merged is not None:
                stored.remove(last)
                stored.append(merged)
                return
        stored.append(event.copy())
```

`awkit.sync.sync_datastores(ds_from, ds_to, is_push, src_did, sync_spec)`
copies every selected bucket of one store into another. It resumes after the
most recent event already in the destination bucket, inserts the first new
event as a heartbeat and the rest in batches of 5000. When pulling
(`is_push=False`) destination buckets are named
`<id>-synced-from-<origin>`; when pushing the id is kept. `src_did` replaces
a bucket hostname of `"unknown"`.

```python
from awkit.sync import SyncSpec, sync_datastores

source, destination = MemoryStore(), MemoryStore()
sync_datastores(source, destination, False, None, SyncSpec())
sync_datastores(source, destination, False, None, SyncSpec(buckets=["bucket-0"]))
```

`SyncSpec.buckets` selects bucket ids; `None`, an empty list or a list
containing `"*"` selects all. `SyncMode` names the directions `PUSH`, `PULL`
and `BOTH`.

### The sync folder

* `awkit.dirs.get_sync_dir()` returns `$AW_SYNC_DIR` if set, otherwise
  `~/ActivityWatchSync`.
* `awkit.dirs.get_config_dir()` returns (and creates) an `activitywatch/aw-sync`
  directory under the user configuration directory.
* `awkit.remotes.get_remotes()` lists the host directories in the sync folder
  that hold `{device_id}/*.db`, creating the sync folder if needed.
* `awkit.remotes.find_remotes(sync_directory)` lists every `*.db` one level
  below a directory.
* `awkit.remotes.find_remotes_nonlocal(sync_directory, device_id, sync_db)`
  does the same but leaves out paths mentioning `device_id`, and keeps only
  paths under `sync_db` when it is given.

## What the package does not do

* It ships no store. `AccessMethod` is only an interface: there is no
  on-disk database behind the `*.db` files, and no client for a running
  activity server. Using the sync functions requires your own implementation.
* It has no sync runner that opens the databases in the sync folder and
  pushes or pulls them on its own, no daemon, and no command-line tool.
  `SyncMode` and `SyncSpec.path`, `path_db` and `start` describe such a pass
  but are not acted on by `sync_datastores`.
* It does not copy the sync folder between machines; that is left to an
  external folder synchroniser.