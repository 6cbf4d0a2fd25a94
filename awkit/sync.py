"""Syncing of buckets and events between two stores through a sync folder.

The sync folder holds one staging datastore per host. The folder itself is
kept in step across machines by an external file synchronizer.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional

from awkit.accessmethod import AccessMethod, NoSuchBucketError
from awkit.models import EPOCH, Bucket

logger = logging.getLogger(__name__)

SYNC_ORIGIN_KEY = "$aw.sync.origin"
SYNCED_FROM = "-synced-from-"
BATCH_SIZE = 5000


class SyncMode(enum.Enum):
    """Direction of a sync pass."""

    PUSH = "push"
    PULL = "pull"
    BOTH = "both"


@dataclass
class SyncSpec:
    """What to sync and where."""

    path: Path = Path("/tmp/aw-sync")
    """Path of the sync folder."""
    path_db: Optional[Path] = None
    """Path of a single sync db; all dbs are used when None."""
    buckets: Optional[list[str]] = None
    """Bucket ids to sync; all buckets when None, empty or containing "*"."""
    start: Optional[datetime] = None
    """Start of the time range to sync."""


def _wanted(bucket: Bucket, buckets: Optional[list[str]]) -> bool:
    if buckets is None or not buckets or "*" in buckets:
        return True
    return bucket.id in buckets


def _end_key(bucket: Bucket) -> tuple[bool, datetime]:
    end = bucket.metadata.end
    return (end is not None, end if end is not None else EPOCH)


def _get_or_create_sync_bucket(
    bucket_from: Bucket, ds_to: AccessMethod, is_push: bool
) -> Bucket:
    """Return the destination bucket for ``bucket_from``, creating it if missing."""
    if is_push:
        new_id = bucket_from.id
    else:
        orig_id = bucket_from.id.split(SYNCED_FROM, 1)[0]
        origin = bucket_from.data.get(SYNC_ORIGIN_KEY, bucket_from.hostname)
        if not isinstance(origin, str):
            raise ValueError(
                f"Bucket {bucket_from.id!r} has a non-string sync origin: {origin!r}"
            )
        new_id = f"{orig_id}{SYNCED_FROM}{origin}"

    try:
        return ds_to.get_bucket(new_id)
    except NoSuchBucketError:
        bucket_new = bucket_from.copy()
        bucket_new.id = new_id
        bucket_new.data[SYNC_ORIGIN_KEY] = bucket_from.hostname
        ds_to.create_bucket(bucket_new)
        return ds_to.get_bucket(new_id)


def _sync_one(
    ds_from: AccessMethod, ds_to: AccessMethod, bucket_from: Bucket, bucket_to: Bucket
) -> None:
    """Copy the events of one bucket that the destination does not have yet."""
    count_before = ds_to.get_event_count(bucket_to.id)
    logger.info(" ⟳  Syncing bucket '%s'", bucket_to.id)

    most_recent = ds_to.get_events(bucket_to.id, None, None, 1)
    resume_at = most_recent[0].calculate_endtime() if most_recent else None
    if resume_at is not None:
        logger.info("   + Resuming at %s", resume_at)
    else:
        logger.info("   + Starting from beginning")

    events = []
    for event in ds_from.get_events(bucket_from.id, resume_at, None, None):
        fresh = event.copy()
        # Ids are not globally unique, so they are not carried over.
        fresh.id = None
        events.append(fresh)
    events.sort(key=lambda e: e.timestamp)

    if events:
        # The first event goes in as a heartbeat so it merges with the event it resumes.
        ds_to.heartbeat(bucket_to.id, events[0], 0.0)
        rest = events[1:]
        for offset in range(0, len(rest), BATCH_SIZE):
            ds_to.insert_events(bucket_to.id, rest[offset:offset + BATCH_SIZE])

    new_events = ds_to.get_event_count(bucket_to.id) - count_before
    if new_events < 0:
        raise RuntimeError(
            f"Event count of bucket {bucket_to.id!r} decreased during sync"
        )
    if new_events > 0:
        logger.info("  = Synced %d new events", new_events)
    else:
        logger.info("  ✓ Already up to date!")


def sync_datastores(
    ds_from: AccessMethod,
    ds_to: AccessMethod,
    is_push: bool,
    src_did: Optional[str],
    sync_spec: SyncSpec,
) -> None:
    """Sync the buckets of ``ds_from`` into ``ds_to``.

    When pulling, destination buckets get ``-synced-from-{origin}`` appended to
    their id; when pushing, ids are kept. ``src_did`` is the source device id,
    used for buckets whose hostname is ``"unknown"``.
    """
    logger.info("Syncing %r to %r", ds_from, ds_to)

    buckets_from: list[Bucket] = []
    for bucket in ds_from.get_buckets().values():
        if not _wanted(bucket, sync_spec.buckets):
            continue
        bucket = bucket.copy()
        if bucket.hostname == "unknown":
            logger.warning(
                " ! Bucket hostname/device ID was invalid, setting to device ID/hostname"
            )
            if src_did is None:
                raise ValueError(
                    f"Bucket {bucket.id!r} has an unknown hostname and no source device id was given"
                )
            bucket.hostname = src_did
        buckets_from.append(bucket)

    if sync_spec.buckets is not None:
        found = {b.id for b in buckets_from}
        for bucket_id in sync_spec.buckets:
            if bucket_id not in found:
                logger.error(' ! Bucket "%s" not found in source datastore', bucket_id)

    buckets_from.sort(key=_end_key)

    for bucket_from in buckets_from:
        bucket_to = _get_or_create_sync_bucket(bucket_from, ds_to, is_push)
        _sync_one(ds_from, ds_to, bucket_from, bucket_to)