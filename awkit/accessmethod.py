"""A common interface over local datastores and remote servers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from datetime import datetime
from typing import Optional

from awkit.models import Bucket, Event


class DatastoreError(Exception):
    """Base class for datastore failures."""


class NoSuchBucketError(DatastoreError):
    """Raised when a bucket does not exist."""

    def __init__(self, bucket_id: str) -> None:
        super().__init__(f"No such bucket: {bucket_id}")
        self.bucket_id = bucket_id


class BucketAlreadyExistsError(DatastoreError):
    """Raised when creating a bucket whose id is already taken."""

    def __init__(self, bucket_id: str) -> None:
        super().__init__(f"Bucket already exists: {bucket_id}")
        self.bucket_id = bucket_id


class AccessMethod(ABC):
    """Operations on buckets and events shared by every kind of store.

    Usable as a context manager; leaving the block calls :meth:`close`.
    """

    @abstractmethod
    def get_buckets(self) -> dict[str, Bucket]:
        """Return all buckets keyed by id."""

    def get_bucket(self, bucket_id: str) -> Bucket:
        """Return one bucket; raise NoSuchBucketError if it is missing."""
        try:
            return self.get_buckets()[bucket_id]
        except KeyError:
            raise NoSuchBucketError(bucket_id) from None

    @abstractmethod
    def create_bucket(self, bucket: Bucket) -> None:
        """Create a bucket; raise BucketAlreadyExistsError if the id is taken."""

    @abstractmethod
    def get_events(
        self,
        bucket_id: str,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        limit: Optional[int] = None,
    ) -> list[Event]:
        """Return events of a bucket, most recent first, within the given range."""

    @abstractmethod
    def insert_events(self, bucket_id: str, events: Iterable[Event]) -> None:
        """Insert events into a bucket."""

    def get_event_count(self, bucket_id: str) -> int:
        """Return the number of events in a bucket."""
        return len(self.get_events(bucket_id))

    @abstractmethod
    def heartbeat(self, bucket_id: str, event: Event, duration: float) -> None:
        """Merge a heartbeat event into a bucket using ``duration`` as pulsetime."""

    def close(self) -> None:
        """Release any resources held by the store."""

    def __enter__(self) -> AccessMethod:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()