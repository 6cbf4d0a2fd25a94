"""Lookup of buckets by id prefix and hostname."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Optional

from awkit.models import Bucket


def find_bucket(
    bucket_filter: str, hostname_filter: Optional[str], buckets: Iterable[Bucket]
) -> Optional[str]:
    """Return the id of the first bucket whose id starts with ``bucket_filter``.

    When ``hostname_filter`` is given, the bucket's hostname must also equal it.
    """
    return next(
        (
            b.id
            for b in buckets
            if b.id.startswith(bucket_filter)
            and (hostname_filter is None or b.hostname == hostname_filter)
        ),
        None,
    )