"""Splitting of an event's URL into protocol, domain, path and query."""

from __future__ import annotations

from typing import NamedTuple, Optional
from urllib.parse import urlsplit

from awkit.models import Event

_SPECIAL_SCHEMES = frozenset({"http", "https", "ws", "wss", "ftp", "file"})


class _UrlParts(NamedTuple):
    scheme: str
    host: Optional[str]
    path: str
    query: str


def _parse_url(url: str) -> Optional[_UrlParts]:
    try:
        parts = urlsplit(url.strip())
        host = parts.hostname
    except ValueError:
        return None
    scheme = parts.scheme
    if not scheme:
        return None
    if not host:
        host = None
    elif ":" in host:
        host = f"[{host}]"
    special = scheme in _SPECIAL_SCHEMES
    if special and scheme != "file" and host is None:
        return None
    path = parts.path
    if special and not path:
        path = "/"
    return _UrlParts(scheme, host, path, parts.query)


def split_url_event(event: Event) -> None:
    """Add ``$protocol``, ``$domain``, ``$path`` and ``$params`` from the event's ``url``.

    The event is updated in place. Events without a parseable string ``url``
    are left unchanged. URLs without a host use their scheme as domain.
    """
    url = event.data.get("url")
    if not isinstance(url, str):
        return
    parts = _parse_url(url)
    if parts is None:
        return

    if parts.host is None:
        domain = parts.scheme
    else:
        domain = parts.host
        while domain.startswith("www."):
            domain = domain[len("www."):]

    event.data["$protocol"] = parts.scheme
    event.data["$domain"] = domain
    event.data["$path"] = parts.path
    event.data["$params"] = parts.query