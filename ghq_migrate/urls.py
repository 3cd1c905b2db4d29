"""Parse git remote URLs into host/owner/name locations."""

from __future__ import annotations

import re
from urllib.parse import urlsplit

from .exceptions import RemoteParseError
from .models import ParsedLocation

SUPPORTED_SCHEMES = frozenset({"http", "https", "ssh", "git", "git+ssh", "ssh+git"})

_SCP_RE = re.compile(r"^(?:(?P<user>[^@/:]+)@)?(?P<host>[^@/:]+):(?P<path>.+)$")
_FORBIDDEN_SEGMENTS = {".", ".."}


def parse_remote_url(raw: str) -> ParsedLocation:
    """Return the location a remote URL points at.

    Accepts ``scheme://[user@]host[:port]/owner/name(.git)`` for the schemes in
    :data:`SUPPORTED_SCHEMES` and the scp-like ``[user@]host:owner/name(.git)``
    shorthand. Hosts keep their case; credentials and ports are dropped.
    """

    remote = (raw or "").strip()
    if not remote:
        raise RemoteParseError(raw, "remote URL is empty")
    if "://" in remote:
        host, path = _split_url(remote)
    else:
        match = _SCP_RE.match(remote)
        if not match:
            raise RemoteParseError(remote, "expected scheme://host/owner/name or user@host:owner/name")
        host, path = match.group("host"), match.group("path")
        if len(host) == 1 and host.isalpha():
            raise RemoteParseError(remote, "looks like a local drive path")

    if not host or host in _FORBIDDEN_SEGMENTS:
        raise RemoteParseError(remote, "missing host")
    parts = [part for part in path.split("/") if part]
    if len(parts) < 2:
        raise RemoteParseError(remote, "remote URL must look like <host>/<owner>/<repo>")
    owner = parts[-2]
    name = parts[-1]
    if name.endswith(".git"):
        name = name[: -len(".git")]
    for label, segment in (("owner", owner), ("name", name)):
        if not segment or segment in _FORBIDDEN_SEGMENTS or "\\" in segment or "\0" in segment:
            raise RemoteParseError(remote, f"invalid {label} segment {segment!r}")
    return ParsedLocation(host=host, owner=owner, name=name)


def _split_url(remote: str) -> tuple[str, str]:
    parsed = urlsplit(remote)
    scheme = parsed.scheme.lower()
    if scheme not in SUPPORTED_SCHEMES:
        raise RemoteParseError(remote, f"unsupported scheme {parsed.scheme!r}")
    # urlsplit().hostname lowercases, so the host is cut out of netloc by hand.
    host_port = parsed.netloc.rpartition("@")[2]
    if host_port.startswith("["):
        host = host_port[1:].partition("]")[0]
    else:
        host = host_port.partition(":")[0]
    return host, parsed.path


__all__ = ["parse_remote_url", "SUPPORTED_SCHEMES"]
