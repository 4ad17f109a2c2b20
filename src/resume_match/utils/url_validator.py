"""Guard job posting URLs against requests to internal networks.

The hostname is resolved here and again by the browser when the page is
opened, so a DNS rebinding attacker can still slip past this check. Use a
network-level egress filter where that matters.
"""

from __future__ import annotations

import ipaddress
import socket
from urllib.parse import urlparse

from resume_match.errors import BlockedURLError, RetrievalError

_BLOCKED_HOSTNAMES = {"localhost", "localhost.localdomain"}

_METADATA_IPS = {
    ipaddress.ip_address("169.254.169.254"),
    ipaddress.ip_address("0.0.0.0"),
}


def is_blocked_address(addr: ipaddress.IPv4Address | ipaddress.IPv6Address) -> bool:
    return (
        addr in _METADATA_IPS
        or addr.is_private
        or addr.is_loopback
        or addr.is_reserved
        or addr.is_link_local
    )


def _resolve(hostname: str) -> list[ipaddress.IPv4Address | ipaddress.IPv6Address]:
    try:
        return [ipaddress.ip_address(hostname)]
    except ValueError:
        pass
    try:
        results = socket.getaddrinfo(hostname, None, socket.AF_UNSPEC, socket.SOCK_STREAM)
    except socket.gaierror as exc:
        raise RetrievalError(f"Cannot resolve hostname {hostname!r}: {exc}") from exc
    return [ipaddress.ip_address(sockaddr[0]) for *_, sockaddr in results]


def validate_url(url: str) -> str:
    """Return ``url`` if it is an http(s) URL pointing at a public address.

    Raises:
        RetrievalError: the URL is malformed or its host cannot be resolved.
        BlockedURLError: the host is, or resolves to, a private address.
    """
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https"):
        raise RetrievalError(f"Unsupported URL scheme: {parsed.scheme!r}")

    hostname = parsed.hostname
    if not hostname:
        raise RetrievalError(f"No hostname in URL: {url!r}")
    if hostname.lower() in _BLOCKED_HOSTNAMES:
        raise BlockedURLError(f"Blocked internal hostname: {hostname!r}")

    for addr in _resolve(hostname):
        if is_blocked_address(addr):
            raise BlockedURLError(f"Host {hostname!r} points to blocked address: {addr}")
    return url
