"""SSRF protection for outbound webhook calls."""

import ipaddress
import logging
import socket
from typing import Optional
from urllib.parse import urlparse

import httpx

logger = logging.getLogger(__name__)

_BLOCKED_NETWORKS = [
    ipaddress.ip_network("10.0.0.0/8"),
    ipaddress.ip_network("172.16.0.0/12"),
    ipaddress.ip_network("192.168.0.0/16"),
    ipaddress.ip_network("127.0.0.0/8"),
    ipaddress.ip_network("169.254.0.0/16"),
    ipaddress.ip_network("0.0.0.0/8"),
    ipaddress.ip_network("100.64.0.0/10"),
    ipaddress.ip_network("::1/128"),
    ipaddress.ip_network("fc00::/7"),
    ipaddress.ip_network("fe80::/10"),
]

# Service names from the compose stack
_BLOCKED_HOSTNAMES = {
    "localhost",
    "postgres",
    "redis",
    "api",
    "wordpress",
    "nginx",
    "metadata",
    "metadata.google.internal",
}


def _is_ip_blocked(ip_str: str) -> bool:
    try:
        ip = ipaddress.ip_address(ip_str)
        if isinstance(ip, ipaddress.IPv6Address) and ip.ipv4_mapped:
            ip = ip.ipv4_mapped
        return any(ip in network for network in _BLOCKED_NETWORKS)
    except ValueError:
        return True


def check_host(hostname: str) -> Optional[str]:
    """Return a reason string if *hostname* must not be contacted, else None."""
    if hostname.lower() in _BLOCKED_HOSTNAMES:
        return f"Hostname '{hostname}' is not allowed"
    try:
        addr_infos = socket.getaddrinfo(hostname, None, socket.AF_UNSPEC, socket.SOCK_STREAM)
    except socket.gaierror:
        return f"Cannot resolve hostname '{hostname}'"
    for _family, _, _, _, sockaddr in addr_infos:
        if _is_ip_blocked(sockaddr[0]):
            return "URL resolves to private/reserved IP address"
    return None


def is_safe_url(url: str) -> tuple[bool, str]:
    try:
        parsed = urlparse(url)
    except ValueError:
        return False, "Invalid URL"

    if parsed.scheme not in ("http", "https"):
        return False, f"Scheme '{parsed.scheme}' not allowed. Use http or https."

    hostname = parsed.hostname
    if not hostname:
        return False, "URL has no hostname"

    reason = check_host(hostname)
    if reason:
        return False, reason
    return True, ""


class SSRFSafeTransport(httpx.AsyncHTTPTransport):
    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        hostname = request.url.host
        if hostname:
            reason = check_host(hostname)
            if reason:
                logger.warning("Blocked outbound request to %s: %s", hostname, reason)
                raise httpx.ConnectError(reason, request=request)
        return await super().handle_async_request(request)


def safe_http_client(
    timeout: float = 10,
    follow_redirects: bool = False,
    **kwargs,
) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        timeout=timeout,
        follow_redirects=follow_redirects,
        transport=SSRFSafeTransport(),
        **kwargs,
    )
