"""Bounded single-shot HTTP fetcher for untrusted URLs."""

import asyncio
import ipaddress
import logging
import socket
from typing import List, Optional

import httpx

from url_details.models.options import FetchOptions
from url_details.models.outcome import (
    NO_RESPONSE_STATUS,
    FetchEmptyBody,
    FetchOutcome,
    FetchRemoteError,
    FetchSuccess,
)

logger = logging.getLogger(__name__)


class BlockedHostError(httpx.RequestError):
    """Raised before connecting to a host that resolves to a non-public address."""


async def _is_private_address(hostname: str) -> bool:
    """Return True if *hostname* resolves to a private, loopback, or link-local address."""
    loop = asyncio.get_running_loop()
    try:
        infos = await loop.getaddrinfo(hostname, None)
    except socket.gaierror:
        # Unresolvable hosts fail on connect and are reported as unreachable
        return False

    for info in infos:
        # Strip IPv6 zone IDs (e.g. "fe80::1%eth0" → "fe80::1")
        raw_ip = info[4][0].split("%")[0]
        try:
            addr = ipaddress.ip_address(raw_ip)
        except ValueError:
            continue
        if addr.is_private or addr.is_loopback or addr.is_link_local or addr.is_reserved:
            return True
    return False


async def _guard_host(request: httpx.Request) -> None:
    """httpx request hook: refuse every hop, redirects included, to internal hosts."""
    if await _is_private_address(request.url.host):
        raise BlockedHostError(
            f"Requests to private/internal addresses are not allowed: {request.url.host}",
            request=request,
        )


async def _read_capped(response: httpx.Response, limit: int) -> bytes:
    """Read at most *limit* bytes from a streamed *response*, discarding the rest."""
    chunks: List[bytes] = []
    total = 0
    async for chunk in response.aiter_bytes():
        remaining = limit - total
        if len(chunk) >= remaining:
            chunks.append(chunk[:remaining])
            break
        chunks.append(chunk)
        total += len(chunk)
    return b"".join(chunks)


class RemoteFetcher:
    """Performs exactly one bounded GET per call and classifies the result.

    *transport* is handed to :class:`httpx.AsyncClient` unchanged, which lets
    callers substitute :class:`httpx.MockTransport` and inspect the outbound
    request.
    """

    def __init__(
        self,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        block_private_hosts: bool = True,
    ) -> None:
        self.transport = transport
        self.block_private_hosts = block_private_hosts

    def _client(self, options: FetchOptions) -> httpx.AsyncClient:
        event_hooks = {"request": [_guard_host]} if self.block_private_hosts else {}
        return httpx.AsyncClient(
            transport=self.transport,
            timeout=options.timeout,
            headers=options.headers,
            follow_redirects=True,
            max_redirects=options.max_redirects,
            event_hooks=event_hooks,
        )

    async def _get(self, url: str, options: FetchOptions) -> FetchOutcome:
        async with self._client(options) as client:
            async with client.stream("GET", url) as response:
                if not response.is_success:
                    logger.warning(
                        "Remote URL %s answered with HTTP %d", url, response.status_code
                    )
                    return FetchRemoteError(
                        response.status_code, f"HTTP {response.status_code}", options
                    )
                body = await _read_capped(response, options.limit_response_size)

        if not body:
            logger.warning("Remote URL %s returned an empty body", url)
            return FetchEmptyBody(response.status_code, options)

        return FetchSuccess(response.status_code, body, options, response.charset_encoding)

    async def fetch(self, url: str, options: FetchOptions) -> FetchOutcome:
        """GET *url* using *options* and return a :data:`FetchOutcome`.

        ``options.timeout`` bounds the whole fetch: host checks, connecting,
        redirects and reading the body.  Transport failures (timeouts, DNS
        errors, refused connections, blocked hosts, redirect loops, URLs httpx
        cannot use) are never raised; they come back as
        :class:`FetchRemoteError` with a 404 status.
        """
        try:
            return await asyncio.wait_for(self._get(url, options), options.timeout)
        except asyncio.TimeoutError:
            logger.warning("Timed out after %ss fetching remote URL %s", options.timeout, url)
            return FetchRemoteError(NO_RESPONSE_STATUS, "Timed out", options)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.warning("Error fetching remote URL %s: %r", url, exc)
            return FetchRemoteError(NO_RESPONSE_STATUS, str(exc) or type(exc).__name__, options)
