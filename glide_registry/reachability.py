"""Optional network check that a release URL can be downloaded."""

from __future__ import annotations

import enum
from time import monotonic

import httpx

from glide_registry.config import DEFAULT_TIMEOUT
from glide_registry.debug import DebugConsole

REACHABLE_STATUSES = frozenset({200, 301, 302})

MAX_REDIRECTS = 20


class Reachability(enum.Enum):
    REACHABLE = "reachable"
    UNREACHABLE = "unreachable"


def _classify(client: httpx.Client, url: str | httpx.URL, timeout: float) -> Reachability:
    deadline = monotonic() + timeout
    for _ in range(MAX_REDIRECTS + 1):
        remaining = deadline - monotonic()
        if remaining <= 0:
            DebugConsole.debug(f"Probe of {url} ran past its {timeout}s deadline")
            return Reachability.UNREACHABLE

        # Only the status line and headers are read; the artifact body never is
        with client.stream("GET", url, follow_redirects=False, timeout=remaining) as response:
            status = response.status_code
            next_request = response.next_request

        DebugConsole.debug(f"Probe of {url} returned HTTP {status}")
        if next_request is None:
            if status in REACHABLE_STATUSES:
                return Reachability.REACHABLE
            return Reachability.UNREACHABLE
        url = next_request.url

    DebugConsole.debug(f"Probe gave up after {MAX_REDIRECTS} redirects")
    return Reachability.UNREACHABLE


def probe(
    url: str, timeout: float = DEFAULT_TIMEOUT, client: httpx.Client | None = None
) -> Reachability:
    """GET a URL, following redirects, and classify the final response.

    Redirects are followed one hop at a time against a single deadline, and
    each hop is given only the time left before it. Response bodies are never
    downloaded. Network failures of any kind (DNS, refused connection,
    timeout, bad URL) are reported as UNREACHABLE rather than raised.

    Args:
        url: URL to request
        timeout: Seconds allowed for the whole redirect chain
        client: Client to send the request with; a short-lived one is created if omitted

    Returns:
        REACHABLE if the final status is 200, 301 or 302.
    """
    try:
        if client is None:
            with httpx.Client(timeout=timeout) as own_client:
                return _classify(own_client, url, timeout)
        return _classify(client, url, timeout)
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        DebugConsole.debug(f"Probe of {url} failed: {type(e).__name__}: {e}")
        return Reachability.UNREACHABLE
