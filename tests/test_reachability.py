"""Tests for the release URL probe."""

from __future__ import annotations

from unittest.mock import ANY, patch

import httpx
import pytest

from glide_registry.reachability import Reachability, probe

URL = "https://github.com/glide-cli/glide-plugin-docker/releases/download/v3.0.0/docker.tar.gz"


def client_returning(status_code: int) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(lambda request: httpx.Response(status_code)))


def client_raising(error: Exception) -> httpx.Client:
    def handler(request: httpx.Request) -> httpx.Response:
        raise error

    return httpx.Client(transport=httpx.MockTransport(handler))


class TestProbe:
    """Tests for probe function."""

    @pytest.mark.parametrize("status_code", [200, 301, 302])
    def test_reachable_statuses(self, status_code: int) -> None:
        """Should accept 200, 301 and 302."""
        with client_returning(status_code) as client:
            assert probe(URL, client=client) is Reachability.REACHABLE

    @pytest.mark.parametrize("status_code", [204, 303, 403, 404, 500, 503])
    def test_unreachable_statuses(self, status_code: int) -> None:
        """Should reject every other status."""
        with client_returning(status_code) as client:
            assert probe(URL, client=client) is Reachability.UNREACHABLE

    def test_follows_redirects(self) -> None:
        """Should classify the response at the end of a redirect chain."""

        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path == "/start":
                return httpx.Response(302, headers={"Location": "https://example.com/asset"})
            return httpx.Response(200)

        with httpx.Client(transport=httpx.MockTransport(handler)) as client:
            assert probe("https://example.com/start", client=client) is Reachability.REACHABLE

    def test_broken_redirect_is_unreachable(self) -> None:
        """Should report a redirect ending in 404 as unreachable."""

        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path == "/start":
                return httpx.Response(301, headers={"Location": "https://example.com/gone"})
            return httpx.Response(404)

        with httpx.Client(transport=httpx.MockTransport(handler)) as client:
            assert probe("https://example.com/start", client=client) is Reachability.UNREACHABLE

    @pytest.mark.parametrize(
        "error",
        [
            httpx.ConnectError("Name or service not known"),
            httpx.ConnectTimeout("timed out"),
            httpx.ReadTimeout("timed out"),
        ],
    )
    def test_network_failure_is_unreachable(self, error: Exception) -> None:
        """Should never raise for network problems."""
        with client_raising(error) as client:
            assert probe(URL, client=client) is Reachability.UNREACHABLE

    def test_invalid_url_is_unreachable(self) -> None:
        """Should report malformed URLs as unreachable."""
        with client_returning(200) as client:
            assert probe("https://example.com/\x00asset", client=client) is Reachability.UNREACHABLE

    def test_default_client_uses_timeout(self) -> None:
        """Should build its own client with the timeout and stream the request."""
        with patch("glide_registry.reachability.httpx.Client") as mock_client_cls:
            mock_client = mock_client_cls.return_value.__enter__.return_value
            mock_client.stream.return_value.__enter__.return_value = httpx.Response(200)

            result = probe(URL, timeout=2.5)

        mock_client_cls.assert_called_once_with(timeout=2.5)
        mock_client.stream.assert_called_once_with(
            "GET", URL, follow_redirects=False, timeout=ANY
        )
        assert 0 < mock_client.stream.call_args.kwargs["timeout"] <= 2.5
        assert result is Reachability.REACHABLE


class TestRequestBounds:
    """Tests that a URL check never downloads artifacts or outlives its timeout."""

    def test_does_not_read_response_body(self) -> None:
        """Should classify the status without consuming a large body."""
        consumed: list[int] = []

        def body():
            for _ in range(2000):
                chunk = b"\0" * 65536
                consumed.append(len(chunk))
                yield chunk

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, content=body())

        with httpx.Client(transport=httpx.MockTransport(handler)) as client:
            result = probe(URL, client=client, timeout=10.0)

        assert result is Reachability.REACHABLE
        assert sum(consumed) == 0

    def test_does_not_read_redirect_body(self) -> None:
        """Should not consume the body of a redirect response either."""
        consumed: list[int] = []

        def body():
            consumed.append(1)
            yield b"moved"

        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path == "/start":
                return httpx.Response(
                    302, headers={"Location": "https://example.com/asset"}, content=body()
                )
            return httpx.Response(200)

        with httpx.Client(transport=httpx.MockTransport(handler)) as client:
            assert probe("https://example.com/start", client=client) is Reachability.REACHABLE

        assert consumed == []

    def test_deadline_covers_whole_redirect_chain(self) -> None:
        """Should stop following redirects once the timeout has elapsed."""
        requested: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requested.append(request.url.path)
            return httpx.Response(302, headers={"Location": "https://example.com/next"})

        # deadline set at t=0, first hop starts at t=1, second hop would start at t=11
        clock = iter([0.0, 1.0, 11.0])
        with (
            patch("glide_registry.reachability.monotonic", side_effect=lambda: next(clock)),
            httpx.Client(transport=httpx.MockTransport(handler)) as client,
        ):
            result = probe("https://example.com/start", client=client, timeout=10.0)

        assert result is Reachability.UNREACHABLE
        assert requested == ["/start"]

    def test_hop_timeout_is_time_remaining(self) -> None:
        """Should give each hop only the time left before the deadline."""
        clock = iter([0.0, 4.0])
        client = httpx.Client(transport=httpx.MockTransport(lambda request: httpx.Response(200)))

        with (
            patch("glide_registry.reachability.monotonic", side_effect=lambda: next(clock)),
            patch.object(client, "stream", wraps=client.stream) as mock_stream,
        ):
            assert probe(URL, client=client, timeout=10.0) is Reachability.REACHABLE

        client.close()
        assert mock_stream.call_args.kwargs["timeout"] == 6.0

    def test_endless_redirects_are_unreachable(self) -> None:
        """Should give up on a redirect loop."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(302, headers={"Location": "https://example.com/loop"})

        with httpx.Client(transport=httpx.MockTransport(handler)) as client:
            assert probe("https://example.com/loop", client=client) is Reachability.UNREACHABLE
