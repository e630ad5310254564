# Copyright (c) Syntropy Systems
"""Tests for artifact sources."""
from __future__ import annotations

from pathlib import Path

import httpx
import pytest

from fraudboard.config import FraudboardConfig
from fraudboard.errors import ArtifactNotFoundError, ArtifactSourceError
from fraudboard.sources import FileArtifactSource, HttpArtifactSource, create_source


class TestFileArtifactSource:
    """Tests for reading artifacts from a directory."""

    def test_read(self, data_dir: Path):
        """Test reading an existing artifact."""
        source = FileArtifactSource(data_dir)

        payload = source.read("performance_metrics.json", timeout=1)

        assert b"best_threshold" in payload

    def test_missing(self, temp_dir: Path):
        """Test a missing file is reported as not found."""
        source = FileArtifactSource(temp_dir)

        with pytest.raises(ArtifactNotFoundError, match="not found"):
            _ = source.read("performance_metrics.json", timeout=1)

    def test_missing_directory(self, temp_dir: Path):
        """Test a data directory that does not exist."""
        source = FileArtifactSource(temp_dir / "nope")

        with pytest.raises(ArtifactNotFoundError):
            _ = source.read("pr_curve_data.json", timeout=1)

    def test_path_outside_data_dir(self, data_dir: Path):
        """Test names cannot escape the data directory."""
        _ = (data_dir.parent / "secret.json").write_text("{}")
        source = FileArtifactSource(data_dir)

        with pytest.raises(ArtifactNotFoundError, match="outside"):
            _ = source.read("../secret.json", timeout=1)

    def test_directory_is_source_error(self, data_dir: Path):
        """Test unreadable entries are source errors, not absence."""
        (data_dir / "folder.json").mkdir()
        source = FileArtifactSource(data_dir)

        with pytest.raises(ArtifactSourceError):
            _ = source.read("folder.json", timeout=1)


def make_http_source(handler) -> HttpArtifactSource:
    client = httpx.Client(transport=httpx.MockTransport(handler))
    return HttpArtifactSource("http://results.local/data/", client=client)


class TestHttpArtifactSource:
    """Tests for fetching artifacts over HTTP."""

    def test_read(self):
        """Test a successful GET returns the body."""
        seen: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(str(request.url))
            return httpx.Response(200, content=b'{"recall": [0.5], "precision": [0.5]}')

        with make_http_source(handler) as source:
            payload = source.read("pr_curve_data.json", timeout=1)

        assert payload.startswith(b'{"recall"')
        assert seen == ["http://results.local/data/pr_curve_data.json"]

    def test_not_found(self):
        """Test 404 maps to not found."""
        with make_http_source(lambda request: httpx.Response(404)) as source:
            with pytest.raises(ArtifactNotFoundError):
                _ = source.read("performance_metrics.json", timeout=1)

    def test_server_error(self):
        """Test other HTTP errors are source errors."""
        with make_http_source(lambda request: httpx.Response(500)) as source:
            with pytest.raises(ArtifactSourceError, match="500"):
                _ = source.read("performance_metrics.json", timeout=1)

    def test_connection_error(self):
        """Test transport failures are source errors."""

        def handler(request: httpx.Request) -> httpx.Response:
            msg = "refused"
            raise httpx.ConnectError(msg, request=request)

        with make_http_source(handler) as source:
            with pytest.raises(ArtifactSourceError, match="Connection error"):
                _ = source.read("performance_metrics.json", timeout=1)

    def test_timeout(self):
        """Test timeouts are source errors."""

        def handler(request: httpx.Request) -> httpx.Response:
            msg = "slow"
            raise httpx.ReadTimeout(msg, request=request)

        with make_http_source(handler) as source:
            with pytest.raises(ArtifactSourceError, match="Timed out"):
                _ = source.read("performance_metrics.json", timeout=1)


class TestCreateSource:
    """Tests for picking a source from config."""

    def test_file_by_default(self, temp_dir: Path):
        """Test no base_url means a file source."""
        source = create_source(FraudboardConfig(data_dir=temp_dir))

        assert isinstance(source, FileArtifactSource)
        assert source.data_dir == temp_dir

    def test_http_when_base_url_set(self):
        """Test base_url means an HTTP source."""
        source = create_source(FraudboardConfig(base_url="http://results.local"))

        assert isinstance(source, HttpArtifactSource)
        source.close()
