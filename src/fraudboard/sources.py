# Copyright (c) Syntropy Systems
"""Artifact sources: where the result documents are read from."""
from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol

import httpx
from typing_extensions import Self

from fraudboard.errors import ArtifactNotFoundError, ArtifactSourceError

if TYPE_CHECKING:
    from types import TracebackType

    from fraudboard.config import FraudboardConfig

HTTP_NOT_FOUND = 404


class ArtifactSource(Protocol):
    """Anything that can return the raw bytes of a named artifact."""

    def read(self, name: str, timeout: float) -> bytes:
        """Return the artifact's content.

        Raises:
            ArtifactNotFoundError: If nothing exists under name
            ArtifactSourceError: If the source failed otherwise

        """
        ...


class FileArtifactSource:
    """Reads artifacts from files in a local directory."""

    data_dir: Path

    def __init__(self, data_dir: Path) -> None:
        self.data_dir = data_dir

    def read(self, name: str, timeout: float) -> bytes:  # noqa: ARG002
        """Read data_dir/name. Local reads are not bounded by timeout."""
        root = self.data_dir.resolve()
        path = (root / name).resolve()
        if root not in path.parents:
            msg = f"Artifact '{name}' is outside {root}"
            raise ArtifactNotFoundError(msg)
        try:
            return path.read_bytes()
        except FileNotFoundError as e:
            msg = f"Artifact '{name}' not found in {root}"
            raise ArtifactNotFoundError(msg) from e
        except OSError as e:
            msg = f"Could not read artifact '{name}': {e}"
            raise ArtifactSourceError(msg) from e

    def __repr__(self) -> str:
        return f"FileArtifactSource({str(self.data_dir)!r})"


class HttpArtifactSource:
    """Fetches artifacts over HTTP from a base URL."""

    base_url: str
    _client: httpx.Client

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        client: httpx.Client | None = None,
    ) -> None:
        """Initialize the source.

        Args:
            base_url: URL the artifact names are appended to
                (e.g., "http://models.internal/data")
            timeout: Default request timeout in seconds
            client: Preconfigured httpx client (auth, transport, ...)

        """
        self.base_url = base_url.rstrip("/")
        self._client = client if client is not None else httpx.Client(timeout=timeout)

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> Self:
        """Enter the source context and return self."""
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Exit the source context and close the HTTP client."""
        self.close()

    def read(self, name: str, timeout: float) -> bytes:
        """GET base_url/name and return the response body."""
        url = f"{self.base_url}/{name}"
        try:
            response = self._client.get(url, timeout=timeout)
            _ = response.raise_for_status()
        except httpx.HTTPStatusError as e:
            if e.response.status_code == HTTP_NOT_FOUND:
                msg = f"Artifact '{name}' not found at {url}"
                raise ArtifactNotFoundError(msg) from e
            msg = f"Server error fetching '{name}': {e.response.status_code}"
            raise ArtifactSourceError(msg) from e
        except httpx.TimeoutException as e:
            msg = f"Timed out fetching '{name}' after {timeout}s"
            raise ArtifactSourceError(msg) from e
        except httpx.RequestError as e:
            msg = f"Connection error fetching '{name}': {e}"
            raise ArtifactSourceError(msg) from e
        else:
            return response.content

    def __repr__(self) -> str:
        return f"HttpArtifactSource({self.base_url!r})"


def create_source(config: FraudboardConfig) -> ArtifactSource:
    """Pick the artifact source described by config."""
    if config.base_url:
        return HttpArtifactSource(config.base_url, timeout=config.fetch_timeout)
    return FileArtifactSource(config.data_dir)
