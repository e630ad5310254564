# Copyright (c) Syntropy Systems
"""Pytest fixtures for fraudboard tests."""
from __future__ import annotations

import json
import os
import tempfile
from collections.abc import Callable, Generator
from pathlib import Path

import pytest

from fraudboard.errors import ArtifactNotFoundError

# Store original cwd at module load time
_original_cwd = Path.cwd()

METRICS_DOC = {
    "best_threshold": 0.40,
    "recall": 0.54,
    "precision": 0.54,
    "f1_score": 0.542,
}
CURVE_DOC = {"recall": [0, 0.5, 1.0], "precision": [1.0, 0.8, 0.4]}


class InMemorySource:
    """Artifact source backed by a dict of name -> bytes."""

    def __init__(self, artifacts: dict[str, bytes]) -> None:
        self.artifacts = artifacts
        self.reads: list[str] = []

    def read(self, name: str, timeout: float) -> bytes:
        self.reads.append(name)
        if name not in self.artifacts:
            msg = f"Artifact '{name}' not found"
            raise ArtifactNotFoundError(msg)
        return self.artifacts[name]


def encode(document: object) -> bytes:
    """Serialize a document the way an artifact file stores it."""
    return json.dumps(document).encode()


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def memory_source() -> Callable[..., InMemorySource]:
    """Factory for in-memory sources.

    Documents default to the reference metrics and curve; pass None to leave
    an artifact out, or bytes to store a payload verbatim.
    """

    def make(
        metrics: object = METRICS_DOC,
        curve: object = CURVE_DOC,
    ) -> InMemorySource:
        artifacts: dict[str, bytes] = {}
        for name, document in (
            ("performance_metrics.json", metrics),
            ("pr_curve_data.json", curve),
        ):
            if document is None:
                continue
            artifacts[name] = document if isinstance(document, bytes) else encode(document)
        return InMemorySource(artifacts)

    return make


@pytest.fixture
def data_dir(temp_dir: Path) -> Path:
    """A data directory holding the reference artifacts."""
    path = temp_dir / "data"
    path.mkdir()
    _ = (path / "performance_metrics.json").write_text(json.dumps(METRICS_DOC))
    _ = (path / "pr_curve_data.json").write_text(json.dumps(CURVE_DOC))
    return path


@pytest.fixture
def fraudboard_project(data_dir: Path) -> Generator[Path, None, None]:
    """Create a temporary fraudboard project with artifacts in data/."""
    project = data_dir.parent
    config_dir = project / ".fraudboard"
    config_dir.mkdir()
    _ = (config_dir / "config.yaml").write_text("fetch_timeout: 2\n")

    # Change to project directory
    os.chdir(project)

    yield project

    # Always return to original cwd
    os.chdir(_original_cwd)
