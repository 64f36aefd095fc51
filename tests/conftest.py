"""Shared fixtures for the artifact cleaner tests."""

import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from artifact_cleaner.github import Artifact


class FakeClient:
    def __init__(self, artifacts, *, list_error=None, fail_on=None):
        self._artifacts = artifacts
        self._list_error = list_error
        self._fail_on = fail_on
        self.list_calls = []
        self.deleted = []

    async def list_run_artifacts(self, run_id: int):
        self.list_calls.append(run_id)
        if self._list_error is not None:
            raise self._list_error
        return list(self._artifacts)

    async def delete_artifact(self, artifact_id: int) -> None:
        if artifact_id == self._fail_on:
            raise RuntimeError(f"failed to delete artifact {artifact_id}")
        self.deleted.append(artifact_id)


@pytest.fixture
def artifacts():
    return [
        Artifact(id=1, name="artifact-1", workflow_run_id=42),
        Artifact(id=2, name="artifact-2", workflow_run_id=42),
        Artifact(id=3, name="artifact-3", workflow_run_id=42),
    ]


@pytest.fixture
def runner_env(monkeypatch, tmp_path):
    """Environment of a workflow step with an output file."""
    for name in ("INPUT_INCLUDES", "INPUT_EXCLUDES", "INPUT_AUTH-TOKEN", "RUNNER_DEBUG"):
        monkeypatch.delenv(name, raising=False)
    output_file = tmp_path / "github_output"
    output_file.touch()
    monkeypatch.setenv("GITHUB_REPOSITORY", "owner/repo")
    monkeypatch.setenv("GITHUB_RUN_ID", "42")
    monkeypatch.setenv("GITHUB_OUTPUT", str(output_file))
    monkeypatch.delenv("GITHUB_API_URL", raising=False)
    return output_file
