"""GitHub Actions artifact API client."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

import httpx


DEFAULT_API_URL = "https://api.github.com"
API_VERSION = "2022-11-28"


@dataclass(frozen=True)
class Artifact:
    """A workflow run artifact as returned by the listing endpoint."""

    id: int
    name: str
    workflow_run_id: Optional[int] = None

    @classmethod
    def from_api(cls, payload: dict) -> "Artifact":
        workflow_run = payload.get("workflow_run") or {}
        return cls(
            id=payload["id"],
            name=payload["name"],
            workflow_run_id=workflow_run.get("id"),
        )

    def describe(self) -> dict:
        """Record used for log lines and the ``deleted-artifacts`` output."""
        return {"id": self.id, "name": self.name, "workflow_run_id": self.workflow_run_id}


class GithubArtifactClient:
    """Thin async wrapper around the GitHub REST API."""

    def __init__(
        self,
        token: str,
        owner: str,
        repo: str,
        *,
        per_page: int = 100,
        base_url: str = DEFAULT_API_URL,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.owner = owner
        self.repo = repo
        self.per_page = per_page
        self._client = httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            timeout=timeout,
            transport=transport,
            headers={
                "Authorization": f"Bearer {token}",
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": API_VERSION,
                "User-Agent": "artifact-cleaner",
            },
        )

    async def __aenter__(self) -> "GithubArtifactClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def close(self) -> None:
        await self._client.aclose()

    async def list_run_artifacts(self, run_id: int) -> List[Artifact]:
        # A single page is requested; larger listings are not followed.
        response = await self._client.get(
            f"/repos/{self.owner}/{self.repo}/actions/runs/{run_id}/artifacts",
            params={"per_page": self.per_page},
        )
        response.raise_for_status()
        payload = response.json()
        return [Artifact.from_api(item) for item in payload.get("artifacts", [])]

    async def delete_artifact(self, artifact_id: int) -> None:
        response = await self._client.delete(
            f"/repos/{self.owner}/{self.repo}/actions/artifacts/{artifact_id}"
        )
        response.raise_for_status()
