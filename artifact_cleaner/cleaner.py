"""Delete the artifacts of the current workflow run that match the name filters."""
from __future__ import annotations

import json
import logging
from typing import List, Optional, Protocol, Sequence

from .github import Artifact
from .inputs import RunContext, parse_input

logger = logging.getLogger(__name__)


class ArtifactApi(Protocol):
    async def list_run_artifacts(self, run_id: int) -> List[Artifact]: ...

    async def delete_artifact(self, artifact_id: int) -> None: ...


def matches_include(name: str, includes: Sequence[str]) -> bool:
    """An empty include list selects every artifact."""
    return not includes or name in includes


def matches_exclude(name: str, excludes: Sequence[str]) -> bool:
    return bool(excludes) and name in excludes


async def delete_workflow_artifacts(
    client: ArtifactApi,
    context: RunContext,
    includes: Optional[Sequence[str]] = None,
    excludes: Optional[Sequence[str]] = None,
) -> List[Artifact]:
    """Delete matching artifacts one at a time and return them in listing order.

    Errors from the listing or from any deletion propagate immediately; the
    artifacts deleted before the failure stay deleted.
    """
    if includes is None:
        includes = parse_input("includes")
    if excludes is None:
        excludes = parse_input("excludes")

    logger.debug("List of artifacts to include: %s", list(includes))
    logger.debug("List of artifacts to exclude: %s", list(excludes))

    artifacts = await client.list_run_artifacts(context.run_id)

    deleted: List[Artifact] = []
    for artifact in artifacts:
        printable = json.dumps(artifact.describe())
        logger.debug("Processing artifact: %s", printable)
        match_include = matches_include(artifact.name, includes)
        logger.debug("Artifact to include: %s", match_include)
        match_exclude = matches_exclude(artifact.name, excludes)
        logger.debug("Artifact to exclude: %s", match_exclude)

        # Exclusion takes precedence over inclusion.
        if not match_include or match_exclude:
            logger.debug("Ignore artifact: %s", printable)
            continue

        logger.info("Deleting artifact: %s", printable)
        await client.delete_artifact(artifact.id)
        deleted.append(artifact)

    return deleted
