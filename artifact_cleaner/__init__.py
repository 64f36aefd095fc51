"""Delete GitHub Actions artifacts of the current workflow run."""

from .cleaner import delete_workflow_artifacts
from .github import Artifact, GithubArtifactClient
from .inputs import InputError, RunContext, parse_input

__all__ = [
    "Artifact",
    "GithubArtifactClient",
    "InputError",
    "RunContext",
    "delete_workflow_artifacts",
    "parse_input",
]
