"""Action inputs and workflow run identity."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import List, Mapping, Optional

from .github import DEFAULT_API_URL


class InputError(ValueError):
    """Raised when a required input or runner variable is missing or invalid."""


def _input_variable(name: str) -> str:
    return "INPUT_" + name.replace(" ", "_").upper()


def get_input(name: str, *, required: bool = False, environ: Optional[Mapping[str, str]] = None) -> str:
    """Return the trimmed value of an action input, or an empty string if unset."""
    environ = os.environ if environ is None else environ
    value = environ.get(_input_variable(name), "").strip()
    if required and not value:
        raise InputError(f"Input required and not supplied: {name}")
    return value


def split_names(raw: str) -> List[str]:
    return [element.strip() for element in raw.split("\n") if element.strip()]


def parse_input(name: str, environ: Optional[Mapping[str, str]] = None) -> List[str]:
    """Read a multi-line input as a list of non-empty, trimmed names."""
    return split_names(get_input(name, environ=environ))


@dataclass(frozen=True)
class RunContext:
    owner: str
    repo: str
    run_id: int
    api_url: str = DEFAULT_API_URL

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        *,
        owner: Optional[str] = None,
        repo: Optional[str] = None,
        run_id: Optional[int] = None,
        api_url: Optional[str] = None,
    ) -> "RunContext":
        """Build the context from runner variables; explicit values win and skip the lookup."""
        environ = os.environ if environ is None else environ
        if not (owner and repo):
            repository = environ.get("GITHUB_REPOSITORY", "")
            env_owner, _, env_repo = repository.partition("/")
            owner, repo = owner or env_owner, repo or env_repo
            if not owner or not repo:
                raise InputError(f"GITHUB_REPOSITORY must look like 'owner/repo', got {repository!r}")
        if run_id is None:
            raw_run_id = environ.get("GITHUB_RUN_ID", "")
            try:
                run_id = int(raw_run_id)
            except ValueError:
                raise InputError(f"GITHUB_RUN_ID must be an integer, got {raw_run_id!r}") from None
        return cls(
            owner=owner,
            repo=repo,
            run_id=run_id,
            api_url=api_url or environ.get("GITHUB_API_URL") or DEFAULT_API_URL,
        )
