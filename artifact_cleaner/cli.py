"""Entry point for the artifact cleanup step."""
from __future__ import annotations

import argparse
import asyncio
import logging
import os
from typing import List, Mapping, Optional

from .cleaner import delete_workflow_artifacts
from .github import Artifact, GithubArtifactClient
from .inputs import RunContext, get_input, parse_input, split_names
from .workflow import configure_logging, set_failed, set_output

OUTPUT_NAME = "deleted-artifacts"

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description=(
            "Delete artifacts of the current GitHub Actions workflow run. "
            "Without arguments every value is read from the runner environment."
        )
    )
    parser.add_argument("--token", default=None, help="GitHub token (defaults to the auth-token input)")
    parser.add_argument("--owner", default=None, help="Repository owner (defaults to GITHUB_REPOSITORY)")
    parser.add_argument("--repo", default=None, help="Repository name (defaults to GITHUB_REPOSITORY)")
    parser.add_argument("--run-id", type=int, default=None, help="Workflow run id (defaults to GITHUB_RUN_ID)")
    parser.add_argument("--api-url", default=None, help="API base URL (defaults to GITHUB_API_URL)")
    parser.add_argument(
        "--includes",
        default=None,
        help="Newline-separated artifact names to delete (defaults to the includes input, empty means all)",
    )
    parser.add_argument(
        "--excludes",
        default=None,
        help="Newline-separated artifact names to keep (defaults to the excludes input)",
    )
    return parser


def resolve_context(args: argparse.Namespace, environ: Mapping[str, str]) -> RunContext:
    return RunContext.from_env(
        environ,
        owner=args.owner,
        repo=args.repo,
        run_id=args.run_id,
        api_url=args.api_url,
    )


def _names(value: Optional[str], input_name: str, environ: Mapping[str, str]) -> List[str]:
    if value is not None:
        return split_names(value)
    return parse_input(input_name, environ)


async def run(args: argparse.Namespace, environ: Optional[Mapping[str, str]] = None) -> List[Artifact]:
    environ = os.environ if environ is None else environ
    token = args.token or get_input("auth-token", required=True, environ=environ)
    context = resolve_context(args, environ)
    includes = _names(args.includes, "includes", environ)
    excludes = _names(args.excludes, "excludes", environ)

    async with GithubArtifactClient(token, context.owner, context.repo, base_url=context.api_url) as client:
        return await delete_workflow_artifacts(client, context, includes=includes, excludes=excludes)


def main(argv: list[str] | None = None) -> int:
    configure_logging()
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        deleted = asyncio.run(run(args))
        set_output(OUTPUT_NAME, [artifact.describe() for artifact in deleted])
    except Exception as error:
        set_failed(str(error) or repr(error))
        return 1

    logger.info("Deleted %d artifact(s)", len(deleted))
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
