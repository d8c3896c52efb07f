"""Update function and example docs for a release branch.

Usage:
    update-function-docs <RELEASE_BRANCH>

    e.g. update-function-docs origin/apply-setters/v0.2

Checks out the release branch, rewrites the function and example READMEs to
reference the latest patch version for the release, and commits the result.
Pushing the commit and opening a pull request are left to the operator.
"""

from __future__ import annotations

import argparse
import logging
import sys

from .config import Settings
from .errors import DirtyWorkingTreeError, DocsUpToDateError, UpdateDocsError
from .git import Git
from .models import FunctionRelease
from .resolver import resolve_release
from .rewriter import update_docs

log = logging.getLogger(__name__)


def run(branch: str, git: Git, settings: Settings) -> FunctionRelease:
    """Update the docs for ``branch`` and commit them.

    Raises:
        UpdateDocsError: On the first failing step
        OSError: If a doc file cannot be read or written
    """
    if not git.is_clean():
        raise DirtyWorkingTreeError()
    git.fetch_tags()
    git.checkout(branch)

    release = resolve_release(branch, git, settings.catalog_root)
    print(
        f"Release {release.language}/{release.function_name}/"
        f"{release.latest_patch_version} ({len(release.examples)} examples)"
    )

    changed = update_docs(release, settings)
    if not changed or git.is_clean():
        raise DocsUpToDateError()
    for path in changed:
        print(f"  ✓ {path.relative_to(settings.catalog_root)}")

    git.add_tracked()
    print(git.commit(release.commit_message))
    print(git.show())
    return release


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="update-function-docs",
        description="Update function docs with the latest patch version of a release.",
    )
    parser.add_argument("release_branch", help="release branch, e.g. origin/apply-setters/v0.2")
    ns = parser.parse_args(argv)

    settings = Settings.from_env()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    git = Git(settings.catalog_root)
    try:
        run(ns.release_branch, git, settings)
    except (UpdateDocsError, OSError) as e:
        log.debug("Update failed", exc_info=True)
        print(e, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
