"""Rewrite version references in function and example READMEs.

Three substitutions are applied to each file, in order:

1. Tags: ``apply-setters:v1.0`` / ``apply-setters/unstable`` -> latest patch
2. Catalog URLs: ``https://catalog.kpt.dev/apply-setters/v1.0.1`` -> minor
3. Example packages: ``<source>.git/examples/apply-setters-simple`` gets
   pinned with ``@apply-setters/<latest patch>``

Text outside the matched spans is left untouched.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from .config import DEFAULT_CATALOG_HOST, DEFAULT_SOURCE_URL, Settings
from .models import FunctionRelease

log = logging.getLogger(__name__)

# unstable, v0.1.1 or v0.1
VERSION_GROUP = r"unstable|v\d+\.\d+\.\d+|v\d+\.\d+"


def replace_tags(release: FunctionRelease, contents: str) -> str:
    """Point image and ref tags at the latest patch, keeping the separator."""
    pattern = re.compile(
        rf"({re.escape(release.function_name)})(:|/)({VERSION_GROUP})"
    )
    return pattern.sub(
        lambda m: f"{m.group(1)}{m.group(2)}{release.latest_patch_version}", contents
    )


def replace_catalog_urls(
    release: FunctionRelease, contents: str, catalog_host: str = DEFAULT_CATALOG_HOST
) -> str:
    """Point catalog URLs at the minor version alias."""
    pattern = re.compile(
        rf"(https://{re.escape(catalog_host)}/{re.escape(release.function_name)}/)"
        rf"({VERSION_GROUP})"
    )
    return pattern.sub(lambda m: f"{m.group(1)}{release.minor_version}", contents)


def replace_example_packages(
    release: FunctionRelease, contents: str, source_url: str = DEFAULT_SOURCE_URL
) -> str:
    """Pin example package references to the latest patch tag."""
    if not release.examples:
        return contents
    names = "|".join(re.escape(name) for name in release.example_names)
    pattern = re.compile(
        rf"({re.escape(source_url)}/{re.escape(release.examples_subpath)}/)"
        rf"({names})(\s+)"
    )
    ref = f"@{release.function_name}/{release.latest_patch_version}"
    return pattern.sub(lambda m: f"{m.group(1)}{m.group(2)}{ref}{m.group(3)}", contents)


def rewrite(release: FunctionRelease, contents: str, settings: Settings | None = None) -> str:
    """Apply all three substitutions in a single pass."""
    settings = settings or Settings()
    contents = replace_tags(release, contents)
    contents = replace_catalog_urls(release, contents, settings.catalog_host)
    contents = replace_example_packages(release, contents, settings.source_url)
    return contents


def update_doc(release: FunctionRelease, path: Path, settings: Settings | None = None) -> bool:
    """Rewrite one doc file in place.

    Bytes that are not valid UTF-8 are written back unchanged.

    Returns:
        True if the file contents changed
    """
    original = path.read_bytes().decode("utf-8", errors="surrogateescape")
    updated = rewrite(release, original, settings)
    if updated == original:
        log.debug("%s already up to date", path)
        return False
    path.write_bytes(updated.encode("utf-8", errors="surrogateescape"))
    log.info("Updated %s", path)
    return True


def update_docs(release: FunctionRelease, settings: Settings | None = None) -> list[Path]:
    """Rewrite the function README, then every example README.

    The first read or write error aborts the pass. Files already rewritten
    stay modified.

    Returns:
        The files that changed
    """
    return [path for path in release.readme_paths if update_doc(release, path, settings)]
