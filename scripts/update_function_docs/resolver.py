"""Resolve a release branch into a FunctionRelease.

The latest patch version comes from the repo tags, the language from the
same winning tag, and the doc paths from the catalog layout on disk:

    functions/<language>/<function>            examples/<example>
    contrib/functions/<language>/<function>    contrib/examples/<example>
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Protocol

import yaml
from packaging.version import Version
from pydantic import ValidationError

from .errors import (
    ExampleDirectoryMissingError,
    FunctionPathNotFoundError,
    MetadataError,
    MissingIdentifierError,
    NoMatchingReleaseError,
)
from .models import (
    FunctionExample,
    FunctionMetadata,
    FunctionRelease,
    parse_release_branch,
    parse_release_tag,
)

log = logging.getLogger(__name__)


class TagSource(Protocol):
    def tags(self) -> list[str]: ...


def resolve_latest_patch(
    function_name: str, minor_version: str, tags: Iterable[str]
) -> tuple[str, str]:
    """Find the highest patch version published for function/minor.

    Args:
        function_name: Function name, e.g. "apply-setters"
        minor_version: Minor version, e.g. "v1.0"
        tags: All tags in the repo

    Returns:
        (language, patch_version) taken from the same winning tag

    Raises:
        MissingIdentifierError: If function_name or minor_version is empty
        NoMatchingReleaseError: If no tag matches
    """
    if not function_name or not minor_version:
        raise MissingIdentifierError()

    needle = f"{function_name}/{minor_version}"
    language = latest = ""
    for tag in tags:
        if needle not in tag:
            continue
        parsed = parse_release_tag(tag)
        if parsed is None or parsed.function_name != function_name:
            continue
        if parsed.patch_version.rsplit(".", 1)[0] != minor_version:
            continue
        # Strictly greater, so the first of equal versions wins
        if not latest or Version(parsed.patch_version) > Version(latest):
            latest = parsed.patch_version
            language = parsed.language

    if not latest:
        raise NoMatchingReleaseError(function_name, minor_version)
    log.debug("Latest release for %s is %s/%s", needle, language, latest)
    return language, latest


def discover_paths(root: Path, function_name: str, language: str) -> tuple[Path, Path, bool]:
    """Locate the function directory, core catalog first.

    Returns:
        (function_path, examples_root, is_contrib)

    Raises:
        FunctionPathNotFoundError: If neither layout exists
    """
    candidates = [
        (root / "functions" / language / function_name, root / "examples", False),
        (
            root / "contrib" / "functions" / language / function_name,
            root / "contrib" / "examples",
            True,
        ),
    ]
    for function_path, examples_root, is_contrib in candidates:
        if function_path.is_dir():
            return function_path, examples_root, is_contrib
    raise FunctionPathNotFoundError([str(c[0]) for c in candidates])


def load_metadata(metadata_file: Path) -> FunctionMetadata:
    """Read and validate a function's metadata.yaml."""
    try:
        with open(metadata_file) as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise MetadataError(f"cannot read {metadata_file}: {e}") from e
    except yaml.YAMLError as e:
        raise MetadataError(f"invalid YAML in {metadata_file}: {e}") from e

    try:
        return FunctionMetadata.model_validate(data or {})
    except ValidationError as e:
        raise MetadataError(f"invalid metadata in {metadata_file}: {e}") from e


def read_examples(metadata_file: Path, examples_root: Path) -> tuple[FunctionExample, ...]:
    """Build the example list from metadata, checking each exists on disk.

    Raises:
        MetadataError: If the metadata file is unreadable or malformed
        ExampleDirectoryMissingError: If a listed example has no directory
    """
    metadata = load_metadata(metadata_file)
    examples = []
    for name in metadata.example_names:
        path = examples_root / name
        if not path.is_dir():
            raise ExampleDirectoryMissingError(str(path))
        examples.append(FunctionExample(name=name, path=path))
    return tuple(examples)


def resolve_release(branch: str, git: TagSource, root: Path) -> FunctionRelease:
    """Resolve everything needed to update docs for a release branch."""
    parsed = parse_release_branch(branch)
    language, latest = resolve_latest_patch(
        parsed.function_name, parsed.minor_version, git.tags()
    )
    function_path, examples_root, is_contrib = discover_paths(
        root, parsed.function_name, language
    )
    examples = read_examples(function_path / "metadata.yaml", examples_root)
    return FunctionRelease(
        function_name=parsed.function_name,
        minor_version=parsed.minor_version,
        language=language,
        latest_patch_version=latest,
        function_path=function_path,
        is_contrib=is_contrib,
        examples=examples,
    )
