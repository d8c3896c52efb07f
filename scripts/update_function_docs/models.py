"""Data models for a function release."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from .errors import InvalidBranchFormatError

SUPPORTED_LANGUAGES = ("go", "ts")

# e.g. origin/apply-setters/v1.0
_RELEASE_BRANCH = re.compile(r"^(?:.*/)?(?P<function>[-\w]+)/(?P<minor>v\d+\.\d+)$")
# e.g. functions/go/apply-setters/v1.0.1
_RELEASE_TAG = re.compile(
    r"^(?:.*/)?(?P<language>%s)/(?P<function>[-\w]+)/(?P<patch>v\d+\.\d+\.\d+)$"
    % "|".join(SUPPORTED_LANGUAGES)
)


@dataclass(frozen=True)
class ReleaseBranch:
    """Function and minor version named by a release branch."""

    function_name: str
    minor_version: str  # "v1.0"


@dataclass(frozen=True)
class ReleaseTag:
    """A published release tag."""

    language: str  # "go" | "ts"
    function_name: str
    patch_version: str  # "v1.0.1"


@dataclass(frozen=True)
class FunctionExample:
    """An example package that documents a function."""

    name: str  # "apply-setters-simple"
    path: Path

    @property
    def readme(self) -> Path:
        return self.path / "README.md"


@dataclass(frozen=True)
class FunctionRelease:
    """A function release resolved from a release branch and the repo tags."""

    function_name: str
    minor_version: str
    language: str
    latest_patch_version: str
    function_path: Path
    is_contrib: bool = False
    examples: tuple[FunctionExample, ...] = ()

    @property
    def example_names(self) -> list[str]:
        return [example.name for example in self.examples]

    @property
    def examples_subpath(self) -> str:
        """Repo-relative examples directory used in package URLs."""
        return "contrib/examples" if self.is_contrib else "examples"

    @property
    def readme(self) -> Path:
        return self.function_path / "README.md"

    @property
    def readme_paths(self) -> list[Path]:
        """Function README first, then example READMEs in metadata order."""
        return [self.readme] + [example.readme for example in self.examples]

    @property
    def commit_message(self) -> str:
        return (
            f"docs: Update tags for "
            f"{self.language}/{self.function_name}/{self.latest_patch_version}"
        )


class FunctionMetadata(BaseModel):
    """The parts of a function's metadata.yaml that are read.

    Everything except ``examplePackageURLs`` is ignored.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    example_package_urls: list[str] = Field(
        default_factory=list, alias="examplePackageURLs"
    )

    @property
    def example_names(self) -> list[str]:
        """Final path segment of each example package URL."""
        return [url.rstrip("/").split("/")[-1] for url in self.example_package_urls]


def parse_release_branch(branch: str) -> ReleaseBranch:
    """Parse ``*/<function>/vX.Y`` into a ReleaseBranch.

    Raises:
        InvalidBranchFormatError: If the branch does not end in <function>/vX.Y
    """
    match = _RELEASE_BRANCH.match(branch.strip())
    if not match:
        raise InvalidBranchFormatError(branch)
    return ReleaseBranch(
        function_name=match.group("function"),
        minor_version=match.group("minor"),
    )


def parse_release_tag(tag: str) -> ReleaseTag | None:
    """Parse ``*/<language>/<function>/vX.Y.Z``; None for any other tag."""
    match = _RELEASE_TAG.match(tag.strip())
    if not match:
        return None
    return ReleaseTag(
        language=match.group("language"),
        function_name=match.group("function"),
        patch_version=match.group("patch"),
    )
