"""Exceptions raised while updating release docs.

Every error is fatal to a run. ``cli.main`` reports them on stderr and exits
non-zero.
"""

from __future__ import annotations


class UpdateDocsError(Exception):
    """Base exception for update_function_docs."""


class InvalidBranchFormatError(UpdateDocsError):
    """Raised when a release branch is not shaped like */<function>/vX.Y."""

    def __init__(self, branch: str):
        super().__init__(f"invalid branch format: {branch!r}")
        self.branch = branch


class MissingIdentifierError(UpdateDocsError):
    """Raised when the function name or minor version is empty."""

    def __init__(self) -> None:
        super().__init__("missing function name and/or minor version")


class NoMatchingReleaseError(UpdateDocsError):
    """Raised when no tag was published for the function/minor version."""

    def __init__(self, function_name: str, minor_version: str):
        super().__init__(
            f"could not find matching tag for release branch "
            f"{function_name}/{minor_version}"
        )
        self.function_name = function_name
        self.minor_version = minor_version


class FunctionPathNotFoundError(UpdateDocsError):
    """Raised when the function exists in neither the core nor contrib tree."""

    def __init__(self, tried: list[str]):
        super().__init__(f"function doc paths not found from {tried}")
        self.tried = tried


class ExampleDirectoryMissingError(UpdateDocsError):
    """Raised when metadata lists an example that is not on disk."""

    def __init__(self, path: str):
        super().__init__(f"example dir does not exist: {path}")
        self.path = path


class MetadataError(UpdateDocsError):
    """Raised when a function's metadata.yaml cannot be read or parsed."""

    pass


class DirtyWorkingTreeError(UpdateDocsError):
    """Raised when the working tree has uncommitted changes before a run."""

    def __init__(self) -> None:
        super().__init__("dirty repo: commit or stash changes before updating docs")


class DocsUpToDateError(UpdateDocsError):
    """Raised when the rewrite pass changed nothing."""

    def __init__(self) -> None:
        super().__init__("docs up to date")


class GitCommandError(UpdateDocsError):
    """Raised when a git command exits non-zero.

    Keeps the command line and the captured diagnostic output so the
    operator can see what git complained about.
    """

    def __init__(self, command: list[str], output: str, returncode: int):
        joined = " ".join(command)
        super().__init__(f"{joined} failed with exit code {returncode}\n{output}".rstrip())
        self.command = command
        self.output = output
        self.returncode = returncode
