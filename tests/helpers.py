"""Shared helpers for update_function_docs tests."""

from pathlib import Path

FUNCTION_README = """\
# apply-setters

Image: gcr.io/kpt-fn/apply-setters:unstable

Docs: https://catalog.kpt.dev/apply-setters/v1.0.1/

    kpt fn eval --image gcr.io/kpt-fn/apply-setters:v1.0
"""

EXAMPLE_README = """\
# apply-setters: Simple Example

    kpt pkg get https://github.com/GoogleContainerTools/kpt-functions-catalog.git/examples/apply-setters-simple

    kpt fn render apply-setters-simple
"""

METADATA = """\
image: gcr.io/kpt-fn/apply-setters
description: Update the field values parameterized by setters.
tags:
  - mutator
examplePackageURLs:
  - https://github.com/GoogleContainerTools/kpt-functions-catalog/tree/master/examples/apply-setters-simple
"""

TAGS = [
    "functions/go/apply-setters/v0.1.0",
    "functions/go/apply-setters/v1.0.0",
    "functions/go/apply-setters/v1.0.1",
    "functions/go/set-namespace/v1.0.4",
    "v0.1",
]


class FakeGit:
    """In-memory stand-in for Git.

    The working tree counts as clean while every file under root matches the
    snapshot taken at construction or at the last commit.
    """

    def __init__(self, root: Path, tags: list[str] | None = None):
        self.root = root
        self.tag_list = list(TAGS if tags is None else tags)
        self.calls: list[tuple] = []
        self.commits: list[str] = []
        self._snapshot = self._read_tree()

    def _read_tree(self) -> dict[Path, bytes]:
        return {p: p.read_bytes() for p in self.root.rglob("*") if p.is_file()}

    def fetch_tags(self) -> None:
        self.calls.append(("fetch_tags",))

    def checkout(self, branch: str) -> None:
        self.calls.append(("checkout", branch))

    def tags(self) -> list[str]:
        self.calls.append(("tags",))
        return list(self.tag_list)

    def is_clean(self) -> bool:
        self.calls.append(("is_clean",))
        return self._read_tree() == self._snapshot

    def add_tracked(self) -> None:
        self.calls.append(("add_tracked",))

    def commit(self, message: str) -> str:
        self.calls.append(("commit", message))
        self.commits.append(message)
        self._snapshot = self._read_tree()
        return f"[release 0000000] {message}"

    def show(self) -> str:
        self.calls.append(("show",))
        return self.commits[-1] if self.commits else ""


def write_function(
    root: Path,
    name: str = "apply-setters",
    language: str = "go",
    contrib: bool = False,
    readme: str = FUNCTION_README,
    metadata: str = METADATA,
) -> Path:
    base = root / "contrib" if contrib else root
    path = base / "functions" / language / name
    path.mkdir(parents=True)
    (path / "README.md").write_text(readme)
    (path / "metadata.yaml").write_text(metadata)
    return path


def write_example(
    root: Path, name: str = "apply-setters-simple", contrib: bool = False, readme: str = EXAMPLE_README
) -> Path:
    base = root / "contrib" if contrib else root
    path = base / "examples" / name
    path.mkdir(parents=True)
    (path / "README.md").write_text(readme)
    return path


