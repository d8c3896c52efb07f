"""Pytest fixtures for update_function_docs tests."""

import pytest

from update_function_docs.config import Settings
from tests.helpers import FakeGit, write_example, write_function


@pytest.fixture
def catalog(tmp_path):
    """A catalog checkout with apply-setters and one example."""
    write_function(tmp_path)
    write_example(tmp_path)
    return tmp_path


@pytest.fixture
def fake_git(catalog):
    return FakeGit(catalog)


@pytest.fixture
def settings(catalog):
    return Settings(catalog_root=catalog)
