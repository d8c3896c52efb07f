"""Update function and example docs for a catalog release branch."""

from .cli import main, run
from .models import FunctionExample, FunctionRelease

__all__ = ["FunctionExample", "FunctionRelease", "main", "run"]
