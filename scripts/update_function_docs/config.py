"""Runtime settings, read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

# scripts/update_function_docs/config.py -> repo root
DEFAULT_CATALOG_ROOT = Path(__file__).resolve().parent.parent.parent
DEFAULT_CATALOG_HOST = "catalog.kpt.dev"
DEFAULT_SOURCE_URL = "https://github.com/GoogleContainerTools/kpt-functions-catalog.git"


@dataclass(frozen=True)
class Settings:
    """Settings for a docs update run.

    Attributes:
        catalog_root: Root of the function catalog checkout
        catalog_host: Host serving the function catalog pages
        source_url: Git URL that example package references start with
        log_level: Logging level name
    """

    catalog_root: Path = DEFAULT_CATALOG_ROOT
    catalog_host: str = DEFAULT_CATALOG_HOST
    source_url: str = DEFAULT_SOURCE_URL
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ
        return cls(
            catalog_root=Path(env.get("CATALOG_ROOT", str(DEFAULT_CATALOG_ROOT))),
            catalog_host=env.get("CATALOG_HOST", DEFAULT_CATALOG_HOST),
            source_url=env.get("CATALOG_SOURCE_URL", DEFAULT_SOURCE_URL).rstrip("/"),
            log_level=env.get("LOG_LEVEL", "INFO").upper(),
        )
