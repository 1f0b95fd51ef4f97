"""Project configuration: catalog path resolution and log level."""

from __future__ import annotations

import logging
import os
from pathlib import Path

DEFAULT_LOG_LEVEL = "WARNING"

# ---------------------------------------------------------------------------
# Catalog location
# ---------------------------------------------------------------------------

CATALOG_ENV = "STOCKQ_CATALOG_PATH"
CATALOG_DIR = ".stockq"
CATALOG_FILE = "catalog.json"

# A directory holding any of these is treated as the checkout the shop data lives in.
_ROOT_MARKERS = (CATALOG_DIR, ".git", "pyproject.toml", "package.json")


def find_project_root(start: str | Path | None = None) -> Path:
    """Return the nearest directory at or above *start* that owns a catalog.

    A directory that already has ``.stockq/`` counts even without repository
    markers. With no marker anywhere up the tree, *start* is returned.
    """
    here = (Path(start) if start else Path.cwd()).resolve()
    return next(
        (d for d in (here, *here.parents) if any((d / m).exists() for m in _ROOT_MARKERS)),
        here,
    )


def resolve_catalog_path(project_root: str | Path | None = None) -> Path:
    """Where ``stockq search`` reads records from.

    ``$STOCKQ_CATALOG_PATH`` when set, else ``.stockq/catalog.json`` under
    the project root.
    """
    override = os.environ.get(CATALOG_ENV)
    if override:
        return Path(override).expanduser().resolve()

    root = Path(project_root) if project_root else find_project_root()
    return root / CATALOG_DIR / CATALOG_FILE


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------


def resolve_log_level(verbose: bool = False) -> int:
    """Pick the log level: ``--verbose`` wins, then STOCKQ_LOG_LEVEL."""
    if verbose:
        return logging.DEBUG
    name = os.environ.get("STOCKQ_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING
