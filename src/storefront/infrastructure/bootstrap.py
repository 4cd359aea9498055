"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import os
from pathlib import Path

from storefront.application.store_engine import StoreEngine
from storefront.domain.model.catalog import Catalog
from storefront.infrastructure.persistence.json_key_value_store import (
    JsonFileKeyValueStore,
)
from storefront.infrastructure.persistence.snapshot_gateway import SnapshotGateway
from storefront.infrastructure.seed_catalog import default_catalog

DATA_DIR_ENV = "STOREFRONT_DATA_DIR"
STORE_FILE_NAME = "storefront.json"

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def data_dir(override: Path | None = None) -> Path:
    """``override``, else ``$STOREFRONT_DATA_DIR``, else ``<repo>/data``."""
    if override is not None:
        return override
    env = os.environ.get(DATA_DIR_ENV)
    return Path(env) if env else _DEFAULT_DATA_DIR


def snapshot_gateway(directory: Path | None = None) -> SnapshotGateway:
    return SnapshotGateway(JsonFileKeyValueStore(data_dir(directory) / STORE_FILE_NAME))


def store_engine(
    directory: Path | None = None,
    catalog: Catalog | None = None,
) -> StoreEngine:
    return StoreEngine.load(
        catalog if catalog is not None else default_catalog(),
        snapshot_gateway(directory),
    )
