"""Per-invocation CLI state shared by every command via ``ctx.obj``."""

from __future__ import annotations

from functools import cached_property
from pathlib import Path

from storefront.application.store_engine import StoreEngine
from storefront.infrastructure.bootstrap import snapshot_gateway, store_engine
from storefront.infrastructure.persistence.snapshot_gateway import SnapshotGateway


class CliContext:

    def __init__(self, data_dir: Path | None = None) -> None:
        self.data_dir = data_dir

    @cached_property
    def engine(self) -> StoreEngine:
        return store_engine(self.data_dir)

    @cached_property
    def gateway(self) -> SnapshotGateway:
        return snapshot_gateway(self.data_dir)
