"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.

Settings are read from the environment on every call so the CLI (and
its tests) can point a single process at different data directories.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from freshcart.infrastructure.admin_guard import TokenAdminGuard
from freshcart.infrastructure.persistence.json_cart_store import JsonCartStore
from freshcart.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from freshcart.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    admin_token: str | None
    log_level: str

    @staticmethod
    def from_env() -> Settings:
        data_dir = os.environ.get("FRESHCART_DATA_DIR")
        return Settings(
            data_dir=Path(data_dir) if data_dir else _DEFAULT_DATA_DIR,
            admin_token=os.environ.get("FRESHCART_ADMIN_TOKEN") or None,
            log_level=os.environ.get("FRESHCART_LOG_LEVEL", "WARNING").upper(),
        )


def settings() -> Settings:
    return Settings.from_env()


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(settings().data_dir / "products.json")


def order_repository() -> JsonOrderRepository:
    return JsonOrderRepository(settings().data_dir / "orders.json")


def cart_store() -> JsonCartStore:
    return JsonCartStore(settings().data_dir / "carts")


def admin_guard() -> TokenAdminGuard:
    return TokenAdminGuard(settings().admin_token)
