"""Store metadata model."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class StoreMetadata(BaseModel):
    """Small structure stored next to, and independently of, the snapshot."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    account_data: dict[str, Any] | None = None
