"""Base model for cached sync payloads.

Every model stored in the cache inherits from :class:`SyncBaseModel`,
which provides:

* ``frozen=True``: a snapshot read from disk is never mutated in place.
* ``extra="allow"``: keys the server adds that are not modelled here are
  kept and written back, so a cache round trip loses nothing.
* ``populate_by_name=True``: fields with a wire alias (``type``) can also
  be set by their Python name.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class SyncBaseModel(BaseModel):
    """Base for sync response models."""

    model_config = ConfigDict(
        frozen=True,
        extra="allow",
        populate_by_name=True,
    )
