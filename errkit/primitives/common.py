"""
errkit — Common Primitives

Shared base classes and utilities used across the error and assertion layers.
"""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, Field
from ulid import ULID


def new_id() -> str:
    """Generate a new ULID string. Time-sortable, globally unique."""
    return str(ULID())


def utc_now() -> datetime:
    """Current UTC time, timezone-aware."""
    return datetime.now(timezone.utc)


# ─── Base Models ──────────────────────────────────────────────────


class ErrkitBaseModel(BaseModel):
    """Base model for all errkit primitives."""

    model_config = {
        "populate_by_name": True,
        "from_attributes": True,
        "arbitrary_types_allowed": True,
        "validate_assignment": False,
    }


class Identified(ErrkitBaseModel):
    """Mixin for models with ULID IDs."""

    id: str = Field(default_factory=new_id)
