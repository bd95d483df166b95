"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, cutgraph.toml only contains
overrides. CutgraphSettings composes the sections.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from cutgraph.analysis.components import DEFAULT_PALETTE
from cutgraph.infrastructure.graph.store import (
    DEFAULT_EDGE_PICK_RADIUS,
    DEFAULT_VERTEX_PICK_RADIUS,
)


class PickingConfig(BaseModel):
    """[picking] section."""

    model_config = {"frozen": True}

    vertex_radius: float = Field(default=DEFAULT_VERTEX_PICK_RADIUS, gt=0)
    edge_radius: float = Field(default=DEFAULT_EDGE_PICK_RADIUS, gt=0)


class ComponentsConfig(BaseModel):
    """[components] section."""

    model_config = {"frozen": True}

    palette: tuple[str, ...] = DEFAULT_PALETTE

    @field_validator("palette")
    @classmethod
    def _non_empty(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if not value:
            raise ValueError("palette must contain at least one colour")
        return value
