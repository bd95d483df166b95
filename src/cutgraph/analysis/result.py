"""AnalysisResult: immutable snapshot of the last analysis pass.

INVARIANT: A result is replaced, never mutated. Tree and back edges are
disjoint and every bridge is a tree edge.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Literal

from pydantic import BaseModel, Field, field_serializer, field_validator

from cutgraph.domain.types import EdgeKey

AnalysisKind = Literal["empty", "structural", "components"]


def _edge_list(keys: frozenset[EdgeKey]) -> list[list[int]]:
    return [[k.low, k.high] for k in sorted(keys)]


def _frozen_map() -> Mapping[int, Any]:
    return MappingProxyType({})


class AnalysisResult(BaseModel):
    """Articulation points, edge classification, and component labeling.

    Attributes:
        kind: Which pass produced the result (``"empty"`` when cleared).
        articulation_points: Cut vertices.
        bridges: Cut edges, always a subset of ``tree_edges``.
        tree_edges: Edges that discovered a new vertex during the DFS.
        back_edges: Edges to an already visited non-parent vertex.
        discovery: DFS discovery time per vertex.
        low_link: Smallest discovery time reachable from each subtree.
        component_colors: Colour token per vertex.
        components: Vertex ids per component, in discovery order.
    """

    model_config = {"frozen": True}

    kind: AnalysisKind = "empty"
    articulation_points: frozenset[int] = frozenset()
    bridges: frozenset[EdgeKey] = frozenset()
    tree_edges: frozenset[EdgeKey] = frozenset()
    back_edges: frozenset[EdgeKey] = frozenset()
    discovery: Mapping[int, int] = Field(default_factory=_frozen_map)
    low_link: Mapping[int, int] = Field(default_factory=_frozen_map)
    component_colors: Mapping[int, str] = Field(default_factory=_frozen_map)
    components: tuple[tuple[int, ...], ...] = ()

    # Maps are copied on construction and exposed read-only.
    @field_validator("discovery", "low_link", "component_colors", mode="after")
    @classmethod
    def freeze_maps(cls, value: Mapping[int, Any]) -> Mapping[int, Any]:
        return MappingProxyType(dict(value))

    @field_serializer("discovery", "low_link", "component_colors")
    def serialize_maps(self, value: Mapping[int, Any]) -> dict[int, Any]:
        return dict(value)

    @classmethod
    def empty(cls) -> AnalysisResult:
        return cls()

    @property
    def is_empty(self) -> bool:
        return self.kind == "empty"

    @property
    def articulation_count(self) -> int:
        return len(self.articulation_points)

    @property
    def bridge_count(self) -> int:
        return len(self.bridges)

    @property
    def component_color_count(self) -> int:
        """Distinct colour tokens in use; 0 when no labeling has run."""
        return len(set(self.component_colors.values()))

    @property
    def component_count(self) -> int:
        return len(self.components)

    def vertex_ids(self) -> set[int]:
        """Every vertex id this result refers to."""
        ids: set[int] = set(self.articulation_points)
        ids.update(self.discovery)
        ids.update(self.component_colors)
        for key in self.tree_edges | self.back_edges:
            ids.update((key.low, key.high))
        return ids

    def to_payload(self) -> dict[str, Any]:
        """JSON-safe dict with sorted lists, used as ServiceResult data."""
        payload: dict[str, Any] = {"kind": self.kind}
        if self.kind == "structural":
            payload.update(
                {
                    "articulation_points": sorted(self.articulation_points),
                    "articulation_count": self.articulation_count,
                    "bridges": _edge_list(self.bridges),
                    "bridge_count": self.bridge_count,
                    "tree_edges": _edge_list(self.tree_edges),
                    "back_edges": _edge_list(self.back_edges),
                    "discovery": {str(k): v for k, v in sorted(self.discovery.items())},
                    "low_link": {str(k): v for k, v in sorted(self.low_link.items())},
                }
            )
        elif self.kind == "components":
            payload.update(
                {
                    "component_count": self.component_count,
                    "color_count": self.component_color_count,
                    "components": [
                        {
                            "index": i,
                            "color": self.component_colors[members[0]],
                            "vertices": list(members),
                        }
                        for i, members in enumerate(self.components)
                    ],
                }
            )
        return payload
