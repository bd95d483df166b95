"""Connected-component labeling by breadth-first flood fill.

Uses its own visited set, independent of the structural pass. Component
``k`` (in discovery order, roots by ascending id) gets
``palette[k % len(palette)]``; with more components than colours, tokens
repeat, so distinct colour count is capped at the palette size.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Mapping, Sequence

from cutgraph.analysis.result import AnalysisResult
from cutgraph.domain.types import VertexId

DEFAULT_PALETTE: tuple[str, ...] = (
    "#FF6B6B",
    "#4ECDC4",
    "#45B7D1",
    "#FFA07A",
    "#98D8C8",
    "#F7DC6F",
    "#BB8FCE",
    "#85C1E2",
    "#F8B88B",
    "#A8E6CF",
)


def label_components(
    adjacency: Mapping[VertexId, Sequence[VertexId]],
    palette: Sequence[str] = DEFAULT_PALETTE,
) -> AnalysisResult:
    """Partition vertices into components and colour each one.

    Raises:
        ValueError: If *palette* is empty.
    """
    if not palette:
        raise ValueError("Component palette must contain at least one colour")

    colors: dict[VertexId, str] = {}
    components: list[tuple[VertexId, ...]] = []

    for root in sorted(adjacency):
        if root in colors:
            continue
        color = palette[len(components) % len(palette)]
        colors[root] = color
        members = [root]
        queue: deque[VertexId] = deque([root])
        while queue:
            u = queue.popleft()
            for v in adjacency[u]:
                if v not in colors:
                    colors[v] = color
                    members.append(v)
                    queue.append(v)
        components.append(tuple(members))

    return AnalysisResult(
        kind="components",
        component_colors=colors,
        components=tuple(components),
    )
