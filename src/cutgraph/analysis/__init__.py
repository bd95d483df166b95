"""Structural analysis passes over an adjacency view.

Each pass returns a fresh, immutable :class:`AnalysisResult`.
"""

from cutgraph.analysis.components import DEFAULT_PALETTE, label_components
from cutgraph.analysis.result import AnalysisResult
from cutgraph.analysis.structural import analyze_structure

__all__ = ["DEFAULT_PALETTE", "AnalysisResult", "analyze_structure", "label_components"]
