"""cutgraph: structural analysis of interactively built undirected graphs."""

__version__ = "0.1.0"
