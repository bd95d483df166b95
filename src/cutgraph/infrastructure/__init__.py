"""Infrastructure layer: graph storage, adjacency views, and the workspace."""
