"""Two-dimensional wrappers built on the core geometry."""
