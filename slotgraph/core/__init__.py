"""Core graph storage: slots, directory, adjacency, marks, history."""
