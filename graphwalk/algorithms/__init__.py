"""Graph algorithms: adjacency construction, traversals and widest path."""
