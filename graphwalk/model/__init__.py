"""Graph model types."""
