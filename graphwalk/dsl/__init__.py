"""Graph document loading."""
