"""Error types and transfer schemas."""
