"""Database sessions and request correlation."""
