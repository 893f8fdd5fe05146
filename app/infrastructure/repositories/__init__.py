"""Repository implementations and the storage backend factory."""
