"""Application entrypoints (HTTP API and Lambda)."""
