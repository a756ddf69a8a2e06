"""Application entry layers (HTTP API)."""
