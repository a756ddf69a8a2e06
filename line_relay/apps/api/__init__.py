"""FastAPI application for the LINE relay."""
