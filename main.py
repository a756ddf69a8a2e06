"""Top-level ASGI entrypoint (``uvicorn main:app``)."""

from line_relay.api_factory import create_app

app = create_app()
