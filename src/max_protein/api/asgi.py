"""ASGI entrypoint for the max protein API."""

from max_protein.api.app import create_app
from max_protein.containers import build_container

app = create_app(build_container())
