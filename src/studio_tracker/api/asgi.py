"""ASGI entrypoint for the studio tracker API."""

from studio_tracker.api.app import create_app
from studio_tracker.containers import build_container

app = create_app(build_container())
