"""ASGI entrypoint for the Tastr API."""

from tastr.api.app import create_app
from tastr.containers import build_container

app = create_app(build_container())
