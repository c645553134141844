"""ASGI entrypoint for the itinerary store API."""

from itinerary_store.api.app import create_app
from itinerary_store.containers import build_container

app = create_app(build_container())
