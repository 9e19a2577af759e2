"""ASGI entrypoint for the calorie counter API."""

from calorie_counter.api.app import create_app
from calorie_counter.containers import build_container

app = create_app(build_container())
