"""ASGI entrypoint for the give-me-diet API."""

from give_me_diet.api.app import create_app
from give_me_diet.containers import build_container

app = create_app(build_container())
