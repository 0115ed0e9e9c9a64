"""API entrypoint. Run with: fastapi dev api.py"""

from mywebapi.applications.api.app import create_app
from mywebapi.dependencies import Container

app = create_app(Container())
