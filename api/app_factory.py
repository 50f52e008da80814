"""Entry points for uvicorn/gunicorn."""
from api.app import app, create_app

__all__ = ["app", "create_app"]
