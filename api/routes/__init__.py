"""API route modules."""
from api.routes import images, sessions

__all__ = ["images", "sessions"]
