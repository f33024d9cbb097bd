"""FastAPI routers acting as controllers in the MVC architecture."""

from . import catalog, evaluations, history, lessons, media, speech

__all__ = ["catalog", "evaluations", "history", "lessons", "media", "speech"]
