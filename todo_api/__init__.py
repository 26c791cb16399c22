"""In-memory todo CRUD service built on FastAPI."""

__version__ = "1.0.0"
