"""In-memory books CRUD service."""

__version__ = "1.0.0"
