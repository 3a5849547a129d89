"""Record id generators."""
import uuid
from threading import Lock
from typing import Protocol


class IDGenerator(Protocol):
    """Source of fresh book ids."""

    def next_id(self) -> str:
        ...


class UUIDGenerator:
    """
    Random UUID4 ids.
    """
    def next_id(self) -> str:
        return str(uuid.uuid4())


class SequentialIDGenerator:
    """
    Thread-safe monotonic ID generator, rendered as strings.
    """
    def __init__(self, start: int = 1, prefix: str = ""):
        self._lock = Lock()
        self._current = start - 1
        self._prefix = prefix

    def next_id(self) -> str:
        """
        Returns the next unique ID.
        """
        with self._lock:
            self._current += 1
            return f"{self._prefix}{self._current}"
