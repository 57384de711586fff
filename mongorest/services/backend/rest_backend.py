from abc import ABC, abstractmethod

from mongorest.models import Operation


class RestBackendInterface(ABC):
    @abstractmethod
    async def list(self, operation: Operation) -> list[dict]:
        """Return every document of the resource collection."""

    @abstractmethod
    async def read(self, operation: Operation) -> dict:
        """Return the document matching the operation id, or None."""

    @abstractmethod
    async def create(self, operation: Operation):
        """Insert the operation payload as a new document."""

    @abstractmethod
    async def update(self, operation: Operation):
        """Replace the document matching the operation id with the payload."""

    @abstractmethod
    async def patch(self, operation: Operation):
        """Apply the payload as a partial update to the matching document."""

    @abstractmethod
    async def remove(self, operation: Operation):
        """Delete the document matching the operation id."""
