"""
Storage gateway interface.
The write pipeline depends on this contract, never on a concrete engine.
"""

from abc import ABC, abstractmethod
from typing import Any


class StorageGateway(ABC):
    """
    What the validators need from the storage engine.

    Implementations:
    - SQLAlchemyGateway: async SQLAlchemy session (app.infrastructure)
    """

    @abstractmethod
    async def exists(self, event_id: Any) -> bool:
        """
        Check whether an Event with this identifier is currently stored.

        Returns:
            True if present, False otherwise

        Raises:
            DependencyUnavailableError: the check could not complete
        """
