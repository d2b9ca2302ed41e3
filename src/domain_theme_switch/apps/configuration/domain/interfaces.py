"""Domain interfaces for configuration management."""
from typing import Dict, Optional, Protocol


class ConfigurationRepositoryInterface(Protocol):
    """Interface for configuration repository."""

    def load(self, name: str) -> Dict[str, Optional[str]]:
        """
        Load every key of a configuration object.

        Args:
            name: The configuration object name, e.g. ``system.theme``

        Returns:
            Dictionary of keys and stored values, empty if the object has no keys
        """
        ...

    def save(self, name: str, values: Dict[str, Optional[str]]) -> None:
        """
        Write keys of a configuration object in a single transaction.

        Args:
            name: The configuration object name
            values: Keys to create or overwrite

        Raises:
            django.db.DatabaseError: If the write fails; no key is written
        """
        ...
