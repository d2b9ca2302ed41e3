"""Application services for configuration management."""
import logging
from typing import Dict, Optional

from domain_theme_switch.apps.configuration.domain.interfaces import ConfigurationRepositoryInterface

logger = logging.getLogger(__name__)


class Config:
    """
    Editable snapshot of one named configuration object.

    Values are read once when the snapshot is created. ``set`` only changes
    the snapshot; nothing reaches the repository until ``save`` is called.
    """

    def __init__(self, name: str, repository: ConfigurationRepositoryInterface,
                 data: Dict[str, Optional[str]]):
        self.name = name
        self.repository = repository
        self._data = dict(data)
        self._pending: Dict[str, Optional[str]] = {}

    def get(self, key: str) -> Optional[str]:
        """Return the value stored under ``key``, or None if there is none."""
        return self._data.get(key)

    def set(self, key: str, value: Optional[str]) -> 'Config':
        """Stage ``value`` under ``key`` for the next save."""
        self._data[key] = value
        self._pending[key] = value
        return self

    def save(self) -> None:
        """
        Persist every staged key in one transaction.

        Raises:
            django.db.DatabaseError: If the repository write fails
        """
        self.repository.save(self.name, dict(self._pending))
        logger.info(f"Configuration '{self.name}' saved ({len(self._pending)} key(s))")
        self._pending.clear()


class ConfigurationService:
    """Application service for reading and editing configuration objects."""

    def __init__(self, repository: ConfigurationRepositoryInterface):
        """
        Initialize the configuration service.

        Args:
            repository: Repository for configuration persistence
        """
        self.repository = repository

    def get_config(self, name: str) -> Config:
        """
        Load a fresh editable snapshot of a configuration object.

        Args:
            name: The configuration object name

        Returns:
            Config snapshot; empty if nothing is stored under ``name``
        """
        return Config(name, self.repository, self.repository.load(name))


# Singleton instance
_configuration_service = None


def get_configuration_service() -> ConfigurationService:
    """
    Get or create the configuration service singleton.

    Returns:
        ConfigurationService instance
    """
    global _configuration_service
    if _configuration_service is None:
        from domain_theme_switch.apps.configuration.infrastructure.repositories import get_configuration_repository

        _configuration_service = ConfigurationService(repository=get_configuration_repository())
    return _configuration_service
