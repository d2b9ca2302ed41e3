"""Repository implementations for configuration management."""
import logging
from typing import Dict, Optional

from django.db import transaction

from domain_theme_switch.apps.configuration.models import Configuration as ConfigurationOrm

logger = logging.getLogger(__name__)


class DjangoConfigurationRepository:
    """Django ORM-based repository for configuration."""

    def load(self, name: str) -> Dict[str, Optional[str]]:
        """
        Load every key of a configuration object.

        Args:
            name: The configuration object name

        Returns:
            Dictionary of keys and stored values
        """
        rows = ConfigurationOrm.objects.filter(name=name).values_list('key', 'value')
        return {key: value for key, value in rows}

    def save(self, name: str, values: Dict[str, Optional[str]]) -> None:
        """
        Create or overwrite keys of a configuration object atomically.

        Args:
            name: The configuration object name
            values: Keys to write
        """
        with transaction.atomic():
            for key, value in values.items():
                ConfigurationOrm.objects.update_or_create(
                    name=name,
                    key=key,
                    defaults={'value': value},
                )
        logger.debug(f"Saved {len(values)} key(s) of configuration '{name}'")


# Singleton instance
_configuration_repository = None


def get_configuration_repository() -> DjangoConfigurationRepository:
    """
    Get or create the configuration repository singleton.

    Returns:
        DjangoConfigurationRepository instance
    """
    global _configuration_repository
    if _configuration_repository is None:
        _configuration_repository = DjangoConfigurationRepository()
    return _configuration_repository
