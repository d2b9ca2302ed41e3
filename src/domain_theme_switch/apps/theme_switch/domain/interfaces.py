"""Domain interfaces for per-domain theme assignment."""
from typing import Dict, List, Optional, Protocol

from domain_theme_switch.apps.theme_switch.domain.models import DomainRecord


class SettingsStore(Protocol):
    """Key/value store holding the per-domain theme overrides."""

    def get(self, key: str) -> Optional[str]:
        """
        Get a stored value.

        Args:
            key: ``<domainId>_site`` or ``<domainId>_admin``

        Returns:
            The stored theme id, or None if the key has no value
        """
        ...

    def set(self, key: str, value: Optional[str]) -> object:
        """
        Stage a value for the next save.

        Args:
            key: The key to overwrite
            value: The theme id to store, stored verbatim
        """
        ...

    def save(self) -> None:
        """Persist every staged value at once."""
        ...


class DomainDirectory(Protocol):
    """Read-only catalog of configured domains."""

    def list_all(self) -> List[DomainRecord]:
        """
        List all configured domains.

        Returns:
            Domains in the directory's natural order
        """
        ...


class ThemeDirectory(Protocol):
    """Read-only catalog of installed themes."""

    def list_installed(self) -> Dict[str, str]:
        """
        List installed themes.

        Returns:
            Ordered mapping of theme id to display name
        """
        ...


class ThemeDefaultsProvider(Protocol):
    """Source of the global fallback themes."""

    def get_default_site_theme(self) -> str:
        ...

    def get_default_admin_theme(self) -> str:
        ...
