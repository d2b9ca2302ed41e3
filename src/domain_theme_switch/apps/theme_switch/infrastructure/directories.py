"""Django-backed collaborators of the theme switch service."""
import logging
from typing import Dict, List

from django.conf import settings

from domain_theme_switch.apps.configuration.application.services import ConfigurationService
from domain_theme_switch.apps.domains.models import Domain
from domain_theme_switch.apps.theme_switch.domain.models import SYSTEM_THEME_NAME, DomainRecord, resolve

logger = logging.getLogger(__name__)


class DjangoDomainDirectory:
    """Domains stored by the ``domains`` app."""

    def list_all(self) -> List[DomainRecord]:
        return [DomainRecord(id=domain.id, hostname=domain.hostname) for domain in Domain.objects.all()]


class SettingsThemeDirectory:
    """Themes declared in ``settings.DOMAIN_THEME_SWITCH['THEMES']``."""

    def list_installed(self) -> Dict[str, str]:
        return dict(settings.DOMAIN_THEME_SWITCH['THEMES'])


class SystemThemeDefaults:
    """
    Global themes from the ``system.theme`` configuration object.

    The ``default`` and ``admin`` keys fall back to the project settings
    when they are not stored.
    """

    def __init__(self, configuration_service: ConfigurationService):
        self.configuration_service = configuration_service

    def _get(self, key: str, fallback: str) -> str:
        stored = self.configuration_service.get_config(SYSTEM_THEME_NAME).get(key)
        if stored is None:
            logger.debug(f"No stored '{SYSTEM_THEME_NAME}:{key}', using '{fallback}'")
        return resolve(stored, fallback)

    def get_default_site_theme(self) -> str:
        return self._get('default', settings.DOMAIN_THEME_SWITCH['DEFAULT_SITE_THEME'])

    def get_default_admin_theme(self) -> str:
        return self._get('admin', settings.DOMAIN_THEME_SWITCH['DEFAULT_ADMIN_THEME'])
