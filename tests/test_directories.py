# tests/test_directories.py
import pytest

from domain_theme_switch.apps.configuration.application.services import get_configuration_service
from domain_theme_switch.apps.domains.models import Domain
from domain_theme_switch.apps.theme_switch.application.services import render
from domain_theme_switch.apps.theme_switch.domain.models import DomainRecord, ThemeDefaults
from domain_theme_switch.apps.theme_switch.infrastructure.directories import (
    DjangoDomainDirectory,
    SettingsThemeDirectory,
    SystemThemeDefaults,
)

from tests.fakes import InMemorySettingsStore

pytestmark = pytest.mark.django_db


def test_domain_directory_natural_order():
    """Test that domains are listed by weight, then id."""
    Domain.objects.create(id='zeta_org', hostname='zeta.org', weight=0)
    Domain.objects.create(id='beta_net', hostname='beta.net', weight=5)
    Domain.objects.create(id='alpha_net', hostname='alpha.net', weight=0)

    assert DjangoDomainDirectory().list_all() == [
        DomainRecord('alpha_net', 'alpha.net'),
        DomainRecord('zeta_org', 'zeta.org'),
        DomainRecord('beta_net', 'beta.net'),
    ]


def test_domain_directory_empty():
    """Test that an empty table lists no domains."""
    assert DjangoDomainDirectory().list_all() == []


def test_theme_directory_reads_settings(theme_settings):
    """Test that installed themes come from the project settings, in order."""
    themes = SettingsThemeDirectory().list_installed()

    assert list(themes.items()) == [('bartik', 'Bartik'), ('seven', 'Seven'), ('stark', 'Stark')]


def test_theme_defaults_fall_back_to_settings(theme_settings):
    """Test that unset system.theme keys use the configured fallbacks."""
    defaults = SystemThemeDefaults(get_configuration_service())

    assert defaults.get_default_site_theme() == 'stark'
    assert defaults.get_default_admin_theme() == 'seven'


def test_theme_defaults_prefer_stored_system_theme(theme_settings):
    """Test that a stored system.theme overrides the settings fallback."""
    service = get_configuration_service()
    service.get_config('system.theme').set('default', 'bartik').set('admin', 'stark').save()

    defaults = SystemThemeDefaults(service)

    assert defaults.get_default_site_theme() == 'bartik'
    assert defaults.get_default_admin_theme() == 'stark'


def test_django_collaborators_render_like_fakes(theme_settings, example_domain):
    """Test that render over the database matches render over in-memory data."""
    service = get_configuration_service()
    service.get_config('domain_theme_switch.settings').set('example_com_site', 'bartik').save()
    defaults = SystemThemeDefaults(service)

    from_db = render(
        service.get_config('domain_theme_switch.settings'),
        DjangoDomainDirectory().list_all(),
        SettingsThemeDirectory().list_installed(),
        ThemeDefaults(defaults.get_default_site_theme(), defaults.get_default_admin_theme()),
    )
    from_memory = render(
        InMemorySettingsStore({'example_com_site': 'bartik'}),
        [DomainRecord('example_com', 'example.com')],
        {'bartik': 'Bartik', 'seven': 'Seven', 'stark': 'Stark'},
        ThemeDefaults('stark', 'seven'),
    )

    assert from_db == from_memory
