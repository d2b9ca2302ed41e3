# tests/conftest.py
import pytest

from domain_theme_switch.apps.theme_switch.application.services import (
    AdminLinks,
    ThemeSwitchSettingsService,
)
from domain_theme_switch.apps.theme_switch.domain.models import DomainRecord, ThemeDefaults

from tests.fakes import (
    DictThemeDirectory,
    InMemorySettingsStore,
    ListDomainDirectory,
    StaticThemeDefaults,
)


@pytest.fixture
def store():
    """Create an empty in-memory settings store."""
    return InMemorySettingsStore()


@pytest.fixture
def example_domains():
    """A single domain, example.com."""
    return [DomainRecord(id='example_com', hostname='example.com')]


@pytest.fixture
def themes():
    """Installed themes in catalog order."""
    return {'bartik': 'Bartik', 'stark': 'Stark'}


@pytest.fixture
def defaults():
    """Global fallback themes."""
    return ThemeDefaults(site='stark', admin='stark')


@pytest.fixture
def links():
    """Admin screen URLs used in rendered hints."""
    return AdminLinks(permissions_url='/admin/auth/group/', domain_create_url='/admin/domains/domain/add/')


@pytest.fixture
def domain_directory(example_domains):
    return ListDomainDirectory(example_domains)


@pytest.fixture
def service(store, domain_directory, themes, links):
    """Create a ThemeSwitchSettingsService over in-memory collaborators."""
    return ThemeSwitchSettingsService(
        store_factory=lambda: store,
        domain_directory=domain_directory,
        theme_directory=DictThemeDirectory(themes),
        defaults_provider=StaticThemeDefaults('stark', 'stark'),
        links=links,
    )


@pytest.fixture
def theme_settings(settings):
    """Pin the installed themes and global defaults of the Django project."""
    settings.DOMAIN_THEME_SWITCH = {
        'THEMES': {'bartik': 'Bartik', 'seven': 'Seven', 'stark': 'Stark'},
        'DEFAULT_SITE_THEME': 'stark',
        'DEFAULT_ADMIN_THEME': 'seven',
    }
    return settings.DOMAIN_THEME_SWITCH


@pytest.fixture
def example_domain(db):
    """Persist example.com in the domains table."""
    from domain_theme_switch.apps.domains.models import Domain

    return Domain.objects.create(id='example_com', hostname='example.com')
