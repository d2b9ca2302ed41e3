"""Application services for per-domain theme assignment."""
import logging
from dataclasses import dataclass
from typing import Callable, List, Mapping, Optional, Sequence

from domain_theme_switch.apps.theme_switch.domain.interfaces import (
    DomainDirectory,
    SettingsStore,
    ThemeDefaultsProvider,
    ThemeDirectory,
)
from domain_theme_switch.apps.theme_switch.domain.models import (
    FORM_ID,
    SETTINGS_NAME,
    DomainRecord,
    FieldGroup,
    Link,
    Message,
    SelectField,
    SettingsView,
    ThemeAssignment,
    ThemeDefaults,
    admin_key,
    resolve,
    site_key,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AdminLinks:
    """URLs of the administrative screens the form points the operator to."""
    permissions_url: str = '#'
    domain_create_url: str = '#'


def assignment_for(store: SettingsStore, domain: DomainRecord, defaults: ThemeDefaults) -> ThemeAssignment:
    """Resolve the effective themes of one domain."""
    return ThemeAssignment(
        domain_id=domain.id,
        site_theme=resolve(store.get(site_key(domain.id)), defaults.site),
        admin_theme=resolve(store.get(admin_key(domain.id)), defaults.admin),
    )


def render(store: SettingsStore, domains: Sequence[DomainRecord], themes: Mapping[str, str],
           defaults: ThemeDefaults, links: AdminLinks = AdminLinks()) -> SettingsView:
    """
    Build the settings view for the current store contents.

    Args:
        store: Current per-domain overrides
        domains: Domains in directory order
        themes: Installed themes, id to display name
        defaults: Global fallback themes
        links: Target URLs of the permission and domain creation screens

    Returns:
        One group per domain, or the "no domains" message when there are none
    """
    if not domains:
        return SettingsView(
            form_id=FORM_ID,
            message=Message(
                'Zero domain records found. Please {link} to create the domain.',
                Link('click here', str(links.domain_create_url)),
            ),
        )

    options = tuple(themes.items())
    permission_hint = Message(
        'Change permission to allow domain admin theme {link}.',
        Link('change permission', str(links.permissions_url)),
    )
    groups = []
    for domain in domains:
        assignment = assignment_for(store, domain, defaults)
        groups.append(FieldGroup(
            domain_id=domain.id,
            title=f'Select Theme for "{domain.hostname}"',
            site=SelectField(
                name=site_key(domain.id),
                title='Site theme for domain',
                options=options,
                default=assignment.site_theme,
            ),
            admin=SelectField(
                name=admin_key(domain.id),
                title='Admin theme for domain',
                options=options,
                default=assignment.admin_theme,
                suffix=permission_hint,
            ),
        ))
    return SettingsView(form_id=FORM_ID, groups=tuple(groups))


def submit(form_values: Mapping[str, Optional[str]], domains: Sequence[DomainRecord],
           store: SettingsStore) -> None:
    """
    Write the submitted themes of every domain and save the store once.

    Both keys of every domain are overwritten, with None for a key missing
    from ``form_values``. Values are not checked against the theme catalog.
    """
    for domain in domains:
        store.set(site_key(domain.id), form_values.get(site_key(domain.id)))
        store.set(admin_key(domain.id), form_values.get(admin_key(domain.id)))
    store.save()


class ThemeSwitchSettingsService:
    """Application service tying the settings form to its collaborators."""

    def __init__(
            self,
            store_factory: Callable[[], SettingsStore],
            domain_directory: DomainDirectory,
            theme_directory: ThemeDirectory,
            defaults_provider: ThemeDefaultsProvider,
            links: AdminLinks = AdminLinks(),
    ):
        """
        Initialize the service.

        Args:
            store_factory: Returns a fresh store snapshot for each call
            domain_directory: Catalog of configured domains
            theme_directory: Catalog of installed themes
            defaults_provider: Source of the global fallback themes
            links: Target URLs of related administrative screens
        """
        self.store_factory = store_factory
        self.domain_directory = domain_directory
        self.theme_directory = theme_directory
        self.defaults_provider = defaults_provider
        self.links = links

    def get_defaults(self) -> ThemeDefaults:
        return ThemeDefaults(
            site=self.defaults_provider.get_default_site_theme(),
            admin=self.defaults_provider.get_default_admin_theme(),
        )

    def has_domains(self) -> bool:
        return bool(self.domain_directory.list_all())

    def build_view(self, domains: Optional[Sequence[DomainRecord]] = None) -> SettingsView:
        """
        Render the settings view from the current store and catalogs.

        Args:
            domains: Domains to render; the whole directory when omitted
        """
        if domains is None:
            domains = self.domain_directory.list_all()
        return render(
            self.store_factory(),
            domains,
            self.theme_directory.list_installed(),
            self.get_defaults(),
            self.links,
        )

    def get_assignments(self, domains: Optional[Sequence[DomainRecord]] = None) -> List[ThemeAssignment]:
        """
        Return the effective assignment of every domain, in directory order.

        Args:
            domains: Domains to resolve; the whole directory when omitted
        """
        if domains is None:
            domains = self.domain_directory.list_all()
        store = self.store_factory()
        defaults = self.get_defaults()
        return [assignment_for(store, domain, defaults) for domain in domains]

    def save(self, form_values: Mapping[str, Optional[str]]) -> None:
        """
        Persist submitted theme selections.

        The domain list is fetched again here, so only domains that exist at
        submit time are written.

        Raises:
            django.db.DatabaseError: If the store cannot be saved
        """
        domains = self.domain_directory.list_all()
        submit(form_values, domains, self.store_factory())
        logger.info(f"Saved theme assignments for {len(domains)} domain(s)")


# Singleton instance
_theme_switch_service = None


def get_theme_switch_service() -> ThemeSwitchSettingsService:
    """
    Get or create the theme switch service singleton.

    Returns:
        ThemeSwitchSettingsService wired to the Django-backed collaborators
    """
    global _theme_switch_service
    if _theme_switch_service is None:
        from django.urls import reverse_lazy

        from domain_theme_switch.apps.configuration.application.services import get_configuration_service
        from domain_theme_switch.apps.theme_switch.infrastructure.directories import (
            DjangoDomainDirectory,
            SettingsThemeDirectory,
            SystemThemeDefaults,
        )

        configuration_service = get_configuration_service()
        _theme_switch_service = ThemeSwitchSettingsService(
            store_factory=lambda: configuration_service.get_config(SETTINGS_NAME),
            domain_directory=DjangoDomainDirectory(),
            theme_directory=SettingsThemeDirectory(),
            defaults_provider=SystemThemeDefaults(configuration_service),
            links=AdminLinks(
                permissions_url=reverse_lazy('admin:auth_group_changelist'),
                domain_create_url=reverse_lazy('admin:domains_domain_add'),
            ),
        )
    return _theme_switch_service
