"""Domain models for per-domain theme assignment."""
from dataclasses import dataclass
from typing import Optional, Tuple, TypeVar

T = TypeVar('T')

FORM_ID = 'domain_theme_switch_config_form'
SETTINGS_NAME = 'domain_theme_switch.settings'
SYSTEM_THEME_NAME = 'system.theme'

SITE_SUFFIX = '_site'
ADMIN_SUFFIX = '_admin'


def site_key(domain_id: str) -> str:
    return domain_id + SITE_SUFFIX


def admin_key(domain_id: str) -> str:
    return domain_id + ADMIN_SUFFIX


def resolve(stored: Optional[T], default: T) -> T:
    """Return the stored value, or ``default`` when nothing is stored."""
    return default if stored is None else stored


@dataclass(frozen=True)
class DomainRecord:
    """A configured domain as listed by the domain directory."""
    id: str
    hostname: str


@dataclass(frozen=True)
class ThemeDefaults:
    """Global fallback themes used when a domain has no override."""
    site: str
    admin: str


@dataclass(frozen=True)
class ThemeAssignment:
    """Resolved site and admin theme of one domain."""
    domain_id: str
    site_theme: str
    admin_theme: str


@dataclass(frozen=True)
class Link:
    text: str
    url: str


@dataclass(frozen=True)
class Message:
    """
    Static text with one embedded link.

    ``template`` holds a ``{link}`` placeholder where the link is rendered.
    """
    template: str
    link: Link

    def plain_text(self) -> str:
        return self.template.format(link=self.link.text)


@dataclass(frozen=True)
class SelectField:
    """A single-choice control populated from the theme catalog."""
    name: str
    title: str
    options: Tuple[Tuple[str, str], ...]
    default: str
    suffix: Optional[Message] = None


@dataclass(frozen=True)
class FieldGroup:
    """The site and admin theme controls of one domain."""
    domain_id: str
    title: str
    site: SelectField
    admin: SelectField

    @property
    def fields(self) -> Tuple[SelectField, SelectField]:
        return self.site, self.admin


@dataclass(frozen=True)
class SettingsView:
    """
    Everything needed to present the theme settings form.

    A view either lists one group per domain or, when there are no domains,
    carries only ``message`` and offers no submit action.
    """
    form_id: str
    groups: Tuple[FieldGroup, ...] = ()
    message: Optional[Message] = None

    @property
    def is_empty(self) -> bool:
        return not self.groups

    @property
    def fields(self) -> Tuple[SelectField, ...]:
        return tuple(field for group in self.groups for field in group.fields)
