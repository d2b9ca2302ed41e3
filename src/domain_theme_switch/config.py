# src/domain_theme_switch/config.py
import os
from dataclasses import dataclass, field
from typing import Dict, Optional


DEFAULT_THEMES = "bartik:Bartik,seven:Seven,stark:Stark"


def parse_themes(raw: str) -> Dict[str, str]:
    """
    Parse an ``id:Name,id:Name`` list into an ordered theme catalog.

    Entries without a display name use the theme id as its name.
    """
    themes: Dict[str, str] = {}
    for entry in raw.split(','):
        entry = entry.strip()
        if not entry:
            continue
        theme_id, _, name = entry.partition(':')
        themes[theme_id.strip()] = name.strip() or theme_id.strip()
    return themes


@dataclass
class ThemeConfig:
    """Installed themes and the global fallback themes."""
    themes: Dict[str, str] = field(default_factory=dict)
    default_site_theme: str = "stark"
    default_admin_theme: str = "stark"

    @classmethod
    def from_env(cls) -> 'ThemeConfig':
        """Create from environment variables."""
        return cls(
            themes=parse_themes(os.environ.get("DTS_THEMES", DEFAULT_THEMES)),
            default_site_theme=os.environ.get("DTS_DEFAULT_SITE_THEME", "stark"),
            default_admin_theme=os.environ.get("DTS_DEFAULT_ADMIN_THEME", "stark"),
        )


@dataclass
class AppConfig:
    """Main application configuration."""
    db_path: str
    secret_key: str
    theme: ThemeConfig
    debug: bool = False
    log_level: str = "INFO"
    allowed_hosts: Optional[list] = None


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.lower() in ('true', 'yes', '1', 't', 'y')


def load_config() -> AppConfig:
    """Load application configuration from environment."""
    hosts = os.environ.get("DTS_ALLOWED_HOSTS", "")
    return AppConfig(
        db_path=os.environ.get("DTS_DB_PATH", "db.sqlite3"),
        secret_key=os.environ.get("DTS_SECRET_KEY", "insecure-dev-key-change-me"),
        theme=ThemeConfig.from_env(),
        debug=_env_bool("DTS_DEBUG"),
        log_level=os.environ.get("DTS_LOG_LEVEL", "INFO").upper(),
        allowed_hosts=[h.strip() for h in hosts.split(',') if h.strip()] or None,
    )
