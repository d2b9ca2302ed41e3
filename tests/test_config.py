# tests/test_config.py
from domain_theme_switch.config import ThemeConfig, load_config, parse_themes


def test_parse_themes_keeps_order():
    """Test that the theme list keeps its declared order."""
    assert list(parse_themes("stark:Stark, bartik:Bartik").items()) == [('stark', 'Stark'), ('bartik', 'Bartik')]


def test_parse_themes_name_defaults_to_id():
    """Test that entries without a display name reuse the id."""
    assert parse_themes("olivero,,claro:Claro") == {'olivero': 'olivero', 'claro': 'Claro'}


def test_theme_config_from_env(monkeypatch):
    """Test that theme settings are read from the environment."""
    monkeypatch.setenv("DTS_THEMES", "olivero:Olivero,claro:Claro")
    monkeypatch.setenv("DTS_DEFAULT_SITE_THEME", "olivero")
    monkeypatch.setenv("DTS_DEFAULT_ADMIN_THEME", "claro")

    config = ThemeConfig.from_env()

    assert config.themes == {'olivero': 'Olivero', 'claro': 'Claro'}
    assert config.default_site_theme == 'olivero'
    assert config.default_admin_theme == 'claro'


def test_load_config_defaults(monkeypatch):
    """Test the values used when nothing is set."""
    for name in ("DTS_DB_PATH", "DTS_LOG_LEVEL", "DTS_DEBUG", "DTS_THEMES", "DTS_ALLOWED_HOSTS",
                 "DTS_DEFAULT_SITE_THEME", "DTS_DEFAULT_ADMIN_THEME"):
        monkeypatch.delenv(name, raising=False)

    config = load_config()

    assert config.db_path == "db.sqlite3"
    assert config.log_level == "INFO"
    assert config.debug is False
    assert config.allowed_hosts is None
    assert config.theme.default_site_theme == "stark"
    assert 'bartik' in config.theme.themes


def test_load_config_from_env(monkeypatch):
    """Test that environment variables override the defaults."""
    monkeypatch.setenv("DTS_DB_PATH", "/tmp/themes.db")
    monkeypatch.setenv("DTS_LOG_LEVEL", "debug")
    monkeypatch.setenv("DTS_DEBUG", "yes")
    monkeypatch.setenv("DTS_ALLOWED_HOSTS", "example.com, other.org")

    config = load_config()

    assert config.db_path == "/tmp/themes.db"
    assert config.log_level == "DEBUG"
    assert config.debug is True
    assert config.allowed_hosts == ["example.com", "other.org"]
