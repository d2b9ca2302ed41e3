# tests/fakes.py
"""In-memory collaborators for the theme switch service."""


class InMemorySettingsStore:
    """Settings store that keeps staged values apart until save()."""

    def __init__(self, data=None):
        self.data = dict(data or {})
        self.staged = {}
        self.save_count = 0

    def get(self, key):
        return self.data.get(key)

    def set(self, key, value):
        self.staged[key] = value
        return self

    def save(self):
        self.data.update(self.staged)
        self.staged = {}
        self.save_count += 1


class ListDomainDirectory:
    def __init__(self, domains=None):
        self.domains = list(domains or [])

    def list_all(self):
        return list(self.domains)


class DictThemeDirectory:
    def __init__(self, themes=None):
        self.themes = dict(themes or {})

    def list_installed(self):
        return dict(self.themes)


class StaticThemeDefaults:
    def __init__(self, site='stark', admin='stark'):
        self.site = site
        self.admin = admin

    def get_default_site_theme(self):
        return self.site

    def get_default_admin_theme(self):
        return self.admin
