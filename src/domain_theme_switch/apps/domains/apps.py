from django.apps import AppConfig


class DomainsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'domain_theme_switch.apps.domains'
    label = 'domains'
    verbose_name = 'Domains'
