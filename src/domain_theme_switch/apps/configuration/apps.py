from django.apps import AppConfig


class ConfigurationConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'domain_theme_switch.apps.configuration'
    label = 'configuration'
