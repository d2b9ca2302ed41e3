from django.apps import AppConfig


class ThemeSwitchConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'domain_theme_switch.apps.theme_switch'
    label = 'theme_switch'
    verbose_name = 'Domain theme switch'
