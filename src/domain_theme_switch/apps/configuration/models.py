"""ORM models for configuration management."""
from django.db import models


class Configuration(models.Model):
    """A single key of a named configuration object."""

    name = models.CharField(max_length=255, db_index=True)
    key = models.CharField(max_length=255)
    value = models.TextField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        app_label = 'configuration'
        ordering = ['name', 'key']
        verbose_name = 'Configuration'
        verbose_name_plural = 'Configurations'
        constraints = [
            models.UniqueConstraint(fields=['name', 'key'], name='configuration_name_key_unique'),
        ]

    def __str__(self):
        return f"{self.name}:{self.key}: {self.value}"
