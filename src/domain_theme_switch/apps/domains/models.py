from django.core.validators import RegexValidator
from django.db import models


machine_name_validator = RegexValidator(
    r'^[a-z0-9_]+$',
    'Machine names may only contain lowercase letters, digits and underscores.',
)


class Domain(models.Model):
    """A configured domain, e.g. ``example_com`` served at ``example.com``."""

    id = models.CharField(max_length=128, primary_key=True, validators=[machine_name_validator])
    hostname = models.CharField(max_length=255, unique=True)
    weight = models.IntegerField(default=0)

    class Meta:
        app_label = 'domains'
        ordering = ['weight', 'id']

    def __str__(self):
        return self.hostname
