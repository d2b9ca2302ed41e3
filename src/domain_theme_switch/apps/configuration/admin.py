from django.contrib import admin

from .models import Configuration


@admin.register(Configuration)
class ConfigurationAdmin(admin.ModelAdmin):
    list_display = ('name', 'key', 'value', 'updated_at')
    list_filter = ('name',)
    search_fields = ('name', 'key', 'value')
    readonly_fields = ('created_at', 'updated_at')
