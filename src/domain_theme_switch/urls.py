from django.contrib import admin
from django.urls import path, include

urlpatterns = [
    path('admin/domain-theme-switch/', include('domain_theme_switch.apps.theme_switch.urls')),
    path('admin/', admin.site.urls),
    path('api/', include('domain_theme_switch.apps.theme_switch.api_urls')),
]
