from django.urls import path

from .views import DomainThemeSwitchConfigView

app_name = 'theme_switch'

urlpatterns = [
    path('', DomainThemeSwitchConfigView.as_view(), name='settings'),
]
