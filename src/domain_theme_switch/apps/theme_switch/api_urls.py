from django.urls import path, include
from rest_framework.routers import DefaultRouter

from .views import ThemeSwitchViewSet

router = DefaultRouter()
router.register(r'theme-switch', ThemeSwitchViewSet, basename='theme-switch')

urlpatterns = [
    path('', include(router.urls)),
]
