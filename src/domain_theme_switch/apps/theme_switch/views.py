"""Admin page and REST endpoints for per-domain theme assignment."""
import logging

from django.contrib import messages
from django.contrib.admin.views.decorators import staff_member_required
from django.db import DatabaseError
from django.urls import reverse_lazy
from django.utils.decorators import method_decorator
from django.views.generic.edit import FormView
from rest_framework import status, viewsets
from rest_framework.response import Response

from .application.services import get_theme_switch_service
from .forms import DomainThemeSwitchConfigForm, message_html
from .serializers import SettingsViewSerializer, ThemeSwitchSubmitSerializer

logger = logging.getLogger(__name__)

SAVED_MESSAGE = 'The configuration options have been saved.'
SAVE_FAILED_MESSAGE = 'The configuration options could not be saved.'


@method_decorator(staff_member_required, name='dispatch')
class DomainThemeSwitchConfigView(FormView):
    """Settings form listing a site and an admin theme select per domain."""

    template_name = 'theme_switch/settings_form.html'
    form_class = DomainThemeSwitchConfigForm
    success_url = reverse_lazy('theme_switch:settings')

    def dispatch(self, request, *args, **kwargs):
        self.service = get_theme_switch_service()
        self.settings_view = self.service.build_view()
        return super().dispatch(request, *args, **kwargs)

    def get_form_kwargs(self):
        kwargs = super().get_form_kwargs()
        kwargs['settings_view'] = self.settings_view
        return kwargs

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context.update({
            'title': 'Domain theme switch',
            'settings_view': self.settings_view,
            'message_html': message_html(self.settings_view.message),
        })
        return context

    def post(self, request, *args, **kwargs):
        # Nothing to submit without domains
        if self.settings_view.is_empty:
            return self.get(request, *args, **kwargs)
        return super().post(request, *args, **kwargs)

    def form_valid(self, form):
        try:
            self.service.save(form.cleaned_data)
        except DatabaseError:
            logger.exception("Failed to save domain theme settings")
            messages.error(self.request, SAVE_FAILED_MESSAGE)
            return self.render_to_response(self.get_context_data(form=form))
        messages.success(self.request, SAVED_MESSAGE)
        return super().form_valid(form)


class ThemeSwitchViewSet(viewsets.ViewSet):
    """
    Endpoints:
      • GET  /theme-switch/   (settings view with resolved selections)
      • POST /theme-switch/   (save {"values": {"<domainId>_site": ..., ...}})
    """

    def list(self, request):
        view = get_theme_switch_service().build_view()
        return Response(SettingsViewSerializer(view).data)

    def create(self, request):
        ser = ThemeSwitchSubmitSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        svc = get_theme_switch_service()
        if not svc.has_domains():
            return Response(
                {"error": "No domains are configured"},
                status=status.HTTP_409_CONFLICT,
            )

        try:
            svc.save(ser.validated_data['values'])
        except DatabaseError:
            logger.exception("Failed to save domain theme settings")
            return Response(
                {"error": "Failed to save theme settings"},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        return Response(SettingsViewSerializer(svc.build_view()).data)
