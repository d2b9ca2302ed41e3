from typing import List, Optional, Tuple

from django import forms
from django.utils.html import format_html
from django.utils.safestring import SafeString

from domain_theme_switch.apps.theme_switch.domain.models import FieldGroup, Message, SettingsView


def message_html(message: Optional[Message]) -> SafeString:
    """Render a view-model message with its link as an HTML anchor."""
    if message is None:
        return SafeString('')
    anchor = format_html('<a href="{}">{}</a>', message.link.url, message.link.text)
    return format_html(message.template, link=anchor)


class DomainThemeSwitchConfigForm(forms.Form):
    """
    Site and admin theme selects for every domain in a ``SettingsView``.

    The selects render the installed themes but accept any submitted value,
    which is stored verbatim. A value missing from the submission cleans to
    None.
    """

    def __init__(self, *args, settings_view: SettingsView, **kwargs):
        super().__init__(*args, **kwargs)
        self.settings_view = settings_view
        for field in settings_view.fields:
            self.fields[field.name] = forms.CharField(
                label=field.title,
                required=False,
                strip=False,
                empty_value='',
                initial=field.default,
                help_text=message_html(field.suffix),
                widget=forms.Select(choices=field.options),
            )

    def clean(self):
        cleaned_data = super().clean()
        for name, field in self.fields.items():
            if field.widget.value_omitted_from_data(self.data, self.files, self.add_prefix(name)):
                cleaned_data[name] = None
        return cleaned_data

    def fieldsets(self) -> List[Tuple[FieldGroup, list]]:
        """Pair every domain group with its bound fields, in view order."""
        return [
            (group, [self[field.name] for field in group.fields])
            for group in self.settings_view.groups
        ]
