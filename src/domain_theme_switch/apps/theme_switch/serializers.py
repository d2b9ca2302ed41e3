from rest_framework import serializers


class LinkSerializer(serializers.Serializer):
    text = serializers.CharField()
    url = serializers.CharField()


class MessageSerializer(serializers.Serializer):
    template = serializers.CharField()
    link = LinkSerializer()
    text = serializers.SerializerMethodField()

    def get_text(self, obj):
        return obj.plain_text()


class SelectFieldSerializer(serializers.Serializer):
    name = serializers.CharField()
    title = serializers.CharField()
    options = serializers.SerializerMethodField()
    default = serializers.CharField()
    suffix = MessageSerializer(allow_null=True)

    def get_options(self, obj):
        return [{"id": theme_id, "name": name} for theme_id, name in obj.options]


class FieldGroupSerializer(serializers.Serializer):
    domain_id = serializers.CharField()
    title = serializers.CharField()
    controls = SelectFieldSerializer(many=True, source='fields')


class SettingsViewSerializer(serializers.Serializer):
    """Read-only representation of the theme settings form."""

    form_id = serializers.CharField()
    is_empty = serializers.BooleanField()
    groups = FieldGroupSerializer(many=True)
    message = MessageSerializer(allow_null=True)


class ThemeSwitchSubmitSerializer(serializers.Serializer):
    """Submitted selections keyed by ``<domainId>_site`` / ``<domainId>_admin``."""

    values = serializers.DictField(
        child=serializers.CharField(allow_null=True, allow_blank=True, trim_whitespace=False),
        allow_empty=True,
    )
