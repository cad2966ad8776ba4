import bleach
from rest_framework import serializers


def _clean(v):
    return bleach.clean((v or '').strip(), strip=True)


class AppointmentCreateSerializer(serializers.Serializer):
    patientName = serializers.CharField()
    doctorId = serializers.CharField()
    patientId = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    doctorName = serializers.CharField(required=False, allow_blank=True)
    department = serializers.CharField(required=False, allow_blank=True)
    type = serializers.CharField(required=False, allow_blank=True)
    time = serializers.CharField(required=False, allow_blank=True)
    token = serializers.CharField(required=False, allow_blank=True)

    def validate_patientName(self, v):
        v = _clean(v)
        if not v:
            raise serializers.ValidationError('patientName cannot be blank')
        return v

    def validate_doctorName(self, v):
        return _clean(v)

    def validate_department(self, v):
        return _clean(v)


class AppointmentStatusSerializer(serializers.Serializer):
    # Stored as sent; RECORD_STORE_STRICT_STATUS is checked by the service
    status = serializers.CharField(trim_whitespace=False, allow_blank=True)
