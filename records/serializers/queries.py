from rest_framework import serializers


class _ListQuerySerializer(serializers.Serializer):
    """Query-string filters; anything not declared here is ignored."""

    def to_internal_value(self, data):
        # QueryDict -> plain values, dropping blanks so defaults apply
        cleaned = {k: v for k, v in data.items() if k in self.fields and v not in (None, '')}
        return super().to_internal_value(cleaned)


class DoctorListQuerySerializer(_ListQuerySerializer):
    status = serializers.CharField(max_length=32, required=False, default='ALL')
    department = serializers.CharField(max_length=64, required=False, default='ALL')
    search = serializers.CharField(max_length=64, required=False, default='', trim_whitespace=True)


class PatientListQuerySerializer(_ListQuerySerializer):
    type = serializers.CharField(max_length=16, required=False, default='ALL')
    query = serializers.CharField(max_length=64, required=False, default='')
    status = serializers.CharField(max_length=32, required=False, default='ALL')


class AppointmentListQuerySerializer(_ListQuerySerializer):
    status = serializers.CharField(max_length=32, required=False, default='ALL')
    doctorId = serializers.CharField(max_length=64, required=False, default='ALL')
    type = serializers.CharField(max_length=32, required=False, default='ALL')
    search = serializers.CharField(max_length=64, required=False, default='')


class PharmacyListQuerySerializer(_ListQuerySerializer):
    stockStatus = serializers.CharField(max_length=16, required=False, default='ALL')
    search = serializers.CharField(max_length=64, required=False, default='')


class LabReportListQuerySerializer(_ListQuerySerializer):
    status = serializers.CharField(max_length=32, required=False, default='ALL')
    search = serializers.CharField(max_length=64, required=False, default='')
