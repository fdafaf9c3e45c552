from rest_framework import serializers

from account.serializers import DepartmentSerializer
from account.models import User
from bets.pagination import PageQuerySerializer
from project.models import Client, Project, ManagerContact
from .models import (
    WorkLog, Incident, FileUpload,
    WorkStatus, ActionType, Severity, Recurrence,
)


# ----------------------------------------------------------------------
# 1. 장애 상세 입력 Serializer
# ----------------------------------------------------------------------
# {
#     "action_type": "임시",
#     "start_time": "2025-03-01T09:00:00+09:00",
#     "end_time": "2025-03-01T11:00:00+09:00",
#     "severity": "Major",
#     "cause_type": "DB",
#     "is_recurrence": "N"
# }
class IncidentInputSerializer(serializers.Serializer):
    action_type = serializers.ChoiceField(choices=ActionType.choices)
    start_time = serializers.DateTimeField()
    end_time = serializers.DateTimeField()
    severity = serializers.ChoiceField(choices=Severity.choices)
    cause_type = serializers.CharField(max_length=20)
    is_recurrence = serializers.ChoiceField(choices=Recurrence.choices, default=Recurrence.NO)

    def validate(self, data):
        start_time = data.get('start_time')
        end_time = data.get('end_time')
        if start_time and end_time and end_time < start_time:
            raise serializers.ValidationError({'end_time': '장애복구일시는 장애발생일시 이후여야 합니다.'})
        return data


# ----------------------------------------------------------------------
# 2. 작업 로그 생성 / 수정 Serializer
# ----------------------------------------------------------------------
# user_id, status, incident_id 는 입력받지 않습니다.
class WorkLogWriteSerializer(serializers.Serializer):
    project_id = serializers.IntegerField(min_value=1)
    work_start = serializers.DateTimeField()
    work_end = serializers.DateTimeField()
    work_type = serializers.CharField(max_length=50)
    supprt_type = serializers.CharField(max_length=50)
    service_type = serializers.CharField(max_length=50)
    product_type = serializers.CharField(max_length=50)
    product_version = serializers.CharField(max_length=50)
    contact_id = serializers.IntegerField(min_value=1)
    details = serializers.CharField()
    incident = IncidentInputSerializer(required=False, allow_null=True)

    def validate(self, data):
        if self.partial and not data:
            raise serializers.ValidationError({'detail': '수정할 항목을 하나 이상 입력해 주세요.'})
        return data

    def split(self):
        """(작업 로그 데이터, 장애 상세 데이터 또는 None)"""
        work_data = dict(self.validated_data)
        incident_data = work_data.pop('incident', None)
        return work_data, (dict(incident_data) if incident_data else None)


class StatusChangeSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=WorkStatus.choices)


# ----------------------------------------------------------------------
# 3. 조회 쿼리 Serializer
# ----------------------------------------------------------------------
class WorkLogQuerySerializer(PageQuerySerializer):
    user_id = serializers.IntegerField(required=False)
    project_id = serializers.IntegerField(required=False)
    work_type = serializers.CharField(max_length=50, required=False)
    status = serializers.ChoiceField(choices=WorkStatus.choices, required=False)
    product_type = serializers.CharField(max_length=50, required=False)
    start_date = serializers.DateField(required=False)
    end_date = serializers.DateField(required=False)
    keyword = serializers.CharField(max_length=200, required=False)


class StatisticsQuerySerializer(serializers.Serializer):
    start_date = serializers.DateField(required=False)
    end_date = serializers.DateField(required=False)

    def validate(self, data):
        start_date = data.get('start_date')
        end_date = data.get('end_date')
        if start_date and end_date and end_date < start_date:
            raise serializers.ValidationError({'end_date': '종료일은 시작일 이후여야 합니다.'})
        return data


# ----------------------------------------------------------------------
# 4. 작업 로그 조회 Serializer (연관 데이터 포함)
# ----------------------------------------------------------------------
class EngineerSerializer(serializers.ModelSerializer):
    department = DepartmentSerializer(read_only=True)

    class Meta:
        model = User
        fields = ('user_id', 'name', 'email', 'position', 'department')


class ClientBriefSerializer(serializers.ModelSerializer):
    class Meta:
        model = Client
        fields = ('client_id', 'client_name')


class ProjectBriefSerializer(serializers.ModelSerializer):
    client = ClientBriefSerializer(read_only=True)

    class Meta:
        model = Project
        fields = ('project_id', 'project_name', 'contract_period', 'client')


class ContactBriefSerializer(serializers.ModelSerializer):
    class Meta:
        model = ManagerContact
        fields = ('contact_id', 'name', 'email', 'phone')


class IncidentSerializer(serializers.ModelSerializer):
    log_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = Incident
        fields = (
            'incident_id', 'log_id', 'action_type', 'start_time', 'end_time',
            'severity', 'cause_type', 'is_recurrence'
        )


class FileUploadSerializer(serializers.ModelSerializer):
    log_id = serializers.IntegerField(read_only=True)
    user_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = FileUpload
        fields = ('file_id', 'log_id', 'user_id', 'original_name', 'stored_name', 'file_path', 'file_size')


class WorkLogSerializer(serializers.ModelSerializer):
    user_id = serializers.IntegerField(read_only=True)
    project_id = serializers.IntegerField(read_only=True)
    contact_id = serializers.IntegerField(read_only=True)
    incident_id = serializers.IntegerField(read_only=True, allow_null=True)

    user = EngineerSerializer(read_only=True)
    project = ProjectBriefSerializer(read_only=True)
    contact = ContactBriefSerializer(read_only=True)
    incident = IncidentSerializer(read_only=True, allow_null=True)
    files = FileUploadSerializer(many=True, read_only=True)

    class Meta:
        model = WorkLog
        fields = (
            'log_id', 'user_id', 'project_id', 'contact_id', 'incident_id',
            'work_start', 'work_end', 'work_type', 'supprt_type', 'service_type',
            'product_type', 'product_version', 'details', 'status',
            'created_at', 'updated_at',
            'user', 'project', 'contact', 'incident', 'files',
        )
        read_only_fields = fields
