from rest_framework import serializers

from account.models import Department
from account.serializers import DepartmentSerializer
from bets.exceptions import Conflict
from .models import Client, Project, ManagerContact, Product


# ----------------------------------------------------------------------
# 1. 고객사 담당자
# ----------------------------------------------------------------------
class ManagerContactSerializer(serializers.ModelSerializer):
    project_id = serializers.PrimaryKeyRelatedField(
        source='project',
        queryset=Project.objects.filter(is_deleted=False),
        error_messages={'does_not_exist': '프로젝트를 찾을 수 없습니다.'}
    )

    class Meta:
        model = ManagerContact
        fields = ('contact_id', 'project_id', 'name', 'email', 'phone')
        read_only_fields = ('contact_id',)


class ManagerContactUpdateSerializer(serializers.ModelSerializer):
    """담당자 수정 (소속 프로젝트는 변경하지 않습니다)"""

    class Meta:
        model = ManagerContact
        fields = ('contact_id', 'name', 'email', 'phone')
        read_only_fields = ('contact_id',)


# ----------------------------------------------------------------------
# 2. 프로젝트
# ----------------------------------------------------------------------
class ClientSummarySerializer(serializers.ModelSerializer):
    class Meta:
        model = Client
        fields = ('client_id', 'client_name')


class ProjectSerializer(serializers.ModelSerializer):
    client_id = serializers.PrimaryKeyRelatedField(
        source='client',
        queryset=Client.objects.filter(is_deleted=False),
        error_messages={'does_not_exist': '유효하지 않은 고객사 ID입니다.'}
    )
    dept_id = serializers.PrimaryKeyRelatedField(
        source='department',
        queryset=Department.objects.all(),
        error_messages={'does_not_exist': '유효하지 않은 부서 ID입니다.'}
    )
    client = ClientSummarySerializer(read_only=True)
    department = DepartmentSerializer(read_only=True)
    contacts = ManagerContactUpdateSerializer(many=True, read_only=True)

    class Meta:
        model = Project
        fields = (
            'project_id', 'client_id', 'dept_id', 'project_name', 'contract_period',
            'client', 'department', 'contacts'
        )
        read_only_fields = ('project_id',)


class ProjectSummarySerializer(serializers.ModelSerializer):
    class Meta:
        model = Project
        fields = ('project_id', 'project_name', 'contract_period')


# ----------------------------------------------------------------------
# 3. 고객사
# ----------------------------------------------------------------------
class ClientSerializer(serializers.ModelSerializer):
    projects = serializers.SerializerMethodField()

    class Meta:
        model = Client
        fields = ('client_id', 'client_name', 'projects')
        read_only_fields = ('client_id',)

    def get_projects(self, obj):
        # 논리 삭제된 프로젝트는 제외
        projects = [p for p in obj.projects.all() if not p.is_deleted]
        return ProjectSummarySerializer(projects, many=True).data


# ----------------------------------------------------------------------
# 4. 제품
# ----------------------------------------------------------------------
class ProductSerializer(serializers.ModelSerializer):
    product_type = serializers.CharField(max_length=50)
    product_name = serializers.CharField(max_length=100)

    class Meta:
        model = Product
        fields = ('product_id', 'product_type', 'product_name')
        read_only_fields = ('product_id',)
        # (유형, 제품명) 중복은 _check_duplicate 에서 409
        validators = []

    def _check_duplicate(self, product_type, product_name, exclude_id=None):
        queryset = Product.objects.filter(product_type=product_type, product_name=product_name)
        if exclude_id is not None:
            queryset = queryset.exclude(pk=exclude_id)
        if queryset.exists():
            raise Conflict('이미 동일한 제품 유형/제품명이 존재합니다.')

    def create(self, validated_data):
        self._check_duplicate(validated_data['product_type'], validated_data['product_name'])
        return super().create(validated_data)

    def update(self, instance, validated_data):
        self._check_duplicate(
            validated_data.get('product_type', instance.product_type),
            validated_data.get('product_name', instance.product_name),
            exclude_id=instance.pk,
        )
        return super().update(instance, validated_data)
