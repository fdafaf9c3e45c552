# 사용자 / 부서 관리

from django.contrib.auth.password_validation import validate_password
from django.core import exceptions
from rest_framework import serializers

from bets.exceptions import Conflict
from ..models import Department, User, UserRole


class DepartmentSerializer(serializers.ModelSerializer):
    dept_name = serializers.CharField(max_length=30)

    class Meta:
        model = Department
        fields = ('dept_id', 'dept_name')
        read_only_fields = ('dept_id',)


# ----------------------------------------------------------------------
# 1. 사용자 조회 Serializer (비밀번호 제외)
# ----------------------------------------------------------------------
class UserSerializer(serializers.ModelSerializer):
    dept_id = serializers.IntegerField(source='department_id', read_only=True)
    department = DepartmentSerializer(read_only=True)

    class Meta:
        model = User
        fields = (
            'user_id', 'email', 'name', 'position', 'role',
            'is_active', 'dept_id', 'department', 'last_login'
        )
        read_only_fields = fields


def _validate_password_value(value):
    try:
        validate_password(value, user=None)
    except exceptions.ValidationError as e:
        raise serializers.ValidationError(list(e.messages))
    return value


# ----------------------------------------------------------------------
# 2. 사용자 생성 Serializer (관리자 전용)
# ----------------------------------------------------------------------
class UserCreateSerializer(serializers.Serializer):
    email = serializers.EmailField(max_length=50)
    name = serializers.CharField(max_length=50)
    password = serializers.CharField(write_only=True, min_length=6, style={'input_type': 'password'})
    dept_id = serializers.PrimaryKeyRelatedField(
        source='department', queryset=Department.objects.all()
    )
    position = serializers.CharField(max_length=20)
    role = serializers.ChoiceField(choices=UserRole.choices, default=UserRole.ENGINEER)
    is_active = serializers.BooleanField(default=True)

    def validate_password(self, value):
        return _validate_password_value(value)

    def create(self, validated_data):
        # 이메일 중복은 409 로 응답합니다.
        if User.objects.filter(email__iexact=validated_data['email']).exists():
            raise Conflict('이미 사용 중인 이메일입니다.')

        password = validated_data.pop('password')
        email = validated_data.pop('email')
        return User.objects.create_user(email=email, password=password, **validated_data)


# ----------------------------------------------------------------------
# 3. 사용자 수정 Serializer (부분 수정)
# ----------------------------------------------------------------------
class UserUpdateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=50, required=False)
    dept_id = serializers.PrimaryKeyRelatedField(
        source='department', queryset=Department.objects.all(), required=False
    )
    position = serializers.CharField(max_length=20, required=False)
    role = serializers.ChoiceField(choices=UserRole.choices, required=False)
    password = serializers.CharField(write_only=True, min_length=6, required=False)

    def validate_password(self, value):
        return _validate_password_value(value)

    def validate(self, data):
        if not data:
            raise serializers.ValidationError({'detail': '수정할 항목을 하나 이상 입력해 주세요.'})
        return data

    def update(self, instance, validated_data):
        password = validated_data.pop('password', None)
        for field, value in validated_data.items():
            setattr(instance, field, value)
        if password:
            instance.set_password(password)
        instance.save()
        return instance
