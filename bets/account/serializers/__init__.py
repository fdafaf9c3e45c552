# account/serializers/__init__.py

from .auth_serializers import (
    CustomTokenObtainPairSerializer,
    RefreshTokenSerializer,
)

from .user_serializers import (
    DepartmentSerializer,
    UserSerializer,
    UserCreateSerializer,
    UserUpdateSerializer,
)

__all__ = [
    'CustomTokenObtainPairSerializer',
    'RefreshTokenSerializer',
    'DepartmentSerializer',
    'UserSerializer',
    'UserCreateSerializer',
    'UserUpdateSerializer',
]
