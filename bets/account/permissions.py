# account/permissions.py

from rest_framework.permissions import BasePermission, SAFE_METHODS

from .models import UserRole


def _has_role(user, *roles):
    return bool(user and user.is_authenticated and user.role in roles)


class IsAdmin(BasePermission):
    """관리자(admin)만 허용합니다."""
    message = '해당 작업에 대한 권한이 없습니다.'

    def has_permission(self, request, view):
        return _has_role(request.user, UserRole.ADMIN)


class IsManagerOrAdmin(BasePermission):
    """매니저(manager) 또는 관리자(admin)만 허용합니다."""
    message = '해당 작업에 대한 권한이 없습니다.'

    def has_permission(self, request, view):
        return _has_role(request.user, UserRole.ADMIN, UserRole.MANAGER)


class ReadOnlyOrManager(BasePermission):
    """조회는 로그인 사용자 모두, 변경은 매니저/관리자만 허용합니다."""
    message = '해당 작업에 대한 권한이 없습니다.'

    def has_permission(self, request, view):
        if request.method in SAFE_METHODS:
            return bool(request.user and request.user.is_authenticated)
        return _has_role(request.user, UserRole.ADMIN, UserRole.MANAGER)


class ReadOnlyOrAdmin(BasePermission):
    """조회는 로그인 사용자 모두, 변경은 관리자만 허용합니다."""
    message = '해당 작업에 대한 권한이 없습니다.'

    def has_permission(self, request, view):
        if request.method in SAFE_METHODS:
            return bool(request.user and request.user.is_authenticated)
        return _has_role(request.user, UserRole.ADMIN)


class IsOwnerOrManager(BasePermission):
    """
    객체 단위 권한: 작성자 본인 또는 매니저/관리자만 허용합니다.
    obj 에는 user_id 속성이 있어야 합니다. (예: WorkLog)
    """
    message = '본인이 작성한 작업 로그만 수정/삭제할 수 있습니다.'

    def has_object_permission(self, request, view, obj):
        if request.method in SAFE_METHODS:
            return True
        if _has_role(request.user, UserRole.ADMIN, UserRole.MANAGER):
            return True
        return obj.user_id == request.user.pk
