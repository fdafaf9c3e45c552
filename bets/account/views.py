from rest_framework import permissions
from rest_framework.views import APIView
from rest_framework_simplejwt.views import TokenObtainPairView, TokenRefreshView

from bets.pagination import PageQuerySerializer, paginate
from bets.responses import success_response, created_response, paginated_response
from .models import Department, User
from .permissions import IsAdmin, ReadOnlyOrAdmin
from .serializers import (
    CustomTokenObtainPairSerializer,
    DepartmentSerializer,
    UserSerializer,
    UserCreateSerializer,
    UserUpdateSerializer,
)
from .utils.account_manager import AccountManager


# ----------------------------------------------------------------------
# 1. 로그인 (api/auth/login/)
# ----------------------------------------------------------------------
class CustomTokenObtainPairView(TokenObtainPairView):
    """
    이메일/비밀번호로 access, refresh 토큰과 사용자 정보를 반환합니다.
    """
    serializer_class = CustomTokenObtainPairSerializer
    permission_classes = [permissions.AllowAny]

    def post(self, request, *args, **kwargs):
        response = super().post(request, *args, **kwargs)
        return success_response(response.data, '로그인 성공')


# ----------------------------------------------------------------------
# 2. 토큰 갱신 (api/auth/refresh/)
# ----------------------------------------------------------------------
class CustomTokenRefreshView(TokenRefreshView):
    permission_classes = [permissions.AllowAny]

    def post(self, request, *args, **kwargs):
        response = super().post(request, *args, **kwargs)
        return success_response(response.data, '토큰 갱신 성공')


# ----------------------------------------------------------------------
# 3. 내 정보 (api/auth/me/)
# ----------------------------------------------------------------------
class MeView(APIView):
    permission_classes = [permissions.IsAuthenticated]

    def get(self, request):
        user = User.objects.select_related('department').get(pk=request.user.pk)
        return success_response(UserSerializer(user).data, '사용자 정보 조회 성공')


# ----------------------------------------------------------------------
# 4. 부서 목록 / 생성
# ----------------------------------------------------------------------
class DepartmentListCreateView(APIView):
    permission_classes = [ReadOnlyOrAdmin]

    def get(self, request):
        departments = Department.objects.all()
        return success_response(
            DepartmentSerializer(departments, many=True).data, '부서 목록 조회 성공'
        )

    def post(self, request):
        serializer = DepartmentSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        department = serializer.save()
        return created_response(DepartmentSerializer(department).data, '부서 생성 완료')


# ----------------------------------------------------------------------
# 5. 부서 수정 / 삭제
# ----------------------------------------------------------------------
class DepartmentDetailView(APIView):
    permission_classes = [ReadOnlyOrAdmin]

    def get(self, request, dept_id):
        department = AccountManager.get_department(dept_id)
        return success_response(DepartmentSerializer(department).data, '부서 조회 성공')

    def put(self, request, dept_id):
        department = AccountManager.get_department(dept_id)
        serializer = DepartmentSerializer(department, data=request.data)
        serializer.is_valid(raise_exception=True)
        department = serializer.save()
        return success_response(DepartmentSerializer(department).data, '부서 수정 완료')

    def delete(self, request, dept_id):
        AccountManager.delete_department(dept_id, actor=request.user)
        return success_response(None, '부서 삭제 완료')


# ----------------------------------------------------------------------
# 6. 사용자 목록 / 생성 (관리자 전용)
# ----------------------------------------------------------------------
class UserListCreateView(APIView):
    permission_classes = [IsAdmin]

    def get(self, request):
        query = PageQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        page = query.validated_data['page']
        limit = query.validated_data['limit']

        queryset = User.objects.select_related('department').order_by('user_id')

        dept_id = request.query_params.get('dept_id')
        if dept_id:
            queryset = queryset.filter(department_id=dept_id)
        role = request.query_params.get('role')
        if role:
            queryset = queryset.filter(role=role)
        is_active = request.query_params.get('is_active')
        if is_active in ('true', 'false'):
            queryset = queryset.filter(is_active=(is_active == 'true'))
        keyword = request.query_params.get('keyword')
        if keyword:
            queryset = queryset.filter(name__icontains=keyword)

        total, rows = paginate(queryset, page, limit)
        return paginated_response(
            UserSerializer(rows, many=True).data, total, page, limit, '사용자 목록 조회 성공'
        )

    def post(self, request):
        serializer = UserCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.save()
        return created_response(UserSerializer(user).data, '사용자 생성 완료')


# ----------------------------------------------------------------------
# 7. 사용자 상세 / 수정 (관리자 전용)
# ----------------------------------------------------------------------
class UserDetailView(APIView):
    permission_classes = [IsAdmin]

    def get(self, request, user_id):
        user = AccountManager.get_user(user_id)
        return success_response(UserSerializer(user).data, '사용자 조회 성공')

    def put(self, request, user_id):
        user = AccountManager.get_user(user_id)
        serializer = UserUpdateSerializer(user, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        user = serializer.save()
        return success_response(UserSerializer(user).data, '사용자 수정 완료')


# ----------------------------------------------------------------------
# 8. 퇴사 / 복직 처리 (관리자 전용)
# ----------------------------------------------------------------------
class UserDeactivateView(APIView):
    permission_classes = [IsAdmin]

    def patch(self, request, user_id):
        user = AccountManager.set_active(user_id, False, actor=request.user)
        return success_response(UserSerializer(user).data, '사용자 비활성화 완료')


class UserActivateView(APIView):
    permission_classes = [IsAdmin]

    def patch(self, request, user_id):
        user = AccountManager.set_active(user_id, True, actor=request.user)
        return success_response(UserSerializer(user).data, '사용자 활성화 완료')
