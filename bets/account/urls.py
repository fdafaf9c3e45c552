from django.urls import path
from .views import (
    CustomTokenObtainPairView, CustomTokenRefreshView, MeView,
    DepartmentListCreateView, DepartmentDetailView,
    UserListCreateView, UserDetailView, UserDeactivateView, UserActivateView,
)


# api/auth/
auth_urlpatterns = [
    # POST /api/auth/login/
    path('login/', CustomTokenObtainPairView.as_view(), name='auth-login'),
    # POST /api/auth/refresh/
    path('refresh/', CustomTokenRefreshView.as_view(), name='auth-refresh'),
    # GET /api/auth/me/
    path('me/', MeView.as_view(), name='auth-me'),
]

# api/users/
urlpatterns = [
    path('departments/', DepartmentListCreateView.as_view(), name='department-list'),
    path('departments/<int:dept_id>/', DepartmentDetailView.as_view(), name='department-detail'),

    path('', UserListCreateView.as_view(), name='user-list'),
    path('<int:user_id>/', UserDetailView.as_view(), name='user-detail'),
    # 퇴사 / 복직
    path('<int:user_id>/deactivate/', UserDeactivateView.as_view(), name='user-deactivate'),
    path('<int:user_id>/activate/', UserActivateView.as_view(), name='user-activate'),
]
