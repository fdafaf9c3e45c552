"""
URL configuration for bets project.

모든 API 는 /api/ 아래에 연결합니다.
"""
from django.contrib import admin
from django.urls import path, include

from account.urls import auth_urlpatterns
from project.urls import product_urlpatterns
from .views import HealthCheckView

urlpatterns = [
    # Django Admin Site URL
    path('admin/', admin.site.urls),

    # 로그인 / 토큰 갱신 / 내 정보
    path('api/auth/', include(auth_urlpatterns)),
    # 사용자 / 부서 관리
    path('api/users/', include('account.urls')),
    # 고객사 / 프로젝트 / 담당자
    path('api/projects/', include('project.urls')),
    # 제품 마스터
    path('api/products/', include(product_urlpatterns)),
    # 작업 로그 / 통계
    path('api/work/', include('work.urls')),

    path('api/health/', HealthCheckView.as_view(), name='health'),
]
