from django.utils import timezone
from rest_framework import permissions
from rest_framework.views import APIView

from .responses import success_response


class HealthCheckView(APIView):
    """서버 상태 확인 (인증 불필요)"""
    authentication_classes = []
    permission_classes = [permissions.AllowAny]

    def get(self, request):
        return success_response(
            {'status': 'ok', 'timestamp': timezone.now().isoformat()},
            'BeTS API 서버 정상 동작 중'
        )
