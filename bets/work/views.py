from rest_framework.exceptions import PermissionDenied
from rest_framework.permissions import IsAuthenticated
from rest_framework.views import APIView

from account.permissions import IsManagerOrAdmin, IsOwnerOrManager
from bets.responses import success_response, created_response, paginated_response
from .models import WorkStatus
from .serializers import (
    WorkLogWriteSerializer,
    WorkLogSerializer,
    WorkLogQuerySerializer,
    StatusChangeSerializer,
    StatisticsQuerySerializer,
)
from .utils.statistics import WorkStatistics
from .utils.worklog_manager import WorkLogManager


# ----------------------------------------------------------------------
# 1. 작업 로그 목록 / 생성
# ----------------------------------------------------------------------
class WorkLogListCreateView(APIView):
    """
    GET  : 필터 + 페이지 조회 (로그인 사용자)
    POST : 작업 로그 생성. 작성자는 항상 요청 사용자입니다.
    """
    permission_classes = [IsAuthenticated]

    def get(self, request):
        query = WorkLogQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        filters = dict(query.validated_data)
        page = filters.pop('page')
        limit = filters.pop('limit')

        total, rows = WorkLogManager.find_all(filters, page, limit)
        return paginated_response(
            WorkLogSerializer(rows, many=True).data, total, page, limit, '작업 로그 목록 조회 성공'
        )

    def post(self, request):
        serializer = WorkLogWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        work_data, incident_data = serializer.split()

        work_log = WorkLogManager.create(work_data, incident_data, request.user)
        return created_response(WorkLogSerializer(work_log).data, '작업 로그 생성 완료')


# ----------------------------------------------------------------------
# 2. 작업 로그 상세 / 수정 / 삭제
# ----------------------------------------------------------------------
class WorkLogDetailView(APIView):
    """
    수정: 작성자 본인(등록 상태일 때) 또는 매니저/관리자
    삭제: 작성자 본인 또는 매니저/관리자 (등록 상태만)
    """
    permission_classes = [IsAuthenticated, IsOwnerOrManager]

    def get_object(self, log_id):
        work_log = WorkLogManager.find_by_id(log_id)
        self.check_object_permissions(self.request, work_log)
        return work_log

    def get(self, request, log_id):
        work_log = self.get_object(log_id)
        return success_response(WorkLogSerializer(work_log).data, '작업 로그 조회 성공')

    def put(self, request, log_id):
        work_log = self.get_object(log_id)

        # 엔지니어는 검토 전(등록) 작업 로그만 수정할 수 있습니다.
        if not request.user.is_manager_or_admin and work_log.status != WorkStatus.REGISTERED:
            raise PermissionDenied('등록 상태의 작업 로그만 수정할 수 있습니다.')

        serializer = WorkLogWriteSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        work_data, incident_data = serializer.split()

        work_log = WorkLogManager.update(log_id, work_data, incident_data, request.user)
        return success_response(WorkLogSerializer(work_log).data, '작업 로그 수정 완료')

    def patch(self, request, log_id):
        return self.put(request, log_id)

    def delete(self, request, log_id):
        self.get_object(log_id)
        WorkLogManager.delete(log_id, user=request.user)
        return success_response(None, '작업 로그 삭제 완료')


# ----------------------------------------------------------------------
# 3. 상태 변경 (매니저/관리자)
# ----------------------------------------------------------------------
# PATCH /api/work/<log_id>/status/
# { "status": "관리자확인" }
class WorkLogStatusView(APIView):
    permission_classes = [IsManagerOrAdmin]

    def patch(self, request, log_id):
        serializer = StatusChangeSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        work_log = WorkLogManager.change_status(log_id, serializer.validated_data['status'], request.user)
        return success_response(WorkLogSerializer(work_log).data, '상태 변경 완료')


# ----------------------------------------------------------------------
# 4. 통계 (매니저/관리자)
# ----------------------------------------------------------------------
class WorkStatisticsView(APIView):
    permission_classes = [IsManagerOrAdmin]

    def get(self, request):
        query = StatisticsQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        result = WorkStatistics.get_statistics(**query.validated_data)
        return success_response(result, '통계 조회 성공')


class WorkDetailedStatisticsView(APIView):
    permission_classes = [IsManagerOrAdmin]

    def get(self, request):
        query = StatisticsQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        result = WorkStatistics.get_detailed_statistics(**query.validated_data)
        return success_response(result, '상세 통계 조회 성공')
