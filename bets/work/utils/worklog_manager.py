# utils/worklog_manager.py

from django.db import transaction
from rest_framework.exceptions import NotFound, ValidationError

from bets.pagination import paginate
from log_events.models import ProjectLogEntry, LogLevel
from project.models import Project, ManagerContact
from .period import work_start_q
from ..models import (
    WorkLog, Incident, FileUpload,
    WorkStatus, INCIDENT_WORK_TYPES,
)

# 작업 로그 생성 시 필수 항목
REQUIRED_WORK_FIELDS = (
    'project_id', 'work_start', 'work_end', 'work_type', 'supprt_type',
    'service_type', 'product_type', 'product_version', 'contact_id', 'details',
)

# 요청 본문으로는 변경할 수 없는 항목 (작성자, 상태, 장애 연결)
PROTECTED_WORK_FIELDS = ('log_id', 'user', 'user_id', 'status', 'incident', 'incident_id', 'created_at', 'updated_at')

WORK_FIELDS = (
    'work_start', 'work_end', 'work_type', 'supprt_type', 'service_type',
    'product_type', 'product_version', 'details',
)

INCIDENT_FIELDS = ('action_type', 'start_time', 'end_time', 'severity', 'cause_type', 'is_recurrence')
REQUIRED_INCIDENT_FIELDS = ('action_type', 'start_time', 'end_time', 'severity', 'cause_type')

MSG_NOT_FOUND = '작업 로그를 찾을 수 없습니다.'
MSG_INCIDENT_REQUIRED = '장애 관련 작업 유형에는 장애 상세 정보가 필수입니다.'
MSG_INCIDENT_KEYS_REQUIRED = '장애 상세의 영향도(severity)와 원인분류(cause_type)는 필수입니다.'
MSG_DELETE_ONLY_REGISTERED = '등록 상태의 작업 로그만 삭제할 수 있습니다.'


class WorkLogManager:
    """
    작업 로그(WorkLog)와 장애 상세(Incident)의 생성, 수정, 상태 전이, 삭제를 전담하는 매니저 클래스

    - 여러 행을 변경하는 작업은 하나의 트랜잭션으로 처리합니다.
    - 실패 시 DRF 예외(NotFound, ValidationError)를 그대로 전파합니다.
    """

    # --------------------------------------------------
    # 조회
    # --------------------------------------------------
    @classmethod
    def queryset(cls):
        return (
            WorkLog.objects
            .select_related(
                'user', 'user__department',
                'project', 'project__client',
                'contact', 'incident',
            )
            .prefetch_related('files')
        )

    @classmethod
    def find_by_id(cls, log_id):
        try:
            return cls.queryset().get(pk=log_id)
        except WorkLog.DoesNotExist:
            raise NotFound(MSG_NOT_FOUND)

    @classmethod
    def find_all(cls, filters=None, page=1, limit=20):
        """
        조건에 맞는 작업 로그를 work_start 최신순으로 조회합니다.

        Args:
            filters: user_id, project_id, work_type, status, product_type,
                     start_date, end_date, keyword (모두 선택, AND 조건)
            page: 1부터 시작하는 페이지 번호
            limit: 페이지 크기

        Returns:
            (total, rows)
        """
        filters = filters or {}
        queryset = cls.queryset()

        for key in ('user_id', 'project_id', 'work_type', 'status', 'product_type'):
            value = filters.get(key)
            if value not in (None, ''):
                queryset = queryset.filter(**{key: value})

        queryset = queryset.filter(work_start_q(filters.get('start_date'), filters.get('end_date')))

        keyword = filters.get('keyword')
        if keyword:
            queryset = queryset.filter(details__icontains=keyword)

        return paginate(queryset.order_by('-work_start', '-log_id'), page, limit)

    # --------------------------------------------------
    # 검증 헬퍼
    # --------------------------------------------------
    @classmethod
    def _strip_protected(cls, work_data):
        data = dict(work_data or {})
        for key in PROTECTED_WORK_FIELDS:
            data.pop(key, None)
        return data

    @classmethod
    def _resolve_project(cls, project_id):
        try:
            return Project.objects.get(pk=project_id, is_deleted=False)
        except (Project.DoesNotExist, ValueError, TypeError):
            raise ValidationError({'project_id': ['유효하지 않은 프로젝트 ID입니다.']})

    @classmethod
    def _resolve_contact(cls, contact_id):
        try:
            return ManagerContact.objects.get(pk=contact_id)
        except (ManagerContact.DoesNotExist, ValueError, TypeError):
            raise ValidationError({'contact_id': ['유효하지 않은 담당자 ID입니다.']})

    @classmethod
    def _check_incident_keys(cls, incident_data):
        if not incident_data.get('severity') or not incident_data.get('cause_type'):
            raise ValidationError({'detail': MSG_INCIDENT_KEYS_REQUIRED})

    @classmethod
    def _check_new_incident(cls, incident_data):
        cls._check_incident_keys(incident_data)
        missing = [key for key in REQUIRED_INCIDENT_FIELDS if incident_data.get(key) in (None, '')]
        if missing:
            raise ValidationError({
                'incident': {key: ['필수 항목입니다.'] for key in missing}
            })

    @classmethod
    def _check_period(cls, start, end, field, message):
        if start and end and end < start:
            raise ValidationError({field: [message]})

    @classmethod
    def _incident_fields(cls, incident_data):
        return {key: value for key, value in incident_data.items() if key in INCIDENT_FIELDS}

    # --------------------------------------------------
    # 생성
    # --------------------------------------------------
    @classmethod
    @transaction.atomic
    def create(cls, work_data, incident_data, user):
        """
        작업 로그를 등록 상태로 생성합니다.
        장애 상세가 주어지면 같은 트랜잭션에서 Incident 를 만들고 incident_id 를 채웁니다.

        Args:
            work_data: 작업 로그 필드 (user_id, status 는 무시)
            incident_data: 장애 상세 dict 또는 None
            user: 요청 사용자 (작성자로 기록)

        Returns:
            WorkLog: 연관 데이터를 포함해 다시 조회한 인스턴스
        """
        data = cls._strip_protected(work_data)

        # 1. 필수 항목 검증
        missing = [key for key in REQUIRED_WORK_FIELDS if data.get(key) in (None, '')]
        if missing:
            raise ValidationError({key: ['필수 항목입니다.'] for key in missing})

        # 2. 장애 관련 작업 유형 검증
        if data['work_type'] in INCIDENT_WORK_TYPES:
            if not incident_data:
                raise ValidationError({'detail': MSG_INCIDENT_REQUIRED})
        if incident_data:
            cls._check_new_incident(incident_data)
            cls._check_period(
                incident_data['start_time'], incident_data['end_time'],
                'incident', '장애복구일시는 장애발생일시 이후여야 합니다.'
            )

        cls._check_period(
            data['work_start'], data['work_end'],
            'work_end', '작업종료일시는 작업시작일시 이후여야 합니다.'
        )

        # 3. 참조 데이터 확인
        project = cls._resolve_project(data['project_id'])
        contact = cls._resolve_contact(data['contact_id'])

        # 4. WorkLog 생성
        work_log = WorkLog.objects.create(
            user=user,
            project=project,
            contact=contact,
            status=WorkStatus.REGISTERED,
            **{key: data[key] for key in WORK_FIELDS},
        )

        # 5. 장애 상세 생성 후 역참조 채우기
        if incident_data:
            incident = Incident.objects.create(log=work_log, **cls._incident_fields(incident_data))
            work_log.incident = incident
            work_log.save(update_fields=['incident', 'updated_at'])

        return cls.find_by_id(work_log.pk)

    # --------------------------------------------------
    # 수정 (부분 수정)
    # --------------------------------------------------
    @classmethod
    @transaction.atomic
    def update(cls, log_id, work_data, incident_data, user):
        """
        전달된 항목만 변경합니다. 작성자, 상태, 장애 연결은 변경하지 않습니다.
        권한 확인은 호출하는 쪽(View)에서 합니다.
        """
        try:
            work_log = WorkLog.objects.select_for_update().get(pk=log_id)
        except WorkLog.DoesNotExist:
            raise NotFound(MSG_NOT_FOUND)

        data = cls._strip_protected(work_data)

        # 1. 변경 내용 반영 (저장 전)
        if 'project_id' in data:
            work_log.project = cls._resolve_project(data['project_id'])
        if 'contact_id' in data:
            work_log.contact = cls._resolve_contact(data['contact_id'])
        for key in WORK_FIELDS:
            if key in data:
                setattr(work_log, key, data[key])

        # 2. 변경 후 작업 유형 기준으로 장애 상세 검증
        if work_log.is_incident_type:
            if incident_data:
                cls._check_incident_keys(incident_data)
            elif work_log.incident_id is None:
                raise ValidationError({'detail': MSG_INCIDENT_REQUIRED})

        # 3. 변경 후 값 기준 기간 검증 후 저장
        cls._check_period(
            work_log.work_start, work_log.work_end,
            'work_end', '작업종료일시는 작업시작일시 이후여야 합니다.'
        )
        work_log.save()

        # 4. 장애 상세 수정 또는 생성
        if incident_data:
            fields = cls._incident_fields(incident_data)
            if work_log.incident_id:
                incident = Incident.objects.select_for_update().get(pk=work_log.incident_id)
                for key, value in fields.items():
                    setattr(incident, key, value)
                cls._check_period(
                    incident.start_time, incident.end_time,
                    'incident', '장애복구일시는 장애발생일시 이후여야 합니다.'
                )
                incident.save()
            else:
                cls._check_new_incident(fields)
                cls._check_period(
                    fields['start_time'], fields['end_time'],
                    'incident', '장애복구일시는 장애발생일시 이후여야 합니다.'
                )
                incident = Incident.objects.create(log=work_log, **fields)
                work_log.incident = incident
                work_log.save(update_fields=['incident', 'updated_at'])

        return cls.find_by_id(work_log.pk)

    # --------------------------------------------------
    # 상태 전이
    # --------------------------------------------------
    @classmethod
    @transaction.atomic
    def change_status(cls, log_id, new_status, user):
        """
        등록 -> 관리자확인 -> 승인완료 (관리자확인 -> 등록 은 반려)
        허용되지 않은 전이는 ValidationError 로 거부합니다.
        """
        try:
            work_log = WorkLog.objects.select_for_update().get(pk=log_id)
        except WorkLog.DoesNotExist:
            raise NotFound(MSG_NOT_FOUND)

        current_status = work_log.status
        allowed = work_log.allowed_transitions()

        if new_status not in allowed:
            raise ValidationError({
                'detail': (
                    f"'{current_status}' 상태에서 '{new_status}' 상태로 변경할 수 없습니다. "
                    f"허용 전이: [{', '.join(allowed) or '없음'}]"
                )
            })

        work_log.status = new_status
        work_log.save(update_fields=['status', 'updated_at'])

        ProjectLogEntry.record(
            app_name='work',
            event_type='WORKLOG_STATUS_CHANGED',
            message=f'log_id={work_log.pk} {current_status} -> {new_status}',
            level=LogLevel.INFO,
            user=user,
        )
        return cls.find_by_id(work_log.pk)

    # --------------------------------------------------
    # 삭제 (등록 상태만)
    # --------------------------------------------------
    @classmethod
    def delete(cls, log_id, user=None):
        """
        장애 상세, 첨부 파일, 작업 로그 순서로 한 트랜잭션에서 삭제합니다.
        상태 확인과 삭제는 같은 트랜잭션에서 잠근 행을 기준으로 합니다.
        """
        with transaction.atomic():
            try:
                work_log = WorkLog.objects.select_for_update().get(pk=log_id)
            except WorkLog.DoesNotExist:
                raise NotFound(MSG_NOT_FOUND)

            deletable = work_log.status == WorkStatus.REGISTERED
            if deletable:
                if work_log.incident_id:
                    Incident.objects.filter(pk=work_log.incident_id).delete()
                FileUpload.objects.filter(log_id=work_log.pk).delete()
                WorkLog.objects.filter(pk=work_log.pk).delete()

                ProjectLogEntry.record(
                    app_name='work',
                    event_type='WORKLOG_DELETED',
                    message=f'log_id={log_id} ({work_log.work_type}) 삭제',
                    level=LogLevel.INFO,
                    user=user,
                )

        # 거부 기록은 트랜잭션 밖에서 남김
        if not deletable:
            ProjectLogEntry.record(
                app_name='work',
                event_type='WORKLOG_DELETE_REJECTED',
                message=f'log_id={work_log.pk} status={work_log.status}',
                level=LogLevel.WARNING,
                user=user,
            )
            raise ValidationError({'detail': MSG_DELETE_ONLY_REGISTERED})
