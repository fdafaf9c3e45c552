from django.db import models
from django.conf import settings

from project.models import Project, ManagerContact


class WorkStatus(models.TextChoices):
    REGISTERED = '등록', '등록'
    CHECKED = '관리자확인', '관리자확인'
    APPROVED = '승인완료', '승인완료'


# 상태별 허용 전이 (승인완료는 종료 상태)
STATUS_TRANSITIONS = {
    WorkStatus.REGISTERED: (WorkStatus.CHECKED,),
    WorkStatus.CHECKED: (WorkStatus.APPROVED, WorkStatus.REGISTERED),
    WorkStatus.APPROVED: (),
}

# 장애 상세(Incident)가 반드시 필요한 작업 유형
INCIDENT_WORK_TYPES = ('장애지원', '장애처리', '장애대응')


class ActionType(models.TextChoices):
    TEMPORARY = '임시', '임시'
    PERMANENT = '영구', '영구'
    GUIDE = '가이드', '가이드'
    MONITORING = '모니터링', '모니터링'


class Severity(models.TextChoices):
    CRITICAL = 'Critical', 'Critical'
    MAJOR = 'Major', 'Major'
    MINOR = 'Minor', 'Minor'


class Recurrence(models.TextChoices):
    YES = 'Y', '재발'
    NO = 'N', '최초'


# ----------------------------------------------------------------------
# 1. work_log 모델 (작업 로그)
# ----------------------------------------------------------------------
class WorkLog(models.Model):
    """
    엔지니어가 등록하는 작업 기록입니다.
    등록 -> 관리자확인 -> 승인완료 순서로 검토되며,
    장애 유형 작업은 반드시 장애 상세(Incident)를 가집니다.
    """
    log_id = models.BigAutoField(
        primary_key=True,
        verbose_name='작업 로그 식별자'
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name='work_logs',
        db_column='user_id',
        verbose_name='담당 직원'
    )
    project = models.ForeignKey(
        Project,
        on_delete=models.PROTECT,
        related_name='work_logs',
        db_column='project_id',
        verbose_name='프로젝트'
    )
    work_start = models.DateTimeField(
        verbose_name='작업시작일시'
    )
    work_end = models.DateTimeField(
        verbose_name='작업종료일시'
    )
    # 정기점검, 장애지원, 기술지원, 교육, 기타 ...
    work_type = models.CharField(
        verbose_name='작업 유형',
        max_length=50
    )
    # 원격, 방문, 가이드 등 (컬럼명 supprt_type 유지)
    supprt_type = models.CharField(
        verbose_name='지원 구분',
        max_length=50
    )
    service_type = models.CharField(
        verbose_name='서비스 유형',
        max_length=50
    )
    product_type = models.CharField(
        verbose_name='제품명',
        max_length=50
    )
    product_version = models.CharField(
        verbose_name='제품 버전',
        max_length=50
    )
    status = models.CharField(
        verbose_name='결재 상태',
        max_length=10,
        choices=WorkStatus.choices,
        default=WorkStatus.REGISTERED
    )
    contact = models.ForeignKey(
        ManagerContact,
        on_delete=models.PROTECT,
        related_name='work_logs',
        db_column='contact_id',
        verbose_name='요청자'
    )
    details = models.TextField(
        verbose_name='상세 작업 내용'
    )
    # 장애 상세가 생성된 뒤에 채워집니다.
    incident = models.OneToOneField(
        'Incident',
        on_delete=models.SET_NULL,
        related_name='+',
        db_column='incident_id',
        null=True,
        blank=True,
        verbose_name='연관 장애'
    )
    created_at = models.DateTimeField(
        verbose_name='등록일시',
        auto_now_add=True
    )
    updated_at = models.DateTimeField(
        verbose_name='수정일시',
        auto_now=True
    )

    class Meta:
        verbose_name = '작업 로그'
        verbose_name_plural = '작업 로그'
        db_table = 'work_log'
        ordering = ['-work_start']
        indexes = [
            models.Index(fields=['work_start'], name='idx_work_log_start'),
            models.Index(fields=['status'], name='idx_work_log_status'),
        ]

    def __str__(self):
        return f'[{self.status}] {self.work_type} #{self.log_id}'

    @property
    def is_incident_type(self):
        return self.work_type in INCIDENT_WORK_TYPES

    def allowed_transitions(self):
        return STATUS_TRANSITIONS.get(self.status, ())


# ----------------------------------------------------------------------
# 2. incidents 모델 (장애 상세)
# ----------------------------------------------------------------------
class Incident(models.Model):
    incident_id = models.BigAutoField(
        primary_key=True,
        verbose_name='장애 고유 식별자'
    )
    log = models.OneToOneField(
        WorkLog,
        on_delete=models.CASCADE,
        related_name='+',
        db_column='log_id',
        verbose_name='연관 작업 로그'
    )
    action_type = models.CharField(
        verbose_name='조치 유형',
        max_length=50,
        choices=ActionType.choices
    )
    start_time = models.DateTimeField(
        verbose_name='장애발생일시'
    )
    end_time = models.DateTimeField(
        verbose_name='장애복구일시'
    )
    severity = models.CharField(
        verbose_name='영향도',
        max_length=20,
        choices=Severity.choices
    )
    # OS, DB, 앱 등
    cause_type = models.CharField(
        verbose_name='장애 원인 분류',
        max_length=20
    )
    is_recurrence = models.CharField(
        verbose_name='재발 여부',
        max_length=1,
        choices=Recurrence.choices,
        default=Recurrence.NO
    )

    class Meta:
        verbose_name = '장애 상세'
        verbose_name_plural = '장애 상세'
        db_table = 'incidents'

    def __str__(self):
        return f'[{self.severity}] {self.cause_type} (log_id={self.log_id})'


# ----------------------------------------------------------------------
# 3. file_uploads 모델 (첨부 파일 메타데이터)
# ----------------------------------------------------------------------
class FileUpload(models.Model):
    file_id = models.BigAutoField(
        primary_key=True,
        verbose_name='파일 식별자'
    )
    log = models.ForeignKey(
        WorkLog,
        on_delete=models.CASCADE,
        related_name='files',
        db_column='log_id',
        verbose_name='작업 로그'
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name='uploaded_files',
        db_column='user',
        verbose_name='업로드한 사용자'
    )
    original_name = models.CharField(
        verbose_name='원본 파일명',
        max_length=255
    )
    stored_name = models.CharField(
        verbose_name='저장된 파일명',
        max_length=255,
        null=True,
        blank=True
    )
    file_path = models.CharField(
        verbose_name='파일 저장 경로',
        max_length=500,
        null=True,
        blank=True
    )
    file_size = models.PositiveIntegerField(
        verbose_name='파일 크기(bytes)',
        null=True,
        blank=True
    )

    class Meta:
        verbose_name = '첨부 파일'
        verbose_name_plural = '첨부 파일'
        db_table = 'file_uploads'
        ordering = ['file_id']

    def __str__(self):
        return self.original_name
