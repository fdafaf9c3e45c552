# log_events/models.py

import logging

from django.db import models
from django.conf import settings # User 모델 참조를 위해 settings 임포트

logger = logging.getLogger('log_events')


class LogLevel(models.TextChoices):
    INFO = 'INFO', '정보'
    WARNING = 'WARNING', '경고'
    ERROR = 'ERROR', '오류'


# ----------------------------------------------------------------------
# 1. Project Log Entry Model (통합 이벤트 기록)
# ----------------------------------------------------------------------
class ProjectLogEntry(models.Model):
    """
    작업 로그 상태 변경, 삭제, 서버 내부 오류 등 추적이 필요한 이벤트를 기록합니다.
    """
    # 이벤트 발생 앱 (work, account, project, bets)
    app_name = models.CharField(
        max_length=50,
        verbose_name='발생 앱'
    )
    logged_at = models.DateTimeField(
        verbose_name='기록 시간',
        auto_now_add=True
    )
    # 이벤트 발생 사용자 (비로그인 요청이면 NULL)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        verbose_name='관련 사용자'
    )
    level = models.CharField(
        max_length=10,
        choices=LogLevel.choices,
        default=LogLevel.INFO,
        verbose_name='심각도'
    )
    # 예외 클래스 이름 또는 이벤트 타입 (예: WorkLog.changeStatus)
    event_type = models.CharField(
        max_length=100,
        verbose_name='이벤트 타입'
    )
    message = models.TextField(
        verbose_name='상세 메시지'
    )
    # 분석용 요청 데이터 (JSON 문자열)
    request_data = models.TextField(
        verbose_name='요청 데이터',
        null=True,
        blank=True
    )

    class Meta:
        verbose_name = '통합 이벤트 기록'
        verbose_name_plural = '통합 이벤트 기록'
        ordering = ['-logged_at']
        db_table = 'project_log_entry'

    def __str__(self):
        return f'[{self.app_name} | {self.level}] {self.event_type}'

    @classmethod
    def record(cls, app_name, event_type, message, level=LogLevel.INFO, user=None, request_data=None):
        """
        이벤트를 DB에 기록하고 같은 내용을 콘솔 로그로도 남깁니다.
        익명 사용자(AnonymousUser)는 NULL로 저장합니다.
        """
        if user is not None and not getattr(user, 'pk', None):
            user = None

        logger.log(
            logging.getLevelName(str(level)),
            '[%s] %s: %s', app_name, event_type, message
        )
        return cls.objects.create(
            app_name=app_name,
            user=user,
            level=level,
            event_type=event_type,
            message=message,
            request_data=request_data,
        )
