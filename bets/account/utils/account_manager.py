# utils/account_manager.py

from django.db import transaction
from rest_framework.exceptions import NotFound, ValidationError

from log_events.models import ProjectLogEntry, LogLevel
from ..models import Department, User


class AccountManager:
    """
    부서 삭제, 사용자 퇴사/복직 처리를 전담하는 매니저 클래스
    """

    @classmethod
    def get_department(cls, dept_id):
        try:
            return Department.objects.get(pk=dept_id)
        except Department.DoesNotExist:
            raise NotFound('부서를 찾을 수 없습니다.')

    @classmethod
    def get_user(cls, user_id):
        try:
            return User.objects.select_related('department').get(pk=user_id)
        except User.DoesNotExist:
            raise NotFound('사용자를 찾을 수 없습니다.')

    @classmethod
    @transaction.atomic
    def delete_department(cls, dept_id, actor=None):
        """
        소속 사용자가 한 명이라도 있으면 삭제하지 않습니다. (퇴사자 포함)
        """
        department = cls.get_department(dept_id)

        member_count = User.objects.filter(department=department).count()
        if member_count > 0:
            raise ValidationError({
                'detail': f'해당 부서에 소속된 사용자({member_count}명)가 있어 삭제할 수 없습니다.'
            })

        dept_name = department.dept_name
        department.delete()

        ProjectLogEntry.record(
            app_name='account',
            event_type='DEPARTMENT_DELETED',
            message=f'부서 삭제: {dept_name} (dept_id={dept_id})',
            user=actor,
        )

    @classmethod
    @transaction.atomic
    def set_active(cls, user_id, is_active, actor=None):
        """
        퇴사(비활성화) 또는 복직(활성화) 처리합니다.
        작업 로그 보존을 위해 사용자 레코드는 삭제하지 않습니다.
        """
        user = cls.get_user(user_id)

        if actor is not None and user.pk == actor.pk and not is_active:
            raise ValidationError({'detail': '본인 계정은 비활성화할 수 없습니다.'})

        user.is_active = is_active
        user.save(update_fields=['is_active'])

        ProjectLogEntry.record(
            app_name='account',
            event_type='USER_ACTIVATED' if is_active else 'USER_DEACTIVATED',
            message=f'{user.email} 계정 {"활성화" if is_active else "비활성화"}',
            level=LogLevel.INFO,
            user=actor,
        )
        return user
