# log_events/admin.py

from django.contrib import admin
from .models import ProjectLogEntry

@admin.register(ProjectLogEntry)
class ProjectLogEntryAdmin(admin.ModelAdmin):
    """통합 이벤트 기록 관리자 설정 (조회 전용)"""

    list_display = (
        'logged_at',
        'app_name',
        'level',
        'event_type',
        'user'
    )

    list_display_links = ('logged_at', 'event_type')

    list_filter = (
        'app_name',
        'level',
        'event_type',
        'logged_at',
    )

    search_fields = (
        'message',
        'user__email',
        'user__name',
        'event_type',
    )

    readonly_fields = [f.name for f in ProjectLogEntry._meta.get_fields()]

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False
