from django.contrib import admin
from .models import WorkLog, Incident, FileUpload


class FileUploadInline(admin.TabularInline):
    model = FileUpload
    extra = 0
    fields = ('original_name', 'stored_name', 'file_size', 'user')
    readonly_fields = ('user',)


@admin.register(WorkLog)
class WorkLogAdmin(admin.ModelAdmin):
    """
    작업 로그 관리자 페이지입니다.
    상태 전이는 API(WorkLogManager)로만 처리하므로 status 는 읽기 전용입니다.
    """
    list_display = ('log_id', 'work_type', 'status', 'user', 'project', 'work_start', 'work_end')
    list_filter = ('status', 'work_type')
    search_fields = ('details', 'user__name', 'project__project_name')
    list_select_related = ('user', 'project')
    readonly_fields = ('status', 'incident', 'created_at', 'updated_at')
    date_hierarchy = 'work_start'
    inlines = [FileUploadInline]

    fieldsets = (
        ('작업 정보', {
            'fields': ('user', 'project', 'contact', 'work_type', 'supprt_type', 'service_type'),
        }),
        ('제품', {
            'fields': ('product_type', 'product_version'),
        }),
        ('시간', {
            'fields': ('work_start', 'work_end', 'created_at', 'updated_at'),
        }),
        ('내용 / 상태', {
            'fields': ('details', 'status', 'incident'),
        }),
    )


@admin.register(Incident)
class IncidentAdmin(admin.ModelAdmin):
    list_display = ('incident_id', 'log', 'severity', 'cause_type', 'action_type', 'is_recurrence', 'start_time')
    list_filter = ('severity', 'action_type', 'is_recurrence')
    search_fields = ('cause_type',)
