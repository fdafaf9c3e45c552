from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from .models import User, Department


# 1. User 모델을 위한 커스텀 관리자 클래스
@admin.register(User)
class UserAdmin(BaseUserAdmin):
    # 사용자 목록 페이지에 표시할 필드 목록
    list_display = ('email', 'name', 'position', 'department', 'role', 'is_active')

    list_filter = ('role', 'is_active', 'department')

    search_fields = ('email', 'name')
    ordering = ('user_id',)
    filter_horizontal = ()

    # Fieldsets: 사용자 편집 페이지에 표시할 필드를 그룹별로 정의합니다.
    fieldsets = (
        (None, {'fields': ('email', 'password', 'name')}),
        ('소속', {'fields': ('department', 'position')}),
        ('권한', {'fields': ('role', 'is_active', 'is_superuser')}),
        ('중요 날짜', {'fields': ('last_login',)}),
    )

    # add_fieldsets: 사용자 추가 페이지에 표시할 필드를 정의합니다.
    add_fieldsets = (
        (None, {
            'classes': ('wide',),
            'fields': ('email', 'password1', 'password2', 'name', 'department', 'position', 'role'),
        }),
    )


@admin.register(Department)
class DepartmentAdmin(admin.ModelAdmin):
    list_display = ('dept_id', 'dept_name', 'member_count')
    search_fields = ('dept_name',)

    def member_count(self, obj):
        return obj.users.count()
    member_count.short_description = '소속 인원'
