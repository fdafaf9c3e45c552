from django.db import models
from django.contrib.auth.models import (
    AbstractBaseUser, PermissionsMixin
)
from .managers import UserManager


class UserRole(models.TextChoices):
    ADMIN = 'admin', '관리자'
    MANAGER = 'manager', '매니저'
    ENGINEER = 'engineer', '엔지니어'


# departments 모델
class Department(models.Model):
    """
    부서 정보. 사용자(User)와 프로젝트(Project)가 소속됩니다.
    소속 사용자가 있는 부서는 삭제할 수 없습니다.
    """
    dept_id = models.BigAutoField(
        primary_key=True,
        verbose_name='부서 고유 식별자'
    )
    dept_name = models.CharField(
        verbose_name='부서 명칭',
        max_length=30
    )

    class Meta:
        verbose_name = '부서'
        verbose_name_plural = '부서'
        db_table = 'departments'
        ordering = ['dept_id']

    def __str__(self):
        return self.dept_name


# users 모델 (AbstractBaseUser와 PermissionsMixin 상속)
class User(AbstractBaseUser, PermissionsMixin):
    """
    엔지니어/매니저/관리자 계정입니다.
    email을 USERNAME_FIELD로 사용하여 로그인에 사용합니다.
    퇴사 처리는 삭제가 아니라 is_active=False 로 합니다.
    """
    user_id = models.BigAutoField(
        primary_key=True,
        verbose_name='사용자 고유 식별자'
    )
    # 부트스트랩 관리자 계정은 부서 없이 생성될 수 있습니다.
    department = models.ForeignKey(
        Department,
        on_delete=models.PROTECT,
        related_name='users',
        db_column='dept_id',
        null=True,
        blank=True,
        verbose_name='소속 부서'
    )
    email = models.EmailField(
        verbose_name='회사 이메일',
        max_length=50,
        unique=True,
    )
    name = models.CharField(
        verbose_name='성명',
        max_length=50,
    )
    # 직급 (전임, 선임 등)
    position = models.CharField(
        verbose_name='직급',
        max_length=20,
    )
    role = models.CharField(
        verbose_name='권한',
        max_length=20,
        choices=UserRole.choices,
        default=UserRole.ENGINEER,
    )
    is_active = models.BooleanField(
        verbose_name='계정 활성화/퇴사 여부',
        default=True,
    )

    objects = UserManager()

    USERNAME_FIELD = 'email'
    # create_superuser 시 USERNAME_FIELD와 password 외에 입력받을 필드
    REQUIRED_FIELDS = ['name']

    class Meta:
        verbose_name = '사용자'
        verbose_name_plural = '사용자'
        db_table = 'users'
        ordering = ['user_id']

    def __str__(self):
        return self.email

    # Django admin 접근은 관리자 권한으로만 허용합니다.
    @property
    def is_staff(self):
        return self.role == UserRole.ADMIN

    @property
    def is_manager_or_admin(self):
        return self.role in (UserRole.ADMIN, UserRole.MANAGER)

    def get_full_name(self):
        return self.name or self.email

    def get_short_name(self):
        return self.name or self.email.split('@')[0]
