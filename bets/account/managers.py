from django.contrib.auth.models import BaseUserManager

# User 모델을 생성하고 관리하는 커스텀 매니저
class UserManager(BaseUserManager):
    """
    email을 로그인 ID로 사용하는 User 모델의 매니저입니다.
    일반 사용자(create_user)와 관리자(create_superuser) 생성 메서드를 포함합니다.
    """
    def create_user(self, email, password=None, **extra_fields):
        if not email:
            raise ValueError('The Email must be set')
        email = self.normalize_email(email)
        user = self.model(email=email, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_superuser(self, email, password=None, **extra_fields):
        """
        관리자 계정을 생성합니다. role은 항상 admin 입니다.
        """
        extra_fields.setdefault('role', 'admin')
        extra_fields.setdefault('is_superuser', True)
        extra_fields.setdefault('is_active', True)
        extra_fields.setdefault('position', '관리자')

        if extra_fields.get('role') != 'admin':
            raise ValueError('Superuser must have role=admin.')
        if extra_fields.get('is_superuser') is not True:
            raise ValueError('Superuser must have is_superuser=True.')

        return self.create_user(email, password, **extra_fields)
