# 인증 (로그인 / 토큰)

from rest_framework import serializers
from rest_framework.exceptions import AuthenticationFailed, PermissionDenied
from rest_framework_simplejwt.serializers import TokenObtainPairSerializer

from ..models import User
from .user_serializers import UserSerializer


# ----------------------------------------------------------------------
# 1. JWT 토큰 Serializer (Custom) -- login
# ----------------------------------------------------------------------
# {
#     "email" : "engineer@bets.co.kr",
#     "password" : "password123"
# }
class CustomTokenObtainPairSerializer(TokenObtainPairSerializer):
    default_error_messages = {
        'no_active_account': '이메일 또는 비밀번호가 올바르지 않습니다.'
    }

    @classmethod
    def get_token(cls, user):
        token = super().get_token(user)
        token['role'] = user.role
        token['name'] = user.name
        token['email'] = user.email
        return token

    def validate(self, attrs):
        # 1. 이메일로 사용자 조회. 없으면 일반 인증 실패 메시지
        email = attrs.get(User.USERNAME_FIELD)
        try:
            user = User.objects.get(**{User.USERNAME_FIELD: email})
        except User.DoesNotExist:
            raise AuthenticationFailed(self.error_messages['no_active_account'], 'no_active_account')

        # 2. 퇴사(비활성) 계정 차단
        if not user.is_active:
            raise PermissionDenied('비활성화된 계정입니다. 관리자에게 문의하세요.')

        # 3. 비밀번호 검증 및 토큰 발급
        data = super().validate(attrs)
        data['user'] = UserSerializer(self.user).data
        return data


class RefreshTokenSerializer(serializers.Serializer):
    refresh = serializers.CharField(required=True)
