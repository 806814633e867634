# JWT 발급 시 role 클레임을 함께 싣는다. (앱이 관리자 메뉴 노출 여부를 토큰만으로 판단)
from __future__ import annotations

from rest_framework_simplejwt.serializers import TokenObtainPairSerializer
from rest_framework_simplejwt.views import TokenObtainPairView

from apps.core.authorization import is_admin


class RoleAwareTokenObtainPairSerializer(TokenObtainPairSerializer):
    """
    표준 username/password 로그인 + 커스텀 클레임.

    claims:
      - role: "admin" | "learner"
      - is_admin: bool (is_admin 협력자 판단 결과)
    """

    @classmethod
    def get_token(cls, user):
        token = super().get_token(user)
        token["role"] = str(getattr(user, "role", "") or "")
        token["is_admin"] = is_admin(user)
        return token


class RoleAwareTokenObtainPairView(TokenObtainPairView):
    serializer_class = RoleAwareTokenObtainPairSerializer
