# apps/core/views.py

from drf_yasg.utils import swagger_auto_schema
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.core.serializers import UserSerializer


class MeView(APIView):
    """
    GET /api/v1/core/me/
    앱이 관리자 메뉴(answer key 작성/수동 채점) 노출 여부를 판단하는 데 사용.
    """
    permission_classes = [IsAuthenticated]

    @swagger_auto_schema(auto_schema=None)
    def get(self, request):
        serializer = UserSerializer(request.user)
        return Response(serializer.data)
