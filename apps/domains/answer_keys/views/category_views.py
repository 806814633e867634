# PATH: apps/domains/answer_keys/views/category_views.py
from rest_framework import mixins, status
from rest_framework.permissions import IsAuthenticatedOrReadOnly
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from apps.domains.answer_keys.serializers import AnswerKeyCategorySerializer
from apps.domains.answer_keys.services import answer_key_service


class AnswerKeyCategoryViewSet(mixins.ListModelMixin, GenericViewSet):
    """
    GET  /api/v1/answer-keys/categories/
    POST /api/v1/answer-keys/categories/   (관리자)
    """
    permission_classes = [IsAuthenticatedOrReadOnly]
    serializer_class = AnswerKeyCategorySerializer
    pagination_class = None

    def get_queryset(self):
        return answer_key_service.list_categories()

    def create(self, request, *args, **kwargs):
        serializer = AnswerKeyCategorySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        category = answer_key_service.create_category(request.user, serializer.validated_data)
        return Response(
            AnswerKeyCategorySerializer(category).data,
            status=status.HTTP_201_CREATED,
        )
