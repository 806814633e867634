# PATH: apps/domains/answer_keys/views/template_views.py
from __future__ import annotations

from django_filters.rest_framework import DjangoFilterBackend
from drf_yasg.utils import swagger_auto_schema
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.pagination import LimitOffsetPagination
from rest_framework.permissions import IsAuthenticatedOrReadOnly
from rest_framework.response import Response
from rest_framework.viewsets import ModelViewSet

from apps.domains.answer_keys.filters import AnswerKeyTemplateFilter
from apps.domains.answer_keys.serializers import (
    AnswerKeyResponseSerializer,
    AnswerKeyResponsesUpsertSerializer,
    AnswerKeyTemplateDetailSerializer,
    AnswerKeyTemplateSerializer,
    AnswerKeyTemplateWriteSerializer,
)
from apps.domains.answer_keys.services import answer_key_service


def _flag(value) -> bool:
    return str(value or "").strip().lower() in ("1", "true", "yes")


class AnswerKeyPagination(LimitOffsetPagination):
    default_limit = 50
    max_limit = 200


class AnswerKeyTemplateViewSet(ModelViewSet):
    """
    /api/v1/answer-keys/templates/

    - 읽기: 누구나
    - 쓰기: 로그인 필수 + 관리자 (서비스에서 Forbidden)
    """
    permission_classes = [IsAuthenticatedOrReadOnly]
    pagination_class = AnswerKeyPagination
    filter_backends = [DjangoFilterBackend]
    filterset_class = AnswerKeyTemplateFilter
    lookup_value_regex = r"\d+"

    def get_queryset(self):
        return answer_key_service.list_templates(
            include_stats=_flag(self.request.query_params.get("include_stats")),
        )

    def get_serializer_class(self):
        if self.action == "retrieve":
            return AnswerKeyTemplateDetailSerializer
        if self.action in ("create", "update", "partial_update"):
            return AnswerKeyTemplateWriteSerializer
        return AnswerKeyTemplateSerializer

    def retrieve(self, request, *args, **kwargs):
        template = answer_key_service.get_template(int(kwargs["pk"]))
        return Response(AnswerKeyTemplateDetailSerializer(template).data)

    @swagger_auto_schema(
        request_body=AnswerKeyTemplateWriteSerializer,
        responses={201: AnswerKeyTemplateDetailSerializer},
    )
    def create(self, request, *args, **kwargs):
        serializer = AnswerKeyTemplateWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        template = answer_key_service.create_template(request.user, serializer.validated_data)
        template = answer_key_service.get_template(template.id)
        return Response(
            AnswerKeyTemplateDetailSerializer(template).data,
            status=status.HTTP_201_CREATED,
        )

    @swagger_auto_schema(
        request_body=AnswerKeyTemplateWriteSerializer,
        responses={200: AnswerKeyTemplateDetailSerializer},
    )
    def update(self, request, *args, **kwargs):
        partial = kwargs.pop("partial", False)
        serializer = AnswerKeyTemplateWriteSerializer(data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        template = answer_key_service.update_template(
            request.user,
            int(kwargs["pk"]),
            serializer.validated_data,
        )
        return Response(AnswerKeyTemplateDetailSerializer(template).data)

    def destroy(self, request, *args, **kwargs):
        answer_key_service.delete_template(request.user, int(kwargs["pk"]))
        return Response(status=status.HTTP_204_NO_CONTENT)

    # --------------------------------------------------
    # responses (ground truth)
    # --------------------------------------------------

    @swagger_auto_schema(
        request_body=AnswerKeyResponsesUpsertSerializer,
        responses={200: AnswerKeyResponseSerializer(many=True)},
    )
    @action(detail=True, methods=["post"], url_path="responses")
    def responses(self, request, pk=None):
        """
        POST /api/v1/answer-keys/templates/{id}/responses/
        body: {"responses": [{question_number, question_type, correct_option | correct_text_answers, ...}]}
        """
        serializer = AnswerKeyResponsesUpsertSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        saved = answer_key_service.upsert_responses(
            request.user,
            int(pk),
            serializer.validated_data["responses"],
        )
        return Response(AnswerKeyResponseSerializer(saved, many=True).data)

    @action(
        detail=True,
        methods=["delete"],
        url_path=r"responses/(?P<question_number>\d+)",
    )
    def delete_response(self, request, pk=None, question_number=None):
        answer_key_service.delete_response(request.user, int(pk), int(question_number))
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=True, methods=["get"], url_path="stats")
    def stats(self, request, pk=None):
        """
        GET /api/v1/answer-keys/templates/{id}/stats/
        """
        return Response(answer_key_service.get_template_stats(int(pk)))
