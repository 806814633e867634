# PATH: apps/domains/answer_sheets/views/sheet_views.py
from __future__ import annotations

from django_filters.rest_framework import DjangoFilterBackend
from drf_yasg.utils import swagger_auto_schema
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.pagination import LimitOffsetPagination
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.viewsets import ModelViewSet

from apps.domains.answer_sheets.filters import AnswerSheetFilter
from apps.domains.answer_sheets.serializers import (
    AnswerSaveSerializer,
    AnswerSheetCreateSerializer,
    AnswerSheetDetailSerializer,
    AnswerSheetResponseSerializer,
    AnswerSheetSerializer,
    AnswerSheetUpdateSerializer,
    SubmitSerializer,
)
from apps.domains.answer_sheets.services import sheet_service
from apps.domains.answer_sheets.services.submission import submit_sheet


class AnswerSheetPagination(LimitOffsetPagination):
    default_limit = 50
    max_limit = 200


class AnswerSheetViewSet(ModelViewSet):
    """
    /api/v1/answer-sheets/sheets/

    🔐 학습자는 본인 답안지만 (queryset 단계에서 필터 -> 남의 것은 404)
    """
    permission_classes = [IsAuthenticated]
    pagination_class = AnswerSheetPagination
    filter_backends = [DjangoFilterBackend]
    filterset_class = AnswerSheetFilter
    lookup_value_regex = r"\d+"

    def get_queryset(self):
        return sheet_service.list_sheets(self.request.user)

    def get_serializer_class(self):
        if self.action == "create":
            return AnswerSheetCreateSerializer
        if self.action in ("update", "partial_update"):
            return AnswerSheetUpdateSerializer
        if self.action == "retrieve":
            return AnswerSheetDetailSerializer
        return AnswerSheetSerializer

    def retrieve(self, request, *args, **kwargs):
        sheet = self.get_object()
        return Response(AnswerSheetDetailSerializer(sheet_service.get_sheet(sheet.id)).data)

    @swagger_auto_schema(
        request_body=AnswerSheetCreateSerializer,
        responses={201: AnswerSheetSerializer},
    )
    def create(self, request, *args, **kwargs):
        serializer = AnswerSheetCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        sheet = sheet_service.create_sheet(request.user, **serializer.validated_data)
        return Response(AnswerSheetSerializer(sheet).data, status=status.HTTP_201_CREATED)

    @swagger_auto_schema(
        request_body=AnswerSheetUpdateSerializer,
        responses={200: AnswerSheetSerializer},
    )
    def update(self, request, *args, **kwargs):
        sheet = self.get_object()
        serializer = AnswerSheetUpdateSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        sheet = sheet_service.update_sheet(sheet.id, serializer.validated_data)
        return Response(AnswerSheetSerializer(sheet).data)

    def destroy(self, request, *args, **kwargs):
        sheet = self.get_object()
        sheet_service.delete_sheet(sheet.id)
        return Response(status=status.HTTP_204_NO_CONTENT)

    # --------------------------------------------------
    # responses
    # --------------------------------------------------

    @swagger_auto_schema(
        request_body=AnswerSaveSerializer,
        responses={200: AnswerSheetResponseSerializer},
    )
    @action(detail=True, methods=["put"], url_path="responses")
    def save_response(self, request, pk=None):
        """
        PUT /api/v1/answer-sheets/sheets/{id}/responses/
        body: {question_number, question_type, mcq_option | text_answer}
        """
        sheet = self.get_object()
        serializer = AnswerSaveSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        obj = sheet_service.save_response(
            sheet.id,
            serializer.validated_data["question_number"],
            serializer.validated_data["question_type"],
            serializer.to_value(),
        )
        return Response(AnswerSheetResponseSerializer(obj).data)

    @action(
        detail=True,
        methods=["delete"],
        url_path=r"responses/(?P<question_number>\d+)",
    )
    def delete_response(self, request, pk=None, question_number=None):
        sheet = self.get_object()
        sheet_service.delete_response(sheet.id, int(question_number))
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=True, methods=["get"], url_path="stats")
    def stats(self, request, pk=None):
        sheet = self.get_object()
        return Response(sheet_service.get_stats(sheet.id))

    # --------------------------------------------------
    # submit
    # --------------------------------------------------

    @swagger_auto_schema(request_body=SubmitSerializer)
    @action(detail=True, methods=["post"], url_path="submit")
    def submit(self, request, pk=None):
        """
        POST /api/v1/answer-sheets/sheets/{id}/submit/

        응답 outcome:
          - submitted    : 매칭 정답지 없음, 채점 대기
          - graded       : 자동 채점 완료
          - grade_failed : 제출은 됐고 채점만 실패
        """
        sheet = self.get_object()
        serializer = SubmitSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        answers = [
            {
                "question_number": a["question_number"],
                "question_type": a["question_type"],
                "mcq_option": a.get("mcq_option"),
                "text_answer": a.get("text_answer"),
            }
            for a in serializer.validated_data.get("answers", [])
        ]
        outcome = submit_sheet(sheet.id, answers)

        body = outcome.to_dict()
        body["sheet"] = AnswerSheetDetailSerializer(sheet_service.get_sheet(sheet.id)).data
        return Response(body, status=status.HTTP_200_OK)
