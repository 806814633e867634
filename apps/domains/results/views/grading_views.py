# PATH: apps/domains/results/views/grading_views.py
from __future__ import annotations

from drf_yasg.utils import swagger_auto_schema
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.domains.answer_sheets.serializers import AnswerSheetSerializer
from apps.domains.results.permissions import IsGradingAdmin
from apps.domains.results.serializers import (
    GradeHistoryQuerySerializer,
    GradeSheetSerializer,
    GradeUsageLogSerializer,
    TestResultRecordSerializer,
)
from apps.domains.results.services import grading_service


class GradeSheetView(APIView):
    """
    POST /api/v1/results/grade/
    body: {sheet_id, template_id}

    관리자 수동 채점. 실패는 그대로 에러 응답.
    """
    permission_classes = [IsAuthenticated, IsGradingAdmin]

    @swagger_auto_schema(request_body=GradeSheetSerializer)
    def post(self, request):
        serializer = GradeSheetSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        sheet, result = grading_service.grade_sheet(
            request.user,
            serializer.validated_data["sheet_id"],
            serializer.validated_data["template_id"],
        )
        return Response({
            "sheet": AnswerSheetSerializer(sheet).data,
            "result": result.to_dict(),
        })


class GradeHistoryView(APIView):
    """
    GET /api/v1/results/grade-history/?sheet_id=&template_id=&limit=&offset=
    """
    permission_classes = [IsAuthenticated]

    @swagger_auto_schema(query_serializer=GradeHistoryQuerySerializer)
    def get(self, request):
        query = GradeHistoryQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        logs = grading_service.get_grade_history(request.user, **query.validated_data)
        return Response(GradeUsageLogSerializer(logs, many=True).data)


class MyTestResultsView(APIView):
    """
    GET /api/v1/results/me/tests/
    본인 성적 이력 (시험별 최신 결과)
    """
    permission_classes = [IsAuthenticated]

    def get(self, request):
        rows = grading_service.list_my_test_results(request.user)
        return Response(TestResultRecordSerializer(rows, many=True).data)
