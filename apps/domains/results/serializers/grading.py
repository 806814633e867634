# PATH: apps/domains/results/serializers/grading.py
from rest_framework import serializers

from apps.domains.results.models import GradeUsageLog, TestResultRecord


class GradeSheetSerializer(serializers.Serializer):
    sheet_id = serializers.IntegerField(min_value=1)
    template_id = serializers.IntegerField(min_value=1)


class GradeHistoryQuerySerializer(serializers.Serializer):
    sheet_id = serializers.IntegerField(min_value=1, required=False)
    template_id = serializers.IntegerField(min_value=1, required=False)
    limit = serializers.IntegerField(min_value=1, max_value=200, required=False)
    offset = serializers.IntegerField(min_value=0, required=False, default=0)


class GradeUsageLogSerializer(serializers.ModelSerializer):
    sheet_name = serializers.CharField(source="sheet.sheet_name", read_only=True)
    template_name = serializers.CharField(source="template.template_name", read_only=True)

    class Meta:
        model = GradeUsageLog
        fields = [
            "id",
            "sheet",
            "sheet_name",
            "template",
            "template_name",
            "graded_by",
            "graded_at",
            "score",
            "max_score",
            "correct_count",
        ]
        read_only_fields = fields
        ref_name = "GradeUsageLog"


class TestResultRecordSerializer(serializers.ModelSerializer):
    test_id = serializers.IntegerField(source="test.id", read_only=True)
    subject = serializers.CharField(source="test.subject", read_only=True)
    exam_kind = serializers.CharField(source="test.exam_kind", read_only=True)
    test_name = serializers.CharField(source="test.test_name", read_only=True)
    test_date = serializers.DateField(source="test.test_date", read_only=True)

    class Meta:
        model = TestResultRecord
        fields = [
            "id",
            "test_id",
            "subject",
            "exam_kind",
            "test_name",
            "test_date",
            "raw_score",
            "standard_score",
            "percentile",
            "grade",
            "updated_at",
        ]
        read_only_fields = fields
        ref_name = "TestResultRecord"
