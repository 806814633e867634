# PATH: apps/domains/answer_sheets/serializers/sheet.py
from rest_framework import serializers

from apps.domains.answer_keys.models import ExamKind, Subject
from apps.domains.answer_sheets.models import AnswerSheet

from .response import AnswerSheetResponseSerializer


# ========================================================
# Read
# ========================================================

class AnswerSheetSerializer(serializers.ModelSerializer):
    class Meta:
        model = AnswerSheet
        fields = [
            "id",
            "owner",
            "subject",
            "exam_kind",
            "sheet_name",
            "total_questions",
            "mcq_count",
            "text_count",
            "question_config",
            "status",
            "score",
            "grade",
            "submitted_at",
            "answered_count",
            "mcq_answered",
            "text_answered",
            "completion_percentage",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields
        ref_name = "AnswerSheet"


class AnswerSheetDetailSerializer(AnswerSheetSerializer):
    responses = AnswerSheetResponseSerializer(many=True, read_only=True)

    class Meta(AnswerSheetSerializer.Meta):
        fields = AnswerSheetSerializer.Meta.fields + ["responses"]
        read_only_fields = fields
        ref_name = "AnswerSheetDetail"


# ========================================================
# Write
# ========================================================

class AnswerSheetCreateSerializer(serializers.Serializer):
    subject = serializers.ChoiceField(choices=Subject.choices)
    exam_kind = serializers.ChoiceField(choices=ExamKind.choices, required=False, default=ExamKind.PRACTICE)
    sheet_name = serializers.CharField(max_length=255)
    total_questions = serializers.IntegerField(min_value=1, max_value=200, required=False)
    mcq_count = serializers.IntegerField(min_value=0, required=False, default=0)
    text_count = serializers.IntegerField(min_value=0, required=False, default=0)
    question_config = serializers.JSONField(required=False, allow_null=True)

    def validate(self, attrs):
        if attrs.get("question_config") is None and attrs.get("total_questions") is None:
            raise serializers.ValidationError(
                {"total_questions": "total_questions or question_config is required"}
            )
        return attrs


class AnswerSheetUpdateSerializer(serializers.Serializer):
    """
    부분 수정 전용. status 는 받지 않는다.
    """
    subject = serializers.ChoiceField(choices=Subject.choices, required=False)
    exam_kind = serializers.ChoiceField(choices=ExamKind.choices, required=False)
    sheet_name = serializers.CharField(max_length=255, required=False)
    grade = serializers.CharField(max_length=10, required=False, allow_null=True, allow_blank=True)
    total_questions = serializers.IntegerField(min_value=1, max_value=200, required=False)
    mcq_count = serializers.IntegerField(min_value=0, required=False)
    text_count = serializers.IntegerField(min_value=0, required=False)
    question_config = serializers.JSONField(required=False, allow_null=True)
