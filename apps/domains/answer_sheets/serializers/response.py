# PATH: apps/domains/answer_sheets/serializers/response.py
from rest_framework import serializers

from apps.domains.answer_keys.models import QuestionType
from apps.domains.answer_sheets.models import AnswerSheetResponse


class AnswerSheetResponseSerializer(serializers.ModelSerializer):
    class Meta:
        model = AnswerSheetResponse
        fields = [
            "id",
            "question_number",
            "question_type",
            "mcq_option",
            "text_answer",
            "updated_at",
        ]
        read_only_fields = fields
        ref_name = "AnswerSheetResponse"


class AnswerSaveSerializer(serializers.Serializer):
    """
    문항 1개 답.
    type 에 맞는 값이 있는지는 서비스(validate_answer)가 판단한다.
    """
    question_number = serializers.IntegerField(min_value=1)
    question_type = serializers.ChoiceField(choices=QuestionType.choices)
    mcq_option = serializers.IntegerField(required=False, allow_null=True)
    text_answer = serializers.CharField(
        required=False,
        allow_null=True,
        allow_blank=True,
        trim_whitespace=False,
    )

    def to_value(self):
        data = self.validated_data
        if data["question_type"] == QuestionType.MCQ:
            return data.get("mcq_option")
        return data.get("text_answer")


class SubmitSerializer(serializers.Serializer):
    answers = AnswerSaveSerializer(many=True, required=False)
