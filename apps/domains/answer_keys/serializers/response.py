# PATH: apps/domains/answer_keys/serializers/response.py
from rest_framework import serializers

from apps.domains.answer_keys.models import AnswerKeyResponse, Difficulty, QuestionType


class AnswerKeyResponseSerializer(serializers.ModelSerializer):
    class Meta:
        model = AnswerKeyResponse
        fields = [
            "id",
            "question_number",
            "question_type",
            "correct_option",
            "correct_text_answers",
            "points_value",
            "difficulty",
            "explanation",
            "updated_at",
        ]
        ref_name = "AnswerKeyResponse"


class AnswerKeyResponseInputSerializer(serializers.Serializer):
    """
    입력 모양만 검사. type <-> 정답 필드 일치 여부는 서비스가 판단.
    """
    question_number = serializers.IntegerField(min_value=1)
    question_type = serializers.ChoiceField(choices=QuestionType.choices)
    correct_option = serializers.IntegerField(required=False, allow_null=True)
    correct_text_answers = serializers.ListField(
        child=serializers.CharField(allow_blank=True, trim_whitespace=False),
        required=False,
        allow_null=True,
    )
    points_value = serializers.FloatField(required=False, default=1.0, min_value=0)
    difficulty = serializers.ChoiceField(
        choices=Difficulty.choices,
        required=False,
        default=Difficulty.MEDIUM,
    )
    explanation = serializers.CharField(required=False, allow_blank=True, default="")


class AnswerKeyResponsesUpsertSerializer(serializers.Serializer):
    responses = AnswerKeyResponseInputSerializer(many=True)
