# PATH: apps/domains/answer_keys/serializers/template.py
from rest_framework import serializers

from apps.domains.answer_keys.models import AnswerKeyTemplate, ExamKind, Subject

from .category import AnswerKeyCategorySerializer
from .response import AnswerKeyResponseSerializer


# ========================================================
# Read
# ========================================================

class AnswerKeyTemplateSerializer(serializers.ModelSerializer):
    """
    목록용. include_stats=true 일 때만 통계 필드가 채워진다.
    """
    is_dynamic = serializers.BooleanField(read_only=True)
    categories = AnswerKeyCategorySerializer(many=True, read_only=True)

    response_count = serializers.SerializerMethodField()
    usage_count = serializers.SerializerMethodField()
    average_score = serializers.SerializerMethodField()

    class Meta:
        model = AnswerKeyTemplate
        fields = [
            "id",
            "author",
            "template_name",
            "subject",
            "exam_kind",
            "total_questions",
            "mcq_count",
            "text_count",
            "question_config",
            "is_dynamic",
            "is_active",
            "description",
            "categories",
            "response_count",
            "usage_count",
            "average_score",
            "created_at",
            "updated_at",
        ]
        ref_name = "AnswerKeyTemplate"

    def get_response_count(self, obj):
        return getattr(obj, "response_count", None)

    def get_usage_count(self, obj):
        return getattr(obj, "usage_count", None)

    def get_average_score(self, obj):
        return getattr(obj, "average_score", None)


class AnswerKeyTemplateDetailSerializer(AnswerKeyTemplateSerializer):
    responses = AnswerKeyResponseSerializer(many=True, read_only=True)

    class Meta(AnswerKeyTemplateSerializer.Meta):
        fields = AnswerKeyTemplateSerializer.Meta.fields + ["responses"]
        ref_name = "AnswerKeyTemplateDetail"


# ========================================================
# Write
# ========================================================

class AnswerKeyTemplateWriteSerializer(serializers.Serializer):
    """
    create / partial update 공용 입력.
    question_config 를 주면 dynamic mode (counts 는 config 에서 계산).
    """
    template_name = serializers.CharField(max_length=255)
    subject = serializers.ChoiceField(choices=Subject.choices)
    exam_kind = serializers.ChoiceField(choices=ExamKind.choices, required=False)
    total_questions = serializers.IntegerField(min_value=1, max_value=200, required=False)
    mcq_count = serializers.IntegerField(min_value=0, required=False, default=0)
    text_count = serializers.IntegerField(min_value=0, required=False, default=0)
    question_config = serializers.JSONField(required=False, allow_null=True)
    is_active = serializers.BooleanField(required=False, default=True)
    description = serializers.CharField(required=False, allow_blank=True, default="")
    category_ids = serializers.ListField(
        child=serializers.IntegerField(min_value=1),
        required=False,
    )

    def validate(self, attrs):
        if not self.partial and attrs.get("question_config") is None and attrs.get("total_questions") is None:
            raise serializers.ValidationError(
                {"total_questions": "total_questions or question_config is required"}
            )
        return attrs
