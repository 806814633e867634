# PATH: apps/domains/answer_keys/serializers/category.py
from rest_framework import serializers

from apps.domains.answer_keys.models import AnswerKeyCategory


class AnswerKeyCategorySerializer(serializers.ModelSerializer):
    class Meta:
        model = AnswerKeyCategory
        fields = ["id", "name", "description", "color", "created_at"]
        read_only_fields = ["id", "created_at"]
        ref_name = "AnswerKeyCategory"
