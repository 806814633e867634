from django.core.validators import RegexValidator
from django.db import models

from apps.api.common.models import BaseModel


class AnswerKeyCategory(BaseModel):
    """
    정답지 분류 (예: 2024 모의고사, 단원평가 ...)
    """

    name = models.CharField(max_length=100, unique=True)
    description = models.TextField(blank=True, default="")
    color = models.CharField(
        max_length=7,
        default="#007AFF",
        validators=[RegexValidator(r"^#[0-9A-Fa-f]{6}$", "color must be #RRGGBB")],
    )

    class Meta:
        db_table = "answer_key_categories"
        ordering = ["name"]

    def __str__(self):
        return self.name
