# apps/domains/results/models/grade_usage_log.py
from django.conf import settings
from django.db import models
from django.utils import timezone


class GradeUsageLog(models.Model):
    """
    채점 이력 (append-only)

    - 어떤 답안지를 어떤 정답지로 누가 언제 채점했는지
    - 자동 채점은 graded_by = NULL
    - 재채점해도 기존 행은 수정하지 않는다
    """

    sheet = models.ForeignKey(
        "answer_sheets.AnswerSheet",
        on_delete=models.CASCADE,
        related_name="grade_logs",
    )
    template = models.ForeignKey(
        "answer_keys.AnswerKeyTemplate",
        on_delete=models.CASCADE,
        related_name="usage_logs",
    )
    graded_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="grade_logs",
    )
    graded_at = models.DateTimeField(default=timezone.now, db_index=True)

    # 채점 시점 스냅샷
    score = models.FloatField(default=0.0)
    max_score = models.FloatField(default=0.0)
    correct_count = models.PositiveIntegerField(default=0)

    class Meta:
        db_table = "results_grade_usage_log"
        ordering = ["-graded_at", "-id"]
        indexes = [
            models.Index(fields=["sheet", "graded_at"], name="grade_log_sheet_idx"),
            models.Index(fields=["template", "graded_at"], name="grade_log_tpl_idx"),
        ]

    def __str__(self):
        return f"GradeUsageLog(sheet={self.sheet_id}, template={self.template_id}, score={self.score})"
