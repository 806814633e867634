# apps/domains/answer_sheets/migrations/0001_initial.py
import django.core.validators
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="AnswerSheet",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "subject",
                    models.CharField(
                        choices=[
                            ("korean", "Korean"),
                            ("mathematics", "Mathematics"),
                            ("english", "English"),
                            ("others", "Others"),
                        ],
                        max_length=20,
                    ),
                ),
                (
                    "exam_kind",
                    models.CharField(
                        choices=[
                            ("practice", "Practice"),
                            ("mock", "Mock"),
                            ("midterm", "Midterm"),
                            ("final", "Final"),
                        ],
                        default="practice",
                        max_length=20,
                    ),
                ),
                ("sheet_name", models.CharField(max_length=255)),
                (
                    "total_questions",
                    models.PositiveIntegerField(
                        validators=[
                            django.core.validators.MinValueValidator(1),
                            django.core.validators.MaxValueValidator(200),
                        ]
                    ),
                ),
                ("mcq_count", models.PositiveIntegerField(default=0)),
                ("text_count", models.PositiveIntegerField(default=0)),
                ("question_config", models.JSONField(blank=True, null=True)),
                (
                    "status",
                    models.CharField(
                        choices=[("draft", "Draft"), ("submitted", "Submitted"), ("graded", "Graded")],
                        default="draft",
                        max_length=20,
                    ),
                ),
                ("score", models.FloatField(blank=True, null=True)),
                ("grade", models.CharField(blank=True, max_length=10, null=True)),
                ("submitted_at", models.DateTimeField(blank=True, null=True)),
                ("answered_count", models.PositiveIntegerField(default=0)),
                ("mcq_answered", models.PositiveIntegerField(default=0)),
                ("text_answered", models.PositiveIntegerField(default=0)),
                ("completion_percentage", models.FloatField(default=0.0)),
                (
                    "owner",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="answer_sheets",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "db_table": "answer_sheets",
                "ordering": ["-created_at", "-id"],
                "indexes": [
                    models.Index(fields=["owner", "created_at"], name="answer_sheet_owner_idx"),
                    models.Index(fields=["owner", "subject", "exam_kind"], name="answer_sheet_kind_idx"),
                    models.Index(fields=["status"], name="answer_sheet_status_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="AnswerSheetResponse",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "question_number",
                    models.PositiveIntegerField(validators=[django.core.validators.MinValueValidator(1)]),
                ),
                (
                    "question_type",
                    models.CharField(
                        choices=[("mcq", "Multiple choice"), ("text", "Free text")],
                        max_length=10,
                    ),
                ),
                (
                    "mcq_option",
                    models.PositiveSmallIntegerField(
                        blank=True,
                        null=True,
                        validators=[
                            django.core.validators.MinValueValidator(1),
                            django.core.validators.MaxValueValidator(5),
                        ],
                    ),
                ),
                ("text_answer", models.TextField(blank=True, null=True)),
                (
                    "sheet",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="responses",
                        to="answer_sheets.answersheet",
                    ),
                ),
            ],
            options={
                "db_table": "answer_sheet_responses",
                "ordering": ["question_number"],
                "unique_together": {("sheet", "question_number")},
            },
        ),
    ]
