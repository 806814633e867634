# apps/domains/answer_keys/migrations/0001_initial.py
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
            name="AnswerKeyCategory",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("name", models.CharField(max_length=100, unique=True)),
                ("description", models.TextField(blank=True, default="")),
                (
                    "color",
                    models.CharField(
                        default="#007AFF",
                        max_length=7,
                        validators=[
                            django.core.validators.RegexValidator("^#[0-9A-Fa-f]{6}$", "color must be #RRGGBB")
                        ],
                    ),
                ),
            ],
            options={
                "db_table": "answer_key_categories",
                "ordering": ["name"],
            },
        ),
        migrations.CreateModel(
            name="AnswerKeyTemplate",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("template_name", models.CharField(max_length=255)),
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
                        default="mock",
                        max_length=20,
                    ),
                ),
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
                ("is_active", models.BooleanField(default=True)),
                ("description", models.TextField(blank=True, default="")),
                (
                    "author",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="answer_key_templates",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
                (
                    "categories",
                    models.ManyToManyField(blank=True, related_name="templates", to="answer_keys.answerkeycategory"),
                ),
            ],
            options={
                "db_table": "answer_key_templates",
                "ordering": ["-created_at", "-id"],
                "indexes": [
                    models.Index(
                        fields=["subject", "exam_kind", "is_active", "created_at"],
                        name="ak_tpl_select_idx",
                    )
                ],
            },
        ),
        migrations.CreateModel(
            name="AnswerKeyResponse",
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
                    "correct_option",
                    models.PositiveSmallIntegerField(
                        blank=True,
                        null=True,
                        validators=[
                            django.core.validators.MinValueValidator(1),
                            django.core.validators.MaxValueValidator(5),
                        ],
                    ),
                ),
                ("correct_text_answers", models.JSONField(blank=True, null=True)),
                (
                    "points_value",
                    models.FloatField(default=1.0, validators=[django.core.validators.MinValueValidator(0)]),
                ),
                (
                    "difficulty",
                    models.CharField(
                        choices=[("easy", "Easy"), ("medium", "Medium"), ("hard", "Hard")],
                        default="medium",
                        max_length=10,
                    ),
                ),
                ("explanation", models.TextField(blank=True, default="")),
                (
                    "template",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="responses",
                        to="answer_keys.answerkeytemplate",
                    ),
                ),
            ],
            options={
                "db_table": "answer_key_responses",
                "ordering": ["question_number"],
                "unique_together": {("template", "question_number")},
            },
        ),
    ]
