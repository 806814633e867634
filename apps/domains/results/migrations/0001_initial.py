# apps/domains/results/migrations/0001_initial.py
import django.core.validators
import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ("answer_keys", "0001_initial"),
        ("answer_sheets", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="TestRecord",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("subject", models.CharField(max_length=20)),
                ("exam_kind", models.CharField(max_length=20)),
                ("test_name", models.CharField(max_length=255)),
                ("test_date", models.DateField(blank=True, null=True)),
                (
                    "owner",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="test_records",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "db_table": "results_test_record",
                "ordering": ["-test_date", "-id"],
                "unique_together": {("owner", "subject", "exam_kind", "test_name")},
            },
        ),
        migrations.CreateModel(
            name="TestResultRecord",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("raw_score", models.FloatField(blank=True, null=True)),
                ("standard_score", models.FloatField(blank=True, null=True)),
                (
                    "percentile",
                    models.FloatField(
                        blank=True,
                        null=True,
                        validators=[
                            django.core.validators.MinValueValidator(0),
                            django.core.validators.MaxValueValidator(100),
                        ],
                    ),
                ),
                (
                    "grade",
                    models.PositiveSmallIntegerField(
                        blank=True,
                        null=True,
                        validators=[
                            django.core.validators.MinValueValidator(1),
                            django.core.validators.MaxValueValidator(9),
                        ],
                    ),
                ),
                (
                    "owner",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="test_results",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
                (
                    "test",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="results",
                        to="results.testrecord",
                    ),
                ),
            ],
            options={
                "db_table": "results_test_result",
                "unique_together": {("test", "owner")},
            },
        ),
        migrations.CreateModel(
            name="GradeUsageLog",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("graded_at", models.DateTimeField(db_index=True, default=django.utils.timezone.now)),
                ("score", models.FloatField(default=0.0)),
                ("max_score", models.FloatField(default=0.0)),
                ("correct_count", models.PositiveIntegerField(default=0)),
                (
                    "graded_by",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="grade_logs",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
                (
                    "sheet",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="grade_logs",
                        to="answer_sheets.answersheet",
                    ),
                ),
                (
                    "template",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="usage_logs",
                        to="answer_keys.answerkeytemplate",
                    ),
                ),
            ],
            options={
                "db_table": "results_grade_usage_log",
                "ordering": ["-graded_at", "-id"],
                "indexes": [
                    models.Index(fields=["sheet", "graded_at"], name="grade_log_sheet_idx"),
                    models.Index(fields=["template", "graded_at"], name="grade_log_tpl_idx"),
                ],
            },
        ),
    ]
