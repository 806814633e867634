from django.contrib import admin

from .models import GradeUsageLog, TestRecord, TestResultRecord


@admin.register(TestRecord)
class TestRecordAdmin(admin.ModelAdmin):
    list_display = ("id", "owner", "subject", "exam_kind", "test_name", "test_date")
    list_filter = ("subject", "exam_kind")
    search_fields = ("test_name", "owner__username")


@admin.register(TestResultRecord)
class TestResultRecordAdmin(admin.ModelAdmin):
    list_display = ("id", "test", "owner", "raw_score", "grade", "updated_at")


@admin.register(GradeUsageLog)
class GradeUsageLogAdmin(admin.ModelAdmin):
    list_display = ("id", "sheet", "template", "graded_by", "graded_at", "score", "max_score")
    list_filter = ("template",)
