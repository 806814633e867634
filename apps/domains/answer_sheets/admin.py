from django.contrib import admin

from .models import AnswerSheet, AnswerSheetResponse


class AnswerSheetResponseInline(admin.TabularInline):
    model = AnswerSheetResponse
    extra = 0
    ordering = ("question_number",)


@admin.register(AnswerSheet)
class AnswerSheetAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "sheet_name",
        "owner",
        "subject",
        "exam_kind",
        "status",
        "score",
        "submitted_at",
    )
    list_filter = ("status", "subject", "exam_kind")
    search_fields = ("sheet_name", "owner__username")
    readonly_fields = ("answered_count", "mcq_answered", "text_answered", "completion_percentage")
    inlines = [AnswerSheetResponseInline]
