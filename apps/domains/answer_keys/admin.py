from django.contrib import admin

from .models import AnswerKeyCategory, AnswerKeyResponse, AnswerKeyTemplate


class AnswerKeyResponseInline(admin.TabularInline):
    model = AnswerKeyResponse
    extra = 0
    ordering = ("question_number",)


@admin.register(AnswerKeyTemplate)
class AnswerKeyTemplateAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "template_name",
        "subject",
        "exam_kind",
        "total_questions",
        "is_active",
        "created_at",
    )
    list_filter = ("subject", "exam_kind", "is_active")
    search_fields = ("template_name",)
    inlines = [AnswerKeyResponseInline]


@admin.register(AnswerKeyCategory)
class AnswerKeyCategoryAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "color")
    search_fields = ("name",)
