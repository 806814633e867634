# -*- coding: utf-8 -*-

import django_filters

from .models import AnswerKeyTemplate


# ==================================================
# AnswerKeyTemplate Filter
# ==================================================

class AnswerKeyTemplateFilter(django_filters.FilterSet):
    subject = django_filters.CharFilter(field_name="subject")
    exam_kind = django_filters.CharFilter(field_name="exam_kind")
    # 앱은 testType 이라는 이름으로 보냄
    test_type = django_filters.CharFilter(field_name="exam_kind")
    is_active = django_filters.BooleanFilter(field_name="is_active")
    search = django_filters.CharFilter(field_name="template_name", lookup_expr="icontains")

    class Meta:
        model = AnswerKeyTemplate
        fields = []
