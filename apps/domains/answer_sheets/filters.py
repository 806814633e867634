# -*- coding: utf-8 -*-

import django_filters

from .models import AnswerSheet


def split_multi(value: str):
    """
    콤마(,)로 구분된 문자열을 리스트로 변환 (null-safe)
    """
    if not value:
        return []
    return [v.strip() for v in value.split(",") if v.strip()]


# ==================================================
# AnswerSheet Filter
# ==================================================

class AnswerSheetFilter(django_filters.FilterSet):
    subject = django_filters.CharFilter(field_name="subject")
    exam_kind = django_filters.CharFilter(field_name="exam_kind")
    # status=submitted,graded
    status = django_filters.CharFilter(method="filter_status")
    search = django_filters.CharFilter(field_name="sheet_name", lookup_expr="icontains")

    def filter_status(self, qs, name, value):
        return qs.filter(status__in=split_multi(value))

    class Meta:
        model = AnswerSheet
        fields = []
