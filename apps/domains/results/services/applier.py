# apps/domains/results/services/applier.py
from __future__ import annotations

from datetime import date
from typing import Optional

from django.db import transaction

from apps.domains.results.models import TestRecord, TestResultRecord


class ResultApplier:
    """
    채점 결과를 성적 이력(TestRecord / TestResultRecord)에 반영
    ❌ 계산 없음

    둘 다 자연키 update_or_create:
    같은 답안지를 몇 번 채점해도 행 수는 늘지 않는다.
    """

    @staticmethod
    @transaction.atomic
    def upsert_test_record(
        *,
        owner,
        subject: str,
        exam_kind: str,
        test_name: str,
        test_date: Optional[date] = None,
    ) -> TestRecord:
        record, _ = TestRecord.objects.update_or_create(
            owner=owner,
            subject=subject,
            exam_kind=exam_kind,
            test_name=test_name,
            defaults={"test_date": test_date},
        )
        return record

    @staticmethod
    @transaction.atomic
    def upsert_test_result(
        *,
        test: TestRecord,
        owner,
        raw_score: float,
        standard_score: Optional[float] = None,
        percentile: Optional[float] = None,
        grade: Optional[int] = None,
    ) -> TestResultRecord:
        result, _ = TestResultRecord.objects.update_or_create(
            test=test,
            owner=owner,
            defaults={
                "raw_score": raw_score,
                "standard_score": standard_score,
                "percentile": percentile,
                "grade": grade,
            },
        )
        return result
