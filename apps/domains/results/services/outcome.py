# apps/domains/results/services/outcome.py
"""
submit_sheet 결과 타입

- Submitted            : 제출만 됨 (매칭되는 정답지 없음)
- SubmittedAndGraded   : 제출 + 자동 채점 완료
- SubmittedGradeFailed : 제출은 성공, 자동 채점 중 실패 (reason)

세 경우 모두 제출 자체는 성공이다.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from apps.domains.results.services.grader import GradeResult


@dataclass(frozen=True)
class Submitted:
    sheet: Any
    outcome: str = "submitted"

    def to_dict(self) -> Dict[str, Any]:
        return {"outcome": self.outcome}


@dataclass(frozen=True)
class SubmittedAndGraded:
    sheet: Any
    result: GradeResult
    template_id: Optional[int] = None
    outcome: str = "graded"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "outcome": self.outcome,
            "template_id": self.template_id,
            "result": self.result.to_dict(),
        }


@dataclass(frozen=True)
class SubmittedGradeFailed:
    sheet: Any
    reason: str
    outcome: str = "grade_failed"

    def to_dict(self) -> Dict[str, Any]:
        return {"outcome": self.outcome, "reason": self.reason}


SubmissionOutcome = Union[Submitted, SubmittedAndGraded, SubmittedGradeFailed]
