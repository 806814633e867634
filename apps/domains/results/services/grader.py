# apps/domains/results/services/grader.py
"""
채점 알고리즘 (순수 함수, DB 접근 없음)

key / answer 는 속성만 보면 된다 (ORM row 든 dataclass 든):
  key:    question_number, question_type, correct_option, correct_text_answers, points_value
  answer: question_number, question_type, mcq_option, text_answer

정책:
- MCQ  : mcq_option == correct_option (정수 완전 일치)
- TEXT : strip().lower() 한 답이 strip().lower() 한 정답 목록 안에 있으면 정답
- 한쪽에만 있는 문항 번호는 0점 (오류 아님)
- max_score 는 정답지의 total_questions (응답에서 다시 계산하지 않음)
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Tuple

from apps.shared.contracts.question_config import MCQ, TEXT


@dataclass(frozen=True)
class QuestionGrade:
    question_number: int
    question_type: str
    is_correct: bool
    score: float
    points_value: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "question_number": self.question_number,
            "question_type": self.question_type,
            "is_correct": self.is_correct,
            "score": self.score,
            "points_value": self.points_value,
        }


@dataclass(frozen=True)
class GradeResult:
    score: float
    max_score: float
    correct_count: int
    items: Tuple[QuestionGrade, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "max_score": self.max_score,
            "correct_count": self.correct_count,
            "items": [i.to_dict() for i in self.items],
        }


def _norm(s: Optional[str]) -> str:
    return (s or "").strip().lower()


def is_mcq_correct(mcq_option: Any, correct_option: Any) -> bool:
    if mcq_option is None or correct_option is None:
        return False
    if isinstance(mcq_option, bool) or isinstance(correct_option, bool):
        return False
    return mcq_option == correct_option


def is_text_correct(text_answer: Optional[str], correct_text_answers: Optional[Iterable[str]]) -> bool:
    ans = _norm(text_answer)
    if ans == "" or not correct_text_answers:
        return False
    accepted = {_norm(a) for a in correct_text_answers if a is not None}
    accepted.discard("")
    return ans in accepted


def grade_question(key: Any, answer: Any) -> QuestionGrade:
    points = float(key.points_value or 0.0)
    qtype = str(key.question_type)

    if qtype == MCQ:
        ok = is_mcq_correct(getattr(answer, "mcq_option", None), key.correct_option)
    elif qtype == TEXT:
        ok = is_text_correct(getattr(answer, "text_answer", None), key.correct_text_answers)
    else:
        ok = False

    return QuestionGrade(
        question_number=int(key.question_number),
        question_type=qtype,
        is_correct=ok,
        score=points if ok else 0.0,
        points_value=points,
    )


def grade(key_responses: Iterable[Any], sheet_responses: Iterable[Any], *, max_score: float) -> GradeResult:
    keys_by_number = {int(k.question_number): k for k in key_responses}

    items: List[QuestionGrade] = []
    for answer in sorted(sheet_responses, key=lambda a: int(a.question_number)):
        key = keys_by_number.get(int(answer.question_number))
        if key is None:
            continue
        items.append(grade_question(key, answer))

    return GradeResult(
        score=float(sum(i.score for i in items)),
        max_score=float(max_score),
        correct_count=sum(1 for i in items if i.is_correct),
        items=tuple(items),
    )
