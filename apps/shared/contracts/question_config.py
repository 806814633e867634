# apps/shared/contracts/question_config.py
"""
문항 구성(QuestionConfig) 계약

answer key template 과 answer sheet 가 공유하는 "몇 번 문항이 객관식/주관식인가" 정의.
ORM 을 모르는 순수 파이썬. DB 에는 to_list() 결과(JSON)만 저장한다.

불변식:
- question_number 는 1..N 연속 (빈 번호 / 중복 없음)
- N == total_questions
- 늘어날 때는 뒤에 MCQ 추가, 줄어들 때는 뒤에서 잘라냄 (재정렬 없음)
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Literal

from apps.api.common.errors import OutOfRange, ValidationError

QuestionType = Literal["mcq", "text"]

MCQ: QuestionType = "mcq"
TEXT: QuestionType = "text"
QUESTION_TYPES = (MCQ, TEXT)


@dataclass(frozen=True)
class QuestionEntry:
    question_number: int
    type: QuestionType

    def to_dict(self) -> Dict[str, Any]:
        return {"question_number": self.question_number, "type": self.type}


@dataclass
class QuestionConfig:
    entries: List[QuestionEntry] = field(default_factory=list)

    # -----------------------------
    # counts (항상 entries 에서 재계산)
    # -----------------------------
    @property
    def total(self) -> int:
        return len(self.entries)

    @property
    def mcq_count(self) -> int:
        return sum(1 for e in self.entries if e.type == MCQ)

    @property
    def text_count(self) -> int:
        return sum(1 for e in self.entries if e.type == TEXT)

    def type_of(self, question_number: int) -> QuestionType:
        self._check_range(question_number)
        return self.entries[question_number - 1].type

    def set_type(self, question_number: int, type: QuestionType) -> None:
        _check_type(type)
        self._check_range(question_number)
        self.entries[question_number - 1] = QuestionEntry(question_number, type)

    def _check_range(self, question_number: int) -> None:
        if not isinstance(question_number, int) or not (1 <= question_number <= self.total):
            raise OutOfRange(
                f"question {question_number} is out of range (1..{self.total})"
            )

    # -----------------------------
    # JSON
    # -----------------------------
    def to_list(self) -> List[Dict[str, Any]]:
        return [e.to_dict() for e in self.entries]

    @staticmethod
    def from_list(raw: Iterable[Dict[str, Any]]) -> "QuestionConfig":
        """
        저장/입력된 JSON 을 검증하면서 복원.
        입력 순서와 무관하게 번호 기준으로 정렬 후 1..N 연속성 검사.
        """
        if raw is None:
            raise ValidationError("question_config must be a list")

        parsed: Dict[int, QuestionType] = {}
        for item in raw:
            if not isinstance(item, dict):
                raise ValidationError("question_config items must be objects")
            try:
                number = int(item.get("question_number"))
            except (TypeError, ValueError):
                raise ValidationError("question_config.question_number must be an integer")
            qtype = str(item.get("type") or "").lower()
            _check_type(qtype)
            if number in parsed:
                raise ValidationError(f"duplicate question_number {number} in question_config")
            parsed[number] = qtype  # type: ignore[assignment]

        expected = list(range(1, len(parsed) + 1))
        if sorted(parsed) != expected:
            raise ValidationError("question_config numbers must be contiguous starting at 1")

        return QuestionConfig([QuestionEntry(n, parsed[n]) for n in expected])


def _check_type(type: str) -> None:
    if type not in QUESTION_TYPES:
        raise ValidationError(f"unknown question type: {type!r}")


# ============================================================
# operations
# ============================================================

def initialize(mcq: int, text: int) -> QuestionConfig:
    """
    기본 레이아웃: 1..mcq 는 MCQ, mcq+1..mcq+text 는 TEXT.
    """
    if mcq < 0 or text < 0:
        raise ValidationError("question counts must be >= 0")

    entries = [QuestionEntry(n, MCQ) for n in range(1, mcq + 1)]
    entries += [QuestionEntry(mcq + i, TEXT) for i in range(1, text + 1)]
    return QuestionConfig(entries)


def resize(current: QuestionConfig, new_total: int) -> QuestionConfig:
    """
    min(old, new) 까지는 기존 타입 유지, 줄면 잘라내고 늘면 MCQ 로 채운다.
    """
    if new_total < 0:
        raise ValidationError("total_questions must be >= 0")

    kept = list(current.entries[:new_total])
    kept += [QuestionEntry(n, MCQ) for n in range(len(kept) + 1, new_total + 1)]
    return QuestionConfig(kept)


def set_type(config: QuestionConfig, question_number: int, type: QuestionType) -> QuestionConfig:
    config.set_type(question_number, type)
    return config
